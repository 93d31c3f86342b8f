"""
Alert agent package
"""

from .agent import AlertAgent
from .models import AlertKind, AlertRecord, AlertSeverity, AlertSweep
from .service import URGENCY_SEVERITY, evaluate_alerts

__all__ = [
    "AlertAgent", "AlertKind", "AlertRecord", "AlertSeverity", "AlertSweep",
    "URGENCY_SEVERITY", "evaluate_alerts"
]
