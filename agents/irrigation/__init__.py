"""
Irrigation agent package
"""

from .agent import IrrigationAgent
from .models import IrrigationAction, IrrigationRequest, IrrigationVerdict

__all__ = ["IrrigationAgent", "IrrigationAction", "IrrigationRequest", "IrrigationVerdict"]
