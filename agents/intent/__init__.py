"""
Intent classification agent package
"""

from .agent import IntentAgent
from .models import Intent, IntentEntities, IntentResult, NavigationTarget, UtteranceRequest

__all__ = [
    "IntentAgent", "Intent", "IntentEntities", "IntentResult",
    "NavigationTarget", "UtteranceRequest"
]
