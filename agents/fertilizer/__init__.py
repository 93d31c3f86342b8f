"""
Fertilizer agent package
"""

from .agent import FertilizerAgent
from .models import FertilizerDecision, FertilizerRequest

__all__ = ["FertilizerAgent", "FertilizerDecision", "FertilizerRequest"]
