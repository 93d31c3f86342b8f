"""
Crop health agent package
"""

from .agent import CropHealthAgent
from .models import CropHealthReport, CropHealthRequest

__all__ = ["CropHealthAgent", "CropHealthReport", "CropHealthRequest"]
