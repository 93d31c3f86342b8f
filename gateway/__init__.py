"""
Connectivity/sync gateway package
"""

from .client import AdvisoryGateway
from .fallback import LocalFallback
from .models import ConnectivityState, PendingRequest

__all__ = ["AdvisoryGateway", "LocalFallback", "ConnectivityState", "PendingRequest"]
