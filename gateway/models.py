# gateway/models.py
"""
Pydantic models for the connectivity/sync gateway
"""
from pydantic import BaseModel, Field
from typing import Any, Optional
from datetime import datetime, timezone
from enum import Enum

class ConnectivityState(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    RETRYING = "retrying"

class PendingRequest(BaseModel):
    """A state-changing request answered locally, waiting to be replayed"""
    method: str
    path: str
    payload: Optional[Any] = None
    queued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
