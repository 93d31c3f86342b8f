# core/cache.py
"""
Key-value store boundary used for queued requests and last-known data
"""
import math
from typing import Any, Optional, Protocol, Tuple
from cachetools import TLRUCache

class KeyValueStore(Protocol):
    """Opaque persistence capability the core calls into"""

    async def get(self, key: str) -> Optional[Any]:
        ...

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        ...

def _time_to_use(key: str, entry: Tuple[Any, Optional[int]], now: float) -> float:
    ttl = entry[1]
    return math.inf if ttl is None else now + ttl

class CacheManager:
    """In-memory key-value store; entries without a TTL never expire"""

    def __init__(self, max_size: int = 1000):
        self._cache = TLRUCache(maxsize=max_size, ttu=_time_to_use)

    async def get(self, key: str) -> Optional[Any]:
        """Get value from cache"""
        entry = self._cache.get(key)
        return None if entry is None else entry[0]

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Set value, optionally expiring after ttl seconds"""
        self._cache[key] = (value, ttl)
