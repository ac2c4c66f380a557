"""Null store adapter for running without a backend.

Every read misses and every write is dropped, so the engine degrades to
computing values on each call without special-casing a missing backend.
"""

from datetime import timedelta
from typing import Optional, Set


class NullStoreAdapter:
    """No-op store - always misses."""
    
    def get(self, key: str) -> Optional[bytes]:
        return None
    
    def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        pass
    
    def delete(self, *keys: str) -> None:
        pass
    
    def add_to_set(self, set_key: str, member: str) -> None:
        pass
    
    def set_members(self, set_key: str) -> Set[str]:
        return set()
