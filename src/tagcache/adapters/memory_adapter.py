"""In-process store adapter for tagcache."""

import logging
import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Dict, Optional, Set, Union

from ..core.exceptions import BackendError

logger = logging.getLogger(__name__)


@dataclass
class MemoryStoreEntry:
    """Memory store entry holding either bytes or a set of members."""
    value: Union[bytes, Set[str]]
    expires_at: Optional[float] = None
    
    def is_expired(self, now: float) -> bool:
        """Check if entry is expired."""
        return self.expires_at is not None and now >= self.expires_at


class MemoryStoreAdapter:
    """Thread-safe in-memory store with TTL enforced on access.
    
    Intended for development and tests. Each operation holds the lock, so
    individual calls are atomic like their Redis counterparts.
    """
    
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, MemoryStoreEntry] = {}
        self._lock = threading.RLock()
    
    def _live_entry(self, key: str) -> Optional[MemoryStoreEntry]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            logger.debug(f"Memory store entry expired: {key}")
            return None
        return entry
    
    @staticmethod
    def _check_type(key: str, entry: Optional[MemoryStoreEntry], expected: type, operation: str) -> None:
        # same collision Redis reports as WRONGTYPE
        if entry is not None and not isinstance(entry.value, expected):
            raise BackendError(
                f"WRONGTYPE Operation against a key holding the wrong kind of value: {key}",
                details={"operation": operation, "key": key},
            )
    
    def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes by key, None when absent or expired."""
        with self._lock:
            entry = self._live_entry(key)
            self._check_type(key, entry, bytes, "get")
            return entry.value if entry is not None else None
    
    def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        """Set key, without expiry when ttl is zero."""
        expires_at = None
        if ttl > timedelta(0):
            expires_at = self._clock() + ttl.total_seconds()
        with self._lock:
            self._entries[key] = MemoryStoreEntry(value=bytes(value), expires_at=expires_at)
    
    def delete(self, *keys: str) -> None:
        """Delete keys, ignoring absent ones."""
        with self._lock:
            for key in keys:
                self._entries.pop(key, None)
    
    def add_to_set(self, set_key: str, member: str) -> None:
        """Add member to the set at set_key."""
        with self._lock:
            entry = self._live_entry(set_key)
            self._check_type(set_key, entry, set, "sadd")
            if entry is None:
                entry = MemoryStoreEntry(value=set())
                self._entries[set_key] = entry
            entry.value.add(member)
    
    def set_members(self, set_key: str) -> Set[str]:
        """Get a copy of the set at set_key."""
        with self._lock:
            entry = self._live_entry(set_key)
            self._check_type(set_key, entry, set, "smembers")
            if entry is None:
                return set()
            return set(entry.value)
    
    def ttl(self, key: str) -> Optional[float]:
        """Get remaining lifetime in seconds, None if absent or without expiry."""
        with self._lock:
            entry = self._live_entry(key)
            if entry is None or entry.expires_at is None:
                return None
            return entry.expires_at - self._clock()
    
    def keys(self) -> Set[str]:
        """Get all live keys."""
        with self._lock:
            return {key for key in list(self._entries) if self._live_entry(key) is not None}
    
    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()
