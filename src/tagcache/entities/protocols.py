"""Cache protocols for tagcache.

This module defines the capability interfaces the cache engine consumes:
the store adapter, the codec and the metrics sink. Implementations live in
``tagcache.adapters``, ``tagcache.serializers`` and ``tagcache.services``.
"""

from abc import abstractmethod
from datetime import timedelta
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Set, runtime_checkable


class SerializationFormat(str, Enum):
    """Serialization formats for cache values."""
    MSGPACK = "msgpack"
    JSON = "json"
    PICKLE = "pickle"


@runtime_checkable
class StoreAdapter(Protocol):
    """Protocol for key-value backends.
    
    Each call is atomic from the engine's point of view; a sequence of
    calls is not transactional.
    """
    
    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes by key, None when the key does not exist."""
        ...
    
    @abstractmethod
    def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        """Set key with overwrite semantics. A zero ttl means no explicit expiry."""
        ...
    
    @abstractmethod
    def delete(self, *keys: str) -> None:
        """Delete keys, ignoring keys that do not exist."""
        ...
    
    @abstractmethod
    def add_to_set(self, set_key: str, member: str) -> None:
        """Add member to the set at set_key, creating the set if absent."""
        ...
    
    @abstractmethod
    def set_members(self, set_key: str) -> Set[str]:
        """Get members of the set at set_key, empty when absent."""
        ...


@runtime_checkable
class Codec(Protocol):
    """Protocol for cache value (de)serialization.
    
    ``encode(None)`` must produce ``b""`` and ``decode(b"")`` must produce
    ``None``.
    """
    
    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode value to bytes."""
        ...
    
    @abstractmethod
    def decode(self, data: bytes, into: Optional[Any] = None) -> Any:
        """Decode bytes, optionally rebuilding the result as ``into``."""
        ...


@runtime_checkable
class CacheMetrics(Protocol):
    """Protocol for hit/miss accounting."""
    
    @abstractmethod
    def record_hit(self, key: str) -> None:
        """Record cache hit."""
        ...
    
    @abstractmethod
    def record_miss(self, key: str) -> None:
        """Record cache miss."""
        ...
    
    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        ...
