"""Store adapters - implementations of the StoreAdapter protocol.

Available implementations:
- RedisStoreAdapter: Redis backend (production)
- MemoryStoreAdapter: Thread-safe in-process store with TTL
- NullStoreAdapter: No backend configured, always misses
"""

from .redis_adapter import RedisStoreAdapter
from .memory_adapter import MemoryStoreAdapter
from .null_adapter import NullStoreAdapter

__all__ = ["RedisStoreAdapter", "MemoryStoreAdapter", "NullStoreAdapter"]
