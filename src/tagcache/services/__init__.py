"""Cache services - engine, metrics sinks and factory."""

from .tagged_cache import TaggedCache
from .metrics import InMemoryCacheMetrics, NullCacheMetrics
from .factory import create_tagged_cache, create_store

__all__ = [
    "TaggedCache",
    "InMemoryCacheMetrics",
    "NullCacheMetrics",
    "create_tagged_cache",
    "create_store",
]
