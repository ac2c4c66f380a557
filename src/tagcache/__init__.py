"""tagcache - cache-aside layer with tag-indexed invalidation.

Provides a synchronous cache engine over a key-value store (Redis in
production), pluggable codecs for the stored payload, and bulk
invalidation of keys grouped under tags.
"""

from .__version__ import __version__

from .core.exceptions import (
    TagCacheError,
    CacheMiss,
    BackendError,
    CacheConnectionError,
    CacheTimeoutError,
    TagFlushError,
    CodecError,
    EncodeError,
    DecodeError,
    CacheConfigurationError,
    create_error_response,
)

from .entities import (
    StoreAdapter,
    Codec,
    CacheMetrics,
    SerializationFormat,
    CacheSettings,
    RedisStoreConfig,
    normalize_ttl,
)

from .adapters import RedisStoreAdapter, MemoryStoreAdapter, NullStoreAdapter
from .serializers import MsgpackCodec, JsonCodec, PickleCodec, FunctionCodec, create_codec
from .services import (
    TaggedCache,
    InMemoryCacheMetrics,
    NullCacheMetrics,
    create_tagged_cache,
)
from .config import configure_logging

__all__ = [
    "__version__",
    # Exceptions
    "TagCacheError",
    "CacheMiss",
    "BackendError",
    "CacheConnectionError",
    "CacheTimeoutError",
    "TagFlushError",
    "CodecError",
    "EncodeError",
    "DecodeError",
    "CacheConfigurationError",
    "create_error_response",
    # Protocols and configuration
    "StoreAdapter",
    "Codec",
    "CacheMetrics",
    "SerializationFormat",
    "CacheSettings",
    "RedisStoreConfig",
    "normalize_ttl",
    # Adapters
    "RedisStoreAdapter",
    "MemoryStoreAdapter",
    "NullStoreAdapter",
    # Codecs
    "MsgpackCodec",
    "JsonCodec",
    "PickleCodec",
    "FunctionCodec",
    "create_codec",
    # Engine
    "TaggedCache",
    "InMemoryCacheMetrics",
    "NullCacheMetrics",
    "create_tagged_cache",
    "configure_logging",
]
