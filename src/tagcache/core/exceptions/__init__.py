"""Exception hierarchy for tagcache."""

from .base import TagCacheError, create_error_response
from .cache import (
    CacheMiss,
    BackendError,
    CacheConnectionError,
    CacheTimeoutError,
    TagFlushError,
    CodecError,
    EncodeError,
    DecodeError,
    CacheConfigurationError,
)

__all__ = [
    "TagCacheError",
    "create_error_response",
    "CacheMiss",
    "BackendError",
    "CacheConnectionError",
    "CacheTimeoutError",
    "TagFlushError",
    "CodecError",
    "EncodeError",
    "DecodeError",
    "CacheConfigurationError",
]
