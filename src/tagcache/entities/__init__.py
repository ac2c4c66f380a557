"""Cache entities - protocols, configuration and expiration policy."""

from .protocols import StoreAdapter, Codec, CacheMetrics, SerializationFormat
from .config import CacheSettings, RedisStoreConfig, DEFAULT_TAG_PREFIX
from .ttl import normalize_ttl, to_timedelta, NO_EXPIRY, DEFAULT_TTL

__all__ = [
    "StoreAdapter",
    "Codec",
    "CacheMetrics",
    "SerializationFormat",
    "CacheSettings",
    "RedisStoreConfig",
    "DEFAULT_TAG_PREFIX",
    "normalize_ttl",
    "to_timedelta",
    "NO_EXPIRY",
    "DEFAULT_TTL",
]
