"""Assemble a TaggedCache from settings."""

import logging
from typing import Optional

from ..adapters import RedisStoreAdapter, NullStoreAdapter
from ..entities.config import CacheSettings
from ..entities.protocols import StoreAdapter, Codec, CacheMetrics
from ..serializers import create_codec
from .tagged_cache import TaggedCache

logger = logging.getLogger(__name__)


def create_store(settings: CacheSettings) -> StoreAdapter:
    """Create the store adapter selected by settings."""
    if not settings.enabled:
        logger.warning("Cache backend disabled - every lookup will miss")
        return NullStoreAdapter()
    return RedisStoreAdapter(config=settings.to_redis_config())


def create_tagged_cache(
    settings: Optional[CacheSettings] = None,
    store: Optional[StoreAdapter] = None,
    codec: Optional[Codec] = None,
    metrics: Optional[CacheMetrics] = None,
) -> TaggedCache:
    """Create a cache engine.
    
    Explicit collaborators win over the ones derived from settings.
    
    Args:
        settings: Cache settings, read from the environment when omitted
        store: Store adapter override
        codec: Codec override
        metrics: Metrics sink override
        
    Returns:
        Configured TaggedCache
    """
    settings = settings or CacheSettings()
    return TaggedCache(
        store=store or create_store(settings),
        codec=codec or create_codec(settings.serialization_format),
        metrics=metrics,
        tag_prefix=settings.tag_prefix,
    )
