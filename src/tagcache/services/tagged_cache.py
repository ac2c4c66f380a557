"""Cache-aside engine with tag-indexed invalidation.

The engine keeps no authoritative state of its own: values and tag-sets
live in the store adapter, and the engine only orders calls against it.

Consistency notes:

- Within one ``cache`` call the value is stored before its tags are
  recorded. Two concurrent misses on the same key both run their producer
  and the last store wins; there is no single-flight.
- ``flush_tags`` reads a tag-set and then deletes its members together
  with the tag-set key. A key tagged between the read and the delete keeps
  its value but loses its tag membership, so it survives the flush until
  its own ttl expires. This window is accepted, not guarded against.
- Tag-sets only grow between flushes. Members whose value already expired
  are harmless since deleting an absent key is a no-op.
"""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, TypeVar

from ..entities.protocols import StoreAdapter, Codec, CacheMetrics
from ..entities.config import DEFAULT_TAG_PREFIX
from ..entities.ttl import TTL, normalize_ttl
from ..core.exceptions import (
    CacheMiss,
    BackendError,
    EncodeError,
    DecodeError,
    TagFlushError,
)
from ..serializers import MsgpackCodec
from ..serializers.types import restore
from .metrics import InMemoryCacheMetrics

logger = logging.getLogger(__name__)
T = TypeVar("T")


def _as_tags(tags: Optional[Iterable[str]]) -> Iterable[str]:
    # a bare string is one tag, not an iterable of characters
    if tags is None:
        return ()
    if isinstance(tags, str):
        return (tags,)
    return tags


class TaggedCache:
    """Cache-aside front end over a key-value store.
    
    Example:
        cache = TaggedCache(RedisStoreAdapter(config=RedisStoreConfig()))
        user = cache.cache(
            f"user:{user_id}",
            lambda: repository.load_user(user_id),
            ttl=timedelta(minutes=10),
            tags=["users", f"tenant:{tenant_id}"],
            into=User,
        )
        cache.flush_tags(["users"])
    """
    
    def __init__(
        self,
        store: StoreAdapter,
        codec: Optional[Codec] = None,
        metrics: Optional[CacheMetrics] = None,
        tag_prefix: str = DEFAULT_TAG_PREFIX,
    ):
        self.store = store
        self.codec = codec or MsgpackCodec()
        self.metrics = metrics or InMemoryCacheMetrics()
        self.tag_prefix = tag_prefix
    
    def tag_key(self, tag: str) -> str:
        """Backend key of the tag-set for ``tag``."""
        return self.tag_prefix + tag
    
    # Lookup
    
    def _get_bytes(self, key: str) -> bytes:
        try:
            data = self.store.get(key)
        except BackendError as e:
            logger.error(f"cache: Get key={key!r} failed: {e}")
            raise
        
        if data is None:
            self.metrics.record_miss(key)
            raise CacheMiss(key)
        
        self.metrics.record_hit(key)
        return data
    
    def exists(self, key: str) -> bool:
        """Check whether ``key`` is cached, without decoding its payload.
        
        Raises:
            BackendError: If the backend call fails
        """
        try:
            self._get_bytes(key)
        except CacheMiss:
            return False
        return True
    
    def get(self, key: str, into: Optional[Any] = None) -> Any:
        """Get and decode the value cached under ``key``.
        
        Args:
            key: Cache key
            into: Optional shape to rebuild the value as (pydantic model,
                dataclass or callable)
            
        Returns:
            Decoded value, None for an empty payload
            
        Raises:
            CacheMiss: If the key is absent
            BackendError: If the backend call fails
            DecodeError: If the payload cannot be decoded
        """
        data = self._get_bytes(key)
        if not data:
            return None
        
        try:
            return self.codec.decode(data, into)
        except DecodeError as e:
            logger.error(f"cache: key={key!r} decode({into!r}) failed: {e}")
            raise
        except Exception as e:
            logger.error(f"cache: key={key!r} decode({into!r}) failed: {e}")
            raise DecodeError(f"Decoding key {key!r} failed: {e}", original_error=e) from e
    
    # Cache-aside
    
    def cache(
        self,
        key: str,
        producer: Callable[[], T],
        ttl: TTL,
        tags: Optional[Iterable[str]] = None,
        into: Optional[Any] = None,
    ) -> T:
        """Return the cached value for ``key``, computing and storing it on a miss.
        
        On a miss the producer runs, its result is stored with the
        normalized ttl and the key is added to every tag-set in ``tags``.
        A producer exception propagates unchanged and nothing is written.
        A fresh value is rebuilt as ``into`` like a cached one, so hits and
        misses return the same type.
        
        Args:
            key: Cache key
            producer: Zero-argument callable computing the value
            ttl: Requested lifetime as timedelta or seconds
            tags: Tags to register the key under
            into: Optional shape to rebuild a cached value as
            
        Returns:
            Cached or freshly computed value
            
        Raises:
            BackendError: If the lookup or the store call fails; after a
                failed store the computed value is on ``error.value``
            DecodeError: If a cached payload cannot be decoded
            EncodeError: If the computed value cannot be encoded
        """
        try:
            return self.get(key, into)
        except CacheMiss:
            pass
        
        value = producer()
        
        payload = self._encode(key, value)
        
        store_error: Optional[BackendError] = None
        try:
            self.store.set(key, payload, normalize_ttl(ttl))
        except BackendError as e:
            logger.error(f"cache: Set key={key!r} failed: {e}")
            store_error = e
        
        self.set_tags(key, tags)
        
        if into is not None:
            value = self._restore(key, value, into)
        if store_error is not None:
            store_error.value = value
            raise store_error
        return value
    
    def _restore(self, key: str, value: Any, into: Any) -> Any:
        try:
            return restore(value, into)
        except Exception as e:
            logger.error(f"cache: key={key!r} restore({into!r}) failed: {e}")
            raise DecodeError(f"Rebuilding key {key!r} failed: {e}", original_error=e) from e
    
    def _encode(self, key: str, value: Any) -> bytes:
        try:
            return self.codec.encode(value)
        except EncodeError as e:
            logger.error(f"cache: encode key={key!r} failed: {e}")
            raise
        except Exception as e:
            logger.error(f"cache: encode key={key!r} failed: {e}")
            raise EncodeError(f"Encoding key {key!r} failed: {e}", original_error=e) from e
    
    # Tag index
    
    def set_tags(self, key: str, tags: Optional[Iterable[str]]) -> None:
        """Register ``key`` under each tag. Failures are logged, not raised."""
        for tag in _as_tags(tags):
            try:
                self.store.add_to_set(self.tag_key(tag), key)
            except BackendError as e:
                logger.error(f"cache: tag {tag!r} for key={key!r} failed: {e}")
    
    # Invalidation
    
    def flush(self, key: str) -> None:
        """Delete ``key``. Deleting an absent key is not an error.
        
        Raises:
            BackendError: If the backend call fails
        """
        try:
            self.store.delete(key)
        except BackendError as e:
            logger.error(f"cache: Del key={key!r} failed: {e}")
            raise
    
    def flush_tags(self, tags: Iterable[str]) -> None:
        """Delete every key registered under each tag, and the tag-sets.
        
        Tags are flushed independently; a failing tag does not stop the
        others. Tags with no members issue no delete.
        
        Raises:
            TagFlushError: After all tags were attempted, if any failed
        """
        failures: Dict[str, BackendError] = {}
        for tag in _as_tags(tags):
            try:
                self._flush_tag(tag)
            except BackendError as e:
                logger.error(f"cache: flush tag {tag!r} failed: {e}")
                failures[tag] = e
        
        if failures:
            raise TagFlushError(failures)
    
    def _flush_tag(self, tag: str) -> None:
        tag_key = self.tag_key(tag)
        members = self.store.set_members(tag_key)
        if not members:
            return
        self.store.delete(*sorted(members), tag_key)
        logger.debug(f"cache: flushed tag {tag!r} ({len(members)} keys)")
    
    # Monitoring
    
    def stats(self) -> Dict[str, Any]:
        """Get hit/miss statistics from the metrics sink."""
        return self.metrics.get_stats()
