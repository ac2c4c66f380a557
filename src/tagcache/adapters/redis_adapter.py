"""Redis store adapter for tagcache."""

import logging
from datetime import timedelta
from typing import Any, Dict, Optional, Set

from redis import Redis
from redis.exceptions import (
    RedisError,
    ConnectionError as RedisConnectionError,
    TimeoutError as RedisTimeoutError,
)

from ..entities.config import RedisStoreConfig
from ..core.exceptions import (
    BackendError,
    CacheConnectionError,
    CacheTimeoutError,
)

logger = logging.getLogger(__name__)


def _translate_error(operation: str, key: str, error: RedisError) -> BackendError:
    """Map a redis-py exception onto the backend error taxonomy."""
    message = f"Redis {operation} error for key {key}: {error}"
    details = {"operation": operation, "key": key}
    if isinstance(error, RedisTimeoutError):
        return CacheTimeoutError(message, details=details)
    if isinstance(error, RedisConnectionError):
        return CacheConnectionError(message, details=details)
    return BackendError(message, details=details)


class RedisStoreAdapter:
    """Synchronous Redis store adapter.
    
    The client is shared and never reconfigured at call time. Values are
    stored as raw bytes, tag-sets as Redis sets.
    """
    
    def __init__(self, client: Optional[Redis] = None, config: Optional[RedisStoreConfig] = None):
        if client is None:
            config = config or RedisStoreConfig()
            client = self._create_client(config)
        self.config = config
        self.redis_client = client
    
    @staticmethod
    def _create_client(config: RedisStoreConfig) -> Redis:
        """Create a bytes-mode Redis client from configuration."""
        connection_kwargs = config.to_connection_kwargs()
        if config.url:
            client = Redis.from_url(config.url, **connection_kwargs)
            logger.info("Redis store configured from URL")
        else:
            client = Redis(**connection_kwargs)
            logger.info(f"Redis store configured: {config.host}:{config.port}/{config.database}")
        return client
    
    def get(self, key: str) -> Optional[bytes]:
        """Get raw bytes by key, None when the key does not exist."""
        try:
            return self.redis_client.get(key)
        except RedisError as e:
            raise _translate_error("get", key, e) from e
    
    def set(self, key: str, value: bytes, ttl: timedelta) -> None:
        """Set key, without expiry when ttl is zero."""
        try:
            if ttl > timedelta(0):
                self.redis_client.set(key, value, px=int(ttl.total_seconds() * 1000))
            else:
                self.redis_client.set(key, value)
        except RedisError as e:
            raise _translate_error("set", key, e) from e
    
    def delete(self, *keys: str) -> None:
        """Delete keys in a single DEL call."""
        if not keys:
            return
        try:
            self.redis_client.delete(*keys)
        except RedisError as e:
            raise _translate_error("delete", ",".join(keys), e) from e
    
    def add_to_set(self, set_key: str, member: str) -> None:
        """Add member to a Redis set."""
        try:
            self.redis_client.sadd(set_key, member)
        except RedisError as e:
            raise _translate_error("sadd", set_key, e) from e
    
    def set_members(self, set_key: str) -> Set[str]:
        """Get members of a Redis set as strings."""
        try:
            members = self.redis_client.smembers(set_key)
        except RedisError as e:
            raise _translate_error("smembers", set_key, e) from e
        try:
            return {m.decode() if isinstance(m, bytes) else m for m in members}
        except UnicodeDecodeError as e:
            raise BackendError(
                f"Redis smembers error for key {set_key}: member is not valid UTF-8: {e}",
                details={"operation": "smembers", "key": set_key},
            ) from e
    
    def ping(self) -> bool:
        """Check Redis health."""
        try:
            return bool(self.redis_client.ping())
        except RedisError as e:
            logger.error(f"Redis health check failed: {e}")
            return False
    
    def info(self) -> Dict[str, Any]:
        """Get store information."""
        if self.config is None:
            return {"backend_type": "redis", "configured": "client"}
        return {
            "backend_type": "redis",
            "host": self.config.host,
            "port": self.config.port,
            "database": self.config.database,
            "url_configured": bool(self.config.url),
        }
    
    def close(self) -> None:
        """Close the Redis connection pool."""
        try:
            self.redis_client.close()
        except RedisError as e:
            logger.error(f"Error closing Redis connection: {e}")
