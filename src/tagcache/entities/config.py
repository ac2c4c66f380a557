"""Cache configuration for tagcache."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .protocols import SerializationFormat

DEFAULT_TAG_PREFIX = "tag:"


class CacheSettings(BaseSettings):
    """Global cache settings, read from ``TAGCACHE_*`` environment variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="TAGCACHE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Backend selection
    enabled: bool = Field(default=True, description="Use Redis; when False every lookup misses")
    
    # Redis configuration
    redis_url: Optional[str] = Field(default=None, description="Redis URL, overrides host/port/db")
    redis_host: str = Field(default="localhost", description="Redis host")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="Redis port")
    redis_db: int = Field(default=0, ge=0, le=15, description="Redis database number")
    redis_password: Optional[str] = Field(default=None, description="Redis password")
    redis_ssl: bool = Field(default=False, description="Use SSL for Redis")
    redis_max_connections: int = Field(default=50, ge=1, description="Max Redis connections")
    redis_connection_timeout: float = Field(default=5, gt=0, description="Redis connection timeout in seconds")
    redis_command_timeout: float = Field(default=3, gt=0, description="Redis command timeout in seconds")
    
    # Engine behaviour
    tag_prefix: str = Field(default=DEFAULT_TAG_PREFIX, description="Key prefix reserved for tag-sets")
    serialization_format: SerializationFormat = Field(
        default=SerializationFormat.MSGPACK, description="Codec used for cached values"
    )
    
    # Logging
    log_level: str = Field(default="INFO", description="Log level for configure_logging")
    log_format: str = Field(default="simple", description="simple, detailed or json")
    
    @field_validator("tag_prefix")
    @classmethod
    def validate_tag_prefix(cls, v: str) -> str:
        """Tag prefix must be non-empty so tag-sets stay out of the key space."""
        if not v:
            raise ValueError("tag_prefix cannot be empty")
        return v
    
    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format name."""
        v = v.lower()
        if v not in ("simple", "detailed", "json"):
            raise ValueError(f"Invalid log format: {v}. Expected simple, detailed or json")
        return v
    
    def to_redis_config(self) -> "RedisStoreConfig":
        """Build the Redis store configuration from these settings."""
        return RedisStoreConfig(
            url=self.redis_url,
            host=self.redis_host,
            port=self.redis_port,
            database=self.redis_db,
            password=self.redis_password,
            ssl=self.redis_ssl,
            max_connections=self.redis_max_connections,
            connection_timeout=self.redis_connection_timeout,
            command_timeout=self.redis_command_timeout,
        )


@dataclass
class RedisStoreConfig:
    """Connection configuration for the Redis store adapter.
    
    Timeouts are enforced by the client; the engine adds none of its own.
    """
    
    url: Optional[str] = None
    host: str = "localhost"
    port: int = 6379
    database: int = 0
    password: Optional[str] = None
    ssl: bool = False
    
    # Pool settings
    max_connections: int = 50
    connection_timeout: float = 5
    command_timeout: float = 3
    health_check_interval: int = 30
    
    def to_connection_kwargs(self) -> Dict[str, Any]:
        """Convert to keyword arguments for ``redis.Redis``."""
        kwargs = {
            "socket_timeout": self.command_timeout,
            "socket_connect_timeout": self.connection_timeout,
            "health_check_interval": self.health_check_interval,
            "max_connections": self.max_connections,
        }
        
        if self.url:
            return kwargs
        
        kwargs.update({
            "host": self.host,
            "port": self.port,
            "db": self.database,
            "password": self.password,
        })
        
        # Only add ssl if it's True
        if self.ssl:
            kwargs["ssl"] = self.ssl
        
        return kwargs
