"""Cache-specific exceptions for tagcache.

CacheMiss is an expected outcome that drives producer invocation; every
other class here describes a real failure that reaches the caller.
"""

from typing import Any, Dict, Optional

from .base import TagCacheError


class CacheMiss(TagCacheError):
    """Raised when the requested key is absent from the backend."""
    
    def __init__(self, key: str):
        super().__init__(
            f"cache: key {key!r} is missing",
            error_code="CACHE_MISS",
            details={"key": key},
        )
        self.key = key


# Backend Errors
class BackendError(TagCacheError):
    """Raised when a backend call fails for a reason other than absence.
    
    When the store step of a cache-aside call fails, ``value`` holds the
    value the producer computed so the caller can still use it.
    """
    
    value: Any = None


class CacheConnectionError(BackendError):
    """Raised when the backend cannot be reached."""
    pass


class CacheTimeoutError(BackendError):
    """Raised when a backend call times out."""
    pass


class TagFlushError(BackendError):
    """Raised after a tag flush when one or more tags could not be flushed.
    
    Every tag is attempted before this is raised; ``failures`` maps each
    failed tag to the backend error it produced.
    """
    
    def __init__(self, failures: Dict[str, BackendError]):
        tags = sorted(failures)
        super().__init__(
            f"cache: flushing tags {tags} failed",
            error_code="TAG_FLUSH_FAILED",
            details={"tags": {tag: str(error) for tag, error in failures.items()}},
        )
        self.failures = failures


# Codec Errors
class CodecError(TagCacheError):
    """Base class for encode/decode failures."""
    
    def __init__(
        self,
        message: str,
        serializer_type: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = dict(details or {})
        if serializer_type:
            details["serializer_type"] = serializer_type
        if original_error is not None:
            details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }
        super().__init__(message, details=details)
        self.serializer_type = serializer_type
        self.original_error = original_error


class EncodeError(CodecError):
    """Raised when a value cannot be encoded to bytes."""
    pass


class DecodeError(CodecError):
    """Raised when stored bytes cannot be decoded.
    
    A decode failure on read is a hard error, never treated as a miss.
    """
    pass


# Configuration Errors
class CacheConfigurationError(TagCacheError):
    """Raised when cache configuration is invalid."""
    pass
