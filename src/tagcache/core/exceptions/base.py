"""Base exceptions for tagcache.

This module defines the root of the tagcache exception hierarchy.
All exceptions inherit from TagCacheError and carry an error code and
structured details for logging and API responses.
"""

from typing import Any, Dict, Optional


class TagCacheError(Exception):
    """Base exception for all tagcache errors.
    
    Every exception raised by the library derives from this class and
    includes structured error information for debugging and API responses.
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: TagCacheError) -> Dict[str, Any]:
    """Create standardized error response from exception.
    
    Args:
        exception: The tagcache exception
        
    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
