"""Expiration normalization for cache entries."""

from datetime import timedelta
from typing import Union

TTL = Union[timedelta, int, float]

NO_EXPIRY = timedelta(0)
MIN_TTL = timedelta(seconds=1)
DEFAULT_TTL = timedelta(hours=1)


def to_timedelta(ttl: TTL) -> timedelta:
    """Convert a ttl given as timedelta or seconds to timedelta."""
    if isinstance(ttl, timedelta):
        return ttl
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise TypeError(f"ttl must be timedelta or seconds, got {type(ttl).__name__}")
    return timedelta(seconds=ttl)


def normalize_ttl(ttl: TTL) -> timedelta:
    """Map a requested ttl to the ttl written to the backend.
    
    Negative ttls become zero (no explicit expiry), ttls under one second
    are promoted to one hour, everything else passes through.
    
    Args:
        ttl: Requested lifetime as timedelta or seconds
        
    Returns:
        Effective lifetime
    """
    requested = to_timedelta(ttl)
    if requested < NO_EXPIRY:
        return NO_EXPIRY
    if requested < MIN_TTL:
        return DEFAULT_TTL
    return requested
