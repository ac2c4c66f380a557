"""FastAPI admin surface for tagcache (requires the ``api`` extra)."""

from .routers import cache_router
from .dependencies import get_tagged_cache

__all__ = ["cache_router", "get_tagged_cache"]
