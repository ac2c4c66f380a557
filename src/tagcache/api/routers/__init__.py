"""Cache admin routers."""

from .cache_router import cache_router

__all__ = ["cache_router"]
