"""FastAPI dependencies for the cache admin API."""

from fastapi import Request

from ..core.exceptions import CacheConfigurationError
from ..services.tagged_cache import TaggedCache


def get_tagged_cache(request: Request) -> TaggedCache:
    """Get the cache engine registered on ``app.state.tagged_cache``.
    
    Usage:
    
    ```python
    app = FastAPI()
    app.state.tagged_cache = create_tagged_cache()
    app.include_router(cache_router)
    ```
    """
    cache = getattr(request.app.state, "tagged_cache", None)
    if cache is None:
        raise CacheConfigurationError("No tagged cache registered on app.state.tagged_cache")
    return cache
