"""Cache admin router.

Operator endpoints for existence checks, key and tag invalidation and
hit/miss statistics.
"""

import time

from fastapi import APIRouter, Depends, HTTPException, status

from ..models import FlushTagsRequest, OperationResponse, ExistsResponse, CacheStatsResponse
from ..dependencies import get_tagged_cache
from ...core.exceptions import BackendError, create_error_response
from ...services.tagged_cache import TaggedCache


cache_router = APIRouter(
    prefix="/cache",
    tags=["Cache"],
    responses={503: {"description": "Cache backend unavailable"}}
)


def _backend_unavailable(error: BackendError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=create_error_response(error)["error"],
    )


@cache_router.get(
    "/keys/{key:path}/exists",
    response_model=ExistsResponse,
    summary="Check cache entry",
    description="Check whether a key is cached, without decoding it"
)
def key_exists(
    key: str,
    cache: TaggedCache = Depends(get_tagged_cache)
) -> ExistsResponse:
    """Check whether a key is cached."""
    try:
        return ExistsResponse(key=key, exists=cache.exists(key))
    except BackendError as e:
        raise _backend_unavailable(e)


@cache_router.delete(
    "/keys/{key:path}",
    response_model=OperationResponse,
    summary="Flush cache entry",
    description="Delete a single key; deleting an absent key succeeds"
)
def flush_key(
    key: str,
    cache: TaggedCache = Depends(get_tagged_cache)
) -> OperationResponse:
    """Flush a single key."""
    start_time = time.perf_counter()
    try:
        cache.flush(key)
    except BackendError as e:
        raise _backend_unavailable(e)
    
    return OperationResponse(
        success=True,
        message="Cache entry flushed",
        keys=[key],
        operation_time_ms=(time.perf_counter() - start_time) * 1000
    )


@cache_router.post(
    "/tags/flush",
    response_model=OperationResponse,
    summary="Flush tags",
    description="Delete every key registered under the given tags"
)
def flush_tags(
    request: FlushTagsRequest,
    cache: TaggedCache = Depends(get_tagged_cache)
) -> OperationResponse:
    """Flush tags."""
    start_time = time.perf_counter()
    try:
        cache.flush_tags(request.tags)
    except BackendError as e:
        raise _backend_unavailable(e)
    
    return OperationResponse(
        success=True,
        message=f"Flushed {len(request.tags)} tag(s)",
        tags=request.tags,
        operation_time_ms=(time.perf_counter() - start_time) * 1000
    )


@cache_router.get(
    "/stats",
    response_model=CacheStatsResponse,
    summary="Cache statistics",
    description="Hit/miss counters of this process's cache engine"
)
def cache_stats(
    cache: TaggedCache = Depends(get_tagged_cache)
) -> CacheStatsResponse:
    """Get cache statistics."""
    return CacheStatsResponse(stats=cache.stats())
