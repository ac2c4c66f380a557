"""Cache admin API models."""

from .requests import FlushTagsRequest
from .responses import OperationResponse, ExistsResponse, CacheStatsResponse

__all__ = ["FlushTagsRequest", "OperationResponse", "ExistsResponse", "CacheStatsResponse"]
