"""Response models for the cache admin API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class OperationResponse(BaseModel):
    """Outcome of an invalidation operation."""
    
    success: bool = Field(..., description="Whether the operation succeeded")
    message: str = Field(..., description="Human-readable outcome")
    keys: List[str] = Field(default_factory=list, description="Keys the operation targeted")
    tags: List[str] = Field(default_factory=list, description="Tags the operation targeted")
    operation_time_ms: Optional[float] = Field(default=None, description="Operation time in milliseconds")


class ExistsResponse(BaseModel):
    """Existence check result."""
    
    key: str
    exists: bool


class CacheStatsResponse(BaseModel):
    """Hit/miss statistics."""
    
    stats: Dict[str, Any] = Field(default_factory=dict)
