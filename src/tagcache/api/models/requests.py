"""Request models for the cache admin API."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class FlushTagsRequest(BaseModel):
    """Request model for flushing tags."""
    
    tags: List[str] = Field(
        ...,
        min_length=1,
        description="Tags whose keys should be invalidated"
    )
    
    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        """Reject blank tags and drop duplicates, keeping order."""
        cleaned = []
        for tag in v:
            if not tag or tag.isspace():
                raise ValueError("Tags cannot be empty or whitespace only")
            if tag not in cleaned:
                cleaned.append(tag)
        return cleaned
