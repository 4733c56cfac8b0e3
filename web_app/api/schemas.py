"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from shortlink.database.models import UrlMapping


class ShortenRequest(BaseModel):
    """Structured request to shorten a URL."""

    url: str = Field(..., description="The destination URL", min_length=1)
    slug: Optional[str] = Field(None, description="Optional caller-chosen slug")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "slug": None
                },
                {
                    "url": "https://github.com/user/repo",
                    "slug": "myrepo"
                }
            ]
        }
    }


class MappingResponse(BaseModel):
    """A persisted mapping, as returned after creation or lookup."""

    slug: str = Field(..., description="The slug")
    url: str = Field(..., description="The destination URL")
    creator_address: str = Field(..., description="Address the mapping was created from")
    usage_count: int = Field(..., description="Number of successful resolutions")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    short_url: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "slug": "V1StGXR8_Z",
                    "url": "https://example.com/very/long/path",
                    "creator_address": "203.0.113.7",
                    "usage_count": 0,
                    "created_at": "2024-01-01T12:00:00Z",
                    "short_url": "https://short.link/V1StGXR8_Z"
                }
            ]
        }
    }

    @classmethod
    def from_mapping(cls, mapping: UrlMapping, short_url: str) -> "MappingResponse":
        return cls(
            slug=mapping.slug,
            url=mapping.destination,
            creator_address=mapping.creator_address,
            usage_count=mapping.usage_count,
            created_at=mapping.created_at,
            short_url=short_url,
        )


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    message: str = Field(..., description="Short human-readable error message")
