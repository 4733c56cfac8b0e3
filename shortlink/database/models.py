"""Data models for the shortlink store."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class UrlMapping:
    """A persisted slug -> destination mapping."""

    slug: str
    destination: str
    creator_address: str
    usage_count: int = 0
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary (keys follow the table's column names)."""
        return {
            "slug": self.slug,
            "url": self.destination,
            "creator_address": self.creator_address,
            "usage_count": self.usage_count,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "UrlMapping":
        """Create from a database row or a ``to_dict`` result."""
        created_at = record.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            slug=record["slug"],
            destination=record["url"],
            creator_address=record["creator_address"],
            usage_count=record.get("usage_count", 0),
            created_at=created_at,
        )
