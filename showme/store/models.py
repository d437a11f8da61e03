"""Data models for short links."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class ShortLink:
    """Represents a short link record in the key-value store."""
    
    id: str
    target_url: str
    created_at: datetime
    
    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "target_url": self.target_url,
            "created_at": self.created_at.isoformat(),
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "ShortLink":
        """Create from dictionary."""
        created_at = data["created_at"]
        if not isinstance(created_at, datetime):
            created_at = datetime.fromisoformat(created_at)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=data["id"],
            target_url=data["target_url"],
            created_at=created_at,
        )
    
    def to_json(self) -> str:
        """Serialize for storage."""
        return json.dumps(self.to_dict(), separators=(",", ":"))
    
    @classmethod
    def from_json(cls, raw: str) -> "ShortLink":
        """Deserialize a stored record."""
        return cls.from_dict(json.loads(raw))
