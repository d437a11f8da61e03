"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from showme.store.models import ShortLink


class CreateLinkRequest(BaseModel):
    """Request to create a short link for a public URL."""
    
    # Format checks happen in the service so failures map to 400, not 422
    url: str = Field(..., description="Absolute http(s) URL to shorten")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class DebugLinkRequest(BaseModel):
    """Request to create a short link for an arbitrary payload."""
    
    payload: str = Field(..., description="Target stored verbatim (no URL validation)")


class LinkResponse(BaseModel):
    """A created or looked-up short link."""
    
    id: str = Field(..., description="The short link ID")
    short_url: str = Field(..., description="The complete short URL")
    target_url: str = Field(..., description="Where the short link redirects")
    created_at: datetime = Field(..., description="Creation timestamp")
    
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "abc123",
                    "short_url": "https://showme.example/s/abc123",
                    "target_url": "https://example.com/a",
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }
    
    @classmethod
    def from_link(cls, link: ShortLink, short_url: str) -> "LinkResponse":
        return cls(
            id=link.id,
            short_url=short_url,
            target_url=link.target_url,
            created_at=link.created_at,
        )


class RenderResponse(BaseModel):
    """Rendered diagram locations."""
    
    image_url: str = Field(..., alias="imageURL", description="URL of the rendered image")
    edit_url: str = Field(..., alias="editURL", description="URL to edit the diagram online")
    
    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Key-value store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""
    
    error: str = Field(..., description="Error code")
    detail: Optional[str] = Field(None, description="Detailed error information")
