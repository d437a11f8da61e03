"""Configuration management for the Show Me service."""

from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator

from showme.manifest import PluginInfo


class Config(BaseSettings):
    """Application configuration."""

    # Key-value store settings
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis connection URL for link storage (in-memory store if unset)"
    )

    store_key_prefix: str = Field(
        default="showme:link:",
        description="Namespace prefix for link keys"
    )

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=9200,
        description="Port to listen on"
    )

    workers: int = Field(
        default=1,
        ge=1,
        description="Number of uvicorn worker processes. 1 = single process (async handles many connections); >1 = multi-process."
    )

    base_url: str = Field(
        default="http://localhost:9200",
        description="Public base URL used when a request carries no Host header"
    )

    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    # Short link settings
    link_id_length: int = Field(
        default=6,
        ge=4,
        le=32,
        description="Length of generated link IDs"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=0,
        description="Retries after a colliding link ID before giving up"
    )

    redirect_status: int = Field(
        default=302,
        description="HTTP status used for short link redirects (301, 302, 307 or 308)"
    )

    enable_debug_routes: bool = Field(
        default=True,
        description="Expose POST /debug/links"
    )

    # Diagram rendering settings
    kroki_url: str = Field(
        default="https://kroki.io",
        description="Kroki instance producing diagram images"
    )

    mermaid_live_url: str = Field(
        default="https://mermaid.live",
        description="Mermaid live editor for edit links"
    )

    niolesk_url: str = Field(
        default="https://niolesk.top",
        description="Niolesk editor for non-mermaid edit links"
    )

    shorten_edit_links: bool = Field(
        default=True,
        description="Replace long edit URLs with short links"
    )

    render_validate: bool = Field(
        default=False,
        description="Fetch rendered images so syntax errors are reported immediately"
    )

    render_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for renderer validation requests"
    )

    # Plugin manifest settings
    plugin_name: str = Field(default="Show Me")
    plugin_description_for_human: str = Field(
        default="Render any diagram using Mermaid, GraphViz, PlantUML and more."
    )
    plugin_description_for_model: str = Field(
        default=(
            "Use this plugin when the user wants a visualization. Send the diagram "
            "source to the render endpoint and show the returned imageURL inline; "
            "offer editURL as a link to edit the diagram online."
        )
    )
    plugin_logo_url: str = Field(default="https://kroki.io/assets/logo.svg")
    plugin_contact_email: str = Field(default="admin@example.com")
    plugin_legal_info_url: str = Field(default="https://example.com/legal")

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }

    @field_validator("redirect_status")
    @classmethod
    def validate_redirect_status(cls, v: int) -> int:
        """Only redirect statuses that carry a Location header."""
        if v not in (301, 302, 307, 308):
            raise ValueError("redirect_status must be one of 301, 302, 307, 308")
        return v

    @property
    def plugin_info(self) -> PluginInfo:
        return PluginInfo(
            name_for_human=self.plugin_name,
            description_for_human=self.plugin_description_for_human,
            description_for_model=self.plugin_description_for_model,
            logo_url=self.plugin_logo_url,
            contact_email=self.plugin_contact_email,
            legal_info_url=self.plugin_legal_info_url,
        )


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
