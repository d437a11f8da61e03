"""Administrative routes, mounted only when enabled in configuration."""

from .routes import router as debug_router

__all__ = ["debug_router"]
