"""Public routes: redirects, diagram rendering and the plugin manifest."""

from .routes import router as web_router

__all__ = ["web_router"]
