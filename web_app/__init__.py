"""Web application for the Show Me service."""

from .app_factory import create_app

__all__ = ["create_app"]
