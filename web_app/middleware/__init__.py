"""Middleware for the Show Me web app."""

from .cors import OptionsMiddleware
from .headers import ForwardedHeadersMiddleware
from .logging import LoggingMiddleware

__all__ = ["ForwardedHeadersMiddleware", "LoggingMiddleware", "OptionsMiddleware"]
