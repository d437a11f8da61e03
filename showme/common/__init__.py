"""Common utilities for the Show Me service."""

from .validators import is_valid_url, is_valid_payload
from .headers import RequestContext, request_context_from_headers, get_forwarded_path_prefix
from .url_builder import build_short_url
from .logging_config import setup_logging, get_logger

__all__ = [
    "is_valid_url",
    "is_valid_payload",
    "RequestContext",
    "request_context_from_headers",
    "get_forwarded_path_prefix",
    "build_short_url",
    "setup_logging",
    "get_logger",
]
