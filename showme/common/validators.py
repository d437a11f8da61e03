"""Validation utilities for short link targets."""

from urllib.parse import urlparse
from typing import Tuple

MAX_URL_LENGTH = 2048
ALLOWED_SCHEMES = ("http", "https")


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a public short link target.
    
    Args:
        url: The URL to validate
        
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"
    
    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"
    
    if url != url.strip() or any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"
    
    try:
        result = urlparse(url)
        # Accessing .port raises ValueError for out-of-range ports
        result.port
    except ValueError as e:
        return False, f"Invalid URL format: {e}"
    
    if result.scheme not in ALLOWED_SCHEMES:
        return False, "URL must use http or https protocol"
    
    if not result.hostname:
        return False, "URL must have a valid domain"
    
    return True, ""


def is_valid_payload(payload: str) -> Tuple[bool, str]:
    """Validate a debug link payload (any non-empty string)."""
    if not payload or not isinstance(payload, str):
        return False, "Payload is required"
    
    return True, ""
