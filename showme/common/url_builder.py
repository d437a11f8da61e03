"""URL building utilities for short links."""


def build_short_url(
    link_id: str,
    base_url: str,
    path_prefix: str = "/s",
) -> str:
    """Build the public URL of a short link.
    
    Args:
        link_id: The short link ID
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Path the redirect route is mounted under
        
    Returns:
        Complete short URL (e.g., https://example.com/s/abc123)
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")
    
    if prefix:
        return f"{base}/{prefix}/{link_id}"
    return f"{base}/{link_id}"
