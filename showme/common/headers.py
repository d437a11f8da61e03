"""Request header utilities."""

from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class RequestContext:
    """Scheme and host a client used to reach the service."""
    
    scheme: str
    host: str
    
    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}"


def _lower_keys(headers: Mapping[str, str]) -> dict:
    return {k.lower(): v for k, v in headers.items()}


def request_context_from_headers(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
) -> RequestContext:
    """Work out the public scheme and host of a request.
    
    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + Host header
    3. Fallback base URL from config
    
    Args:
        headers: Request headers
        fallback_base_url: Base URL from configuration (e.g., http://localhost:9200)
        request_scheme: Scheme the request arrived with
        
    Returns:
        RequestContext for building absolute URLs
    """
    headers_lower = _lower_keys(headers)
    
    forwarded_proto = headers_lower.get("x-forwarded-proto")
    forwarded_host = headers_lower.get("x-forwarded-host")
    if forwarded_proto and forwarded_host:
        # Proxies may append values: "https, http"
        return RequestContext(
            scheme=forwarded_proto.split(",")[0].strip(),
            host=forwarded_host.split(",")[0].strip(),
        )
    
    host = headers_lower.get("host")
    if request_scheme and host:
        return RequestContext(scheme=request_scheme, host=host)
    
    scheme, _, rest = fallback_base_url.rstrip("/").partition("://")
    return RequestContext(scheme=scheme or "http", host=rest)


def get_forwarded_path_prefix(headers: Mapping[str, str]) -> str:
    """Get path prefix from X-Forwarded-Prefix (set by a proxy that strips it).
    
    Returns normalized prefix with leading slash, no trailing (e.g. '/showme'), or '' if not set.
    """
    value = _lower_keys(headers).get("x-forwarded-prefix")
    if not value:
        return ""
    p = value.strip().strip("/")
    return "/" + p if p else ""
