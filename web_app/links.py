"""Helpers for building absolute URLs from an incoming request."""

from fastapi import Request

from showme.common.headers import RequestContext, request_context_from_headers
from showme.common.url_builder import build_short_url

SHORT_LINK_PATH = "/s"


def request_context(request: Request) -> RequestContext:
    """Public scheme and host of the request (proxy headers first)."""
    config = request.app.state.config
    return request_context_from_headers(
        headers=request.headers,
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
    )


def path_prefix(request: Request) -> str:
    """Prefix stripped by a proxy in front of us, '' when accessed directly."""
    return getattr(request.state, "path_prefix", "")


def short_url_for(request: Request, link_id: str) -> str:
    """Public URL of a short link as seen by the requesting client."""
    return build_short_url(
        link_id=link_id,
        base_url=request_context(request).base_url + path_prefix(request),
        path_prefix=SHORT_LINK_PATH,
    )
