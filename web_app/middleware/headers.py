"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from showme.common.headers import get_forwarded_path_prefix


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Store X-Forwarded-* values on request.state for handlers and access logs."""
    
    async def dispatch(self, request: Request, call_next: Callable):
        forwarded_for = request.headers.get("x-forwarded-for")
        # First hop is the original client: "client, proxy1, proxy2"
        request.state.client_ip = (
            forwarded_for.split(",")[0].strip()
            if forwarded_for
            else (request.client.host if request.client else "unknown")
        )
        request.state.path_prefix = get_forwarded_path_prefix(request.headers)
        
        return await call_next(request)
