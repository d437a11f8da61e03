"""Blanket OPTIONS handling."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable


class OptionsMiddleware(BaseHTTPMiddleware):
    """Answer every OPTIONS request with 200.

    CORSMiddleware only handles full preflights (Origin plus
    Access-Control-Request-Method). Any other OPTIONS request lands here
    instead of reaching the router and failing with 405.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method != "OPTIONS":
            return await call_next(request)

        headers = {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        }
        requested = request.headers.get("access-control-request-headers")
        if requested:
            headers["Access-Control-Allow-Headers"] = requested

        return Response(status_code=200, headers=headers)
