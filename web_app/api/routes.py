"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import (
    CreateLinkRequest,
    LinkResponse,
    HealthResponse,
    ErrorResponse,
)
from ..links import short_url_for

router = APIRouter()


@router.post(
    "/links",
    response_model=LinkResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid target URL"},
        500: {"model": ErrorResponse, "description": "Link ID space exhausted"},
        503: {"model": ErrorResponse, "description": "Key-value store unavailable"},
    },
    summary="Create short link",
    description="Create a short link redirecting to an absolute http(s) URL.",
)
async def create_link(request: Request, body: CreateLinkRequest):
    """Create a short link."""
    service = request.app.state.service
    
    link = await service.create(body.url)
    
    return LinkResponse.from_link(link, short_url_for(request, link.id))


@router.get(
    "/links/{link_id}",
    response_model=LinkResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short link not found"},
    },
    summary="Get short link",
    description="Get a short link record without following the redirect.",
)
async def get_link(request: Request, link_id: str):
    """Get a short link record."""
    service = request.app.state.service
    
    link = await service.get_link(link_id)
    
    return LinkResponse.from_link(link, short_url_for(request, link.id))


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service and its key-value store are healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    service = request.app.state.service
    
    health = await service.health_check()
    
    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
