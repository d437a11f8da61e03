"""Debug routes implementation."""

from fastapi import APIRouter, Request

from ..api.schemas import DebugLinkRequest, LinkResponse, ErrorResponse
from ..links import short_url_for

router = APIRouter()


@router.post(
    "/debug/links",
    response_model=LinkResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty payload"},
    },
    summary="Create short link (debug)",
    description="Store an arbitrary payload behind a short link, skipping URL validation.",
)
async def debug_create_link(request: Request, body: DebugLinkRequest):
    service = request.app.state.service
    
    link = await service.create_debug(body.payload)
    
    return LinkResponse.from_link(link, short_url_for(request, link.id))
