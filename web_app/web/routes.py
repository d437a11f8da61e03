"""Public routes implementation."""

import json

from fastapi import APIRouter, Query, Request
from fastapi.responses import RedirectResponse, Response

from showme.manifest import build_plugin_manifest
from ..api.schemas import RenderResponse, ErrorResponse
from ..links import SHORT_LINK_PATH, path_prefix, request_context, short_url_for

router = APIRouter()


async def _render(request: Request, diagram_type: str, source: str) -> RenderResponse:
    """Render via the external renderer and shorten the edit URL if configured."""
    renderer = request.app.state.renderer
    config = request.app.state.config
    
    result = await renderer.render(diagram_type, source)
    edit_url = result.edit_url
    
    if config.shorten_edit_links:
        # Generated URLs can exceed the public URL length limit, so skip validation
        link = await request.app.state.service.create_debug(edit_url)
        edit_url = short_url_for(request, link.id)
    
    return RenderResponse(image_url=result.image_url, edit_url=edit_url)


@router.get(
    "/",
    response_model=RenderResponse,
    responses={400: {"model": ErrorResponse, "description": "Diagram rejected"}},
    summary="Render a mermaid diagram",
    description="Render mermaid syntax and return the image URL and an edit-online URL.",
)
async def render_mermaid(
    request: Request,
    mermaid: str = Query(..., description="Diagram in mermaid syntax"),
):
    return await _render(request, "mermaid", mermaid)


@router.get(
    "/render",
    response_model=RenderResponse,
    responses={400: {"model": ErrorResponse, "description": "Diagram rejected"}},
    summary="Render a diagram",
    description="Render any diagram type supported by Kroki (graphviz, plantuml, d2, ...).",
)
async def render_diagram(
    request: Request,
    diagram_type: str = Query(..., description="Kroki diagram type, e.g. graphviz"),
    diagram: str = Query(..., description="Diagram source"),
):
    return await _render(request, diagram_type, diagram)


@router.get(SHORT_LINK_PATH + "/{link_id}", include_in_schema=False)
async def follow_short_link(request: Request, link_id: str):
    """Redirect to the short link target."""
    service = request.app.state.service
    config = request.app.state.config
    
    target_url = await service.resolve(link_id)
    
    return RedirectResponse(url=target_url, status_code=config.redirect_status)


@router.get("/.well-known/ai-plugin.json", include_in_schema=False)
async def plugin_manifest(request: Request):
    """Serve the plugin manifest for the host the client used."""
    config = request.app.state.config
    
    manifest = build_plugin_manifest(
        request_context(request),
        config.plugin_info,
        path_prefix=path_prefix(request),
    )
    
    return Response(
        content=json.dumps(manifest, indent=2),
        media_type="application/json;charset=UTF-8",
    )
