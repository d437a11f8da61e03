"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from showme import __version__
from showme.common.logging_config import get_logger
from showme.exceptions import (
    ShowMeError,
    InvalidTarget,
    IDSpaceExhausted,
    LinkNotFound,
    DiagramRenderError,
    StoreError,
)
from .api import api_router
from .web import web_router
from .debug import debug_router
from .middleware.cors import OptionsMiddleware
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware

logger = get_logger("web")

# Status per exception type; most specific class wins via the MRO walk below
ERROR_STATUS = {
    InvalidTarget: 400,
    DiagramRenderError: 400,
    LinkNotFound: 404,
    IDSpaceExhausted: 500,
    StoreError: 503,
}


def _status_for(exc: ShowMeError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    """Translate service exceptions into JSON error responses."""

    @app.exception_handler(ShowMeError)
    async def handle_showme_error(request: Request, exc: ShowMeError):
        status_code = _status_for(exc)

        if status_code >= 500:
            logger.error(
                f"{exc.code} on {request.method} {request.url.path}: {exc.message} {exc.context}"
            )
        elif isinstance(exc, LinkNotFound):
            logger.debug(f"Not found: {request.url.path}")
        else:
            logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

        return JSONResponse(
            status_code=status_code,
            content={"error": exc.code, "detail": exc.message},
        )


def create_app(
    store_instance,
    service_instance,
    renderer_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Key-value store instance
        service_instance: ShortLinkService instance
        renderer_instance: DiagramRenderer instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title=config.plugin_name,
        description="Render diagrams and share them through short links",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.renderer = renderer_instance
    app.state.config = config

    # Last added runs first: CORS answers preflights before anything else,
    # other OPTIONS requests get a blanket 200, then forwarded headers are
    # recorded for the access log.
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ForwardedHeadersMiddleware)
    app.add_middleware(OptionsMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix="/api", tags=["API"])
    if config.enable_debug_routes:
        app.include_router(debug_router, tags=["Debug"])
    app.include_router(web_router, tags=["Diagrams"])

    return app
