#!/usr/bin/env python3
"""
Main entry point for the Show Me service.

Concurrency: requests are handled concurrently on one event loop
(FastAPI + redis.asyncio). Set WORKERS > 1 for multi-process scaling;
each worker opens its own Redis connection pool.

Usage:
    python app.py

Environment variables:
    REDIS_URL - Redis connection URL (in-memory store if unset)
    BASE_URL - Base URL used when a request has no Host header
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LINK_ID_LENGTH - Length of generated short link IDs
    KROKI_URL - Kroki instance used for diagram images
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from showme.linkid import LinkIdGenerator
from showme.render import DiagramRenderer
from showme.service import ShortLinkService
from showme.store import create_store
from showme.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store and renderer on startup, close them on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting Show Me service...")

    store = await create_store(
        redis_url=config.redis_url,
        key_prefix=config.store_key_prefix,
        logger=logger,
    )

    service = ShortLinkService(
        store=store,
        id_generator=LinkIdGenerator(length=config.link_id_length),
        logger=logger,
        max_collision_retries=config.max_collision_retries,
    )

    renderer = DiagramRenderer(
        kroki_url=config.kroki_url,
        mermaid_live_url=config.mermaid_live_url,
        niolesk_url=config.niolesk_url,
        validate=config.render_validate,
        timeout_seconds=config.render_timeout_seconds,
        logger=logger,
    )

    app.state.store = store
    app.state.service = service
    app.state.renderer = renderer

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down Show Me service...")

    await renderer.close()
    await service.close()

    logger.info("Service stopped")


def build_app() -> FastAPI:
    """Build the application from the environment.

    Used directly for a single process and as the uvicorn factory for
    each worker process when WORKERS > 1.
    """
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    # Store, service and renderer are created in the lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        renderer_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Show Me Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'redis_url'})}")

    if config.workers > 1:
        # uvicorn only forks workers from an import string
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            "app:build_app",
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
        return

    uvicorn_config = uvicorn.Config(
        build_app(),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
