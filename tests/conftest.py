"""Pytest configuration and fixtures."""

import pytest
from httpx import AsyncClient, ASGITransport

from config import Config
from showme.linkid import LinkIdGenerator
from showme.render import DiagramRenderer
from showme.service import ShortLinkService
from showme.store.memory import InMemoryKVStore
from showme.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store():
    """Create an empty in-memory store."""
    return InMemoryKVStore(key_prefix="test:link:")


@pytest.fixture
def id_generator():
    """Create link ID generator."""
    return LinkIdGenerator(length=6)


@pytest.fixture
def service(store, id_generator, logger) -> ShortLinkService:
    """Create service instance."""
    return ShortLinkService(
        store=store,
        id_generator=id_generator,
        logger=logger,
    )


@pytest.fixture
def renderer(logger):
    """Create renderer that never touches the network."""
    return DiagramRenderer(validate=False, logger=logger)


@pytest.fixture
def config():
    """Test configuration."""
    return Config(
        redis_url=None,
        base_url="http://testserver",
        enable_debug_routes=True,
        shorten_edit_links=True,
    )


@pytest.fixture
def make_app(config):
    """Factory building an app around any service/renderer pair."""
    def _make(service, renderer=None, **overrides):
        cfg = config.model_copy(update=overrides) if overrides else config
        return create_app(
            store_instance=service.store,
            service_instance=service,
            renderer_instance=renderer or DiagramRenderer(validate=False),
            config=cfg,
        )
    return _make


@pytest.fixture
def app(make_app, service, renderer):
    """Create test FastAPI app."""
    return make_app(service, renderer)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/a",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456?tab=votes#answer-1",
    ]
