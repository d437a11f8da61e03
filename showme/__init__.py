"""Core business logic for the Show Me service."""

from .linkid import LinkIdGenerator
from .service import ShortLinkService

__version__ = "1.0.0"

__all__ = ["LinkIdGenerator", "ShortLinkService", "__version__"]
