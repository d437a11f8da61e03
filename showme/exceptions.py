"""Exception hierarchy for the Show Me service.

    ShowMeError (base)
    ├── InvalidTarget        → 400 Bad Request
    ├── IDSpaceExhausted     → 500 Internal Server Error
    ├── LinkNotFound         → 404 Not Found
    ├── DiagramRenderError   → 400 Bad Request
    └── StoreError           → 503 Service Unavailable

Handlers in web_app.app_factory translate these into JSON responses.
"""

from typing import Any, Dict, Optional


class ShowMeError(Exception):
    """Base exception for all Show Me errors.

    Attributes:
        message: Error description returned to the client
        context: Additional debug info (logged, not returned)
    """

    code = "internal_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidTarget(ShowMeError):
    """Creation input failed validation."""

    code = "invalid_target"

    def __init__(self, message: str = "Invalid target", target: Optional[str] = None):
        context = {}
        if target is not None:
            context["target"] = target[:200]
        super().__init__(message=message, context=context)


class IDSpaceExhausted(ShowMeError):
    """Every generated ID collided with an existing link.

    Should be unreachable with a working random source and a sane ID length.
    """

    code = "id_space_exhausted"

    def __init__(self, attempts: int):
        super().__init__(
            message=f"Unable to generate a unique link ID after {attempts} attempts",
            context={"attempts": attempts},
        )
        self.attempts = attempts


class LinkNotFound(ShowMeError):
    """No link exists for the requested ID (or the ID is malformed)."""

    code = "not_found"

    def __init__(self, link_id: str):
        super().__init__(
            message=f"Short link '{link_id}' not found",
            context={"link_id": link_id},
        )
        self.link_id = link_id


class DiagramRenderError(ShowMeError):
    """The external renderer rejected the diagram source."""

    code = "render_error"

    def __init__(self, message: str, diagram_type: Optional[str] = None):
        context = {}
        if diagram_type:
            context["diagram_type"] = diagram_type
        super().__init__(message=message, context=context)


class StoreError(ShowMeError):
    """The key-value store could not complete an operation."""

    code = "store_unavailable"

    def __init__(self, message: str = "Key-value store unavailable", operation: Optional[str] = None):
        context = {}
        if operation:
            context["operation"] = operation
        super().__init__(message=message, context=context)
