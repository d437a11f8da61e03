"""Diagram rendering delegated to external services.

Nothing is rendered here. A diagram source is deflated and base64url-encoded
into a Kroki image URL, and into an "edit online" URL (mermaid.live for
mermaid, Niolesk for every other Kroki diagram type).
"""

import base64
import json
import logging
import zlib
from dataclasses import dataclass
from typing import Optional

import httpx

from .exceptions import DiagramRenderError

KROKI_DIAGRAM_TYPES = frozenset({
    "actdiag", "blockdiag", "bpmn", "bytefield", "c4plantuml", "d2", "dbml",
    "ditaa", "erd", "excalidraw", "graphviz", "mermaid", "nomnoml", "nwdiag",
    "packetdiag", "pikchr", "plantuml", "rackdiag", "seqdiag", "structurizr",
    "svgbob", "symbolator", "tikz", "umlet", "vega", "vegalite", "wavedrom",
    "wireviz",
})

DIAGRAM_TYPE_ALIASES = {
    "dot": "graphviz",
    "c4": "c4plantuml",
    "uml": "plantuml",
}


@dataclass(frozen=True)
class RenderResult:
    """Where a rendered diagram can be viewed and edited."""

    image_url: str
    edit_url: str


def encode_source(source: str) -> str:
    """Deflate and base64url-encode text the way Kroki and pako expect."""
    compressed = zlib.compress(source.encode("utf-8"), 9)
    return base64.urlsafe_b64encode(compressed).decode("ascii")


def normalize_diagram_type(diagram_type: str) -> str:
    """Map user-facing names onto Kroki diagram types.

    Raises:
        DiagramRenderError: For types the renderer does not know
    """
    name = (diagram_type or "").strip().lower()
    name = DIAGRAM_TYPE_ALIASES.get(name, name)
    if name not in KROKI_DIAGRAM_TYPES:
        raise DiagramRenderError(
            f"Unsupported diagram type '{diagram_type}'",
            diagram_type=diagram_type,
        )
    return name


class DiagramRenderer:
    """Build render and edit URLs, optionally probing the renderer."""

    def __init__(
        self,
        kroki_url: str = "https://kroki.io",
        mermaid_live_url: str = "https://mermaid.live",
        niolesk_url: str = "https://niolesk.top",
        validate: bool = False,
        timeout_seconds: float = 10.0,
        http_client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize renderer.

        Args:
            kroki_url: Base URL of the Kroki instance producing images
            mermaid_live_url: Base URL of the mermaid live editor
            niolesk_url: Base URL of the Niolesk editor for other diagram types
            validate: Fetch each image URL so syntax errors surface immediately
            timeout_seconds: Timeout for validation requests
            http_client: Optional client (one is created lazily otherwise)
            logger: Optional logger
        """
        self.kroki_url = kroki_url.rstrip("/")
        self.mermaid_live_url = mermaid_live_url.rstrip("/")
        self.niolesk_url = niolesk_url.rstrip("/")
        self.validate = validate
        self.timeout_seconds = timeout_seconds
        self.logger = logger or logging.getLogger(__name__)
        self._client = http_client
        self._owns_client = http_client is None

    def image_url(self, diagram_type: str, source: str, output_format: str = "svg") -> str:
        diagram_type = normalize_diagram_type(diagram_type)
        return f"{self.kroki_url}/{diagram_type}/{output_format}/{encode_source(source)}"

    def edit_url(self, diagram_type: str, source: str) -> str:
        diagram_type = normalize_diagram_type(diagram_type)
        if diagram_type == "mermaid":
            state = {
                "code": source,
                "mermaid": json.dumps({"theme": "default"}),
                "autoSync": True,
                "updateDiagram": True,
            }
            encoded = encode_source(json.dumps(state)).rstrip("=")
            return f"{self.mermaid_live_url}/edit#pako:{encoded}"
        return f"{self.niolesk_url}/#{self.image_url(diagram_type, source)}"

    async def render(self, diagram_type: str, source: str) -> RenderResult:
        """Produce image and edit URLs for a diagram.

        Raises:
            DiagramRenderError: Empty source, unknown type, or (when
                validating) a source the renderer rejects
        """
        if not source or not source.strip():
            raise DiagramRenderError("Diagram source is required", diagram_type=diagram_type)

        result = RenderResult(
            image_url=self.image_url(diagram_type, source),
            edit_url=self.edit_url(diagram_type, source),
        )

        if self.validate:
            await self._probe(result.image_url, diagram_type)

        return result

    async def _probe(self, image_url: str, diagram_type: str) -> None:
        """Fetch the image once; a 4xx means the source does not parse.

        Renderer outages are logged and the URLs are still returned, since
        the client fetches the image itself later.
        """
        client = self._get_client()
        try:
            response = await client.get(image_url)
        except httpx.HTTPError as e:
            self.logger.warning(f"Renderer probe failed for {diagram_type}: {e}")
            return

        if 400 <= response.status_code < 500:
            message = response.text.strip()[:500] or f"Renderer returned {response.status_code}"
            raise DiagramRenderError(message, diagram_type=diagram_type)

        if response.status_code >= 500:
            self.logger.warning(f"Renderer returned {response.status_code} for {diagram_type}")

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_seconds)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this renderer created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
