"""AI plugin manifest (/.well-known/ai-plugin.json)."""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .common.headers import RequestContext

SCHEMA_VERSION = "v1"
OPENAPI_PATH = "/openapi.json"


@dataclass(frozen=True)
class PluginInfo:
    """Static, human-facing description of the plugin."""
    
    name_for_human: str
    description_for_human: str
    description_for_model: str
    logo_url: str
    contact_email: str
    legal_info_url: str
    name_for_model: Optional[str] = None


def model_name(name_for_human: str) -> str:
    """Derive a model-facing name: lowercase alphanumerics only ("Show Me" -> "showme")."""
    return re.sub(r"[^a-z0-9]", "", name_for_human.lower())


def build_plugin_manifest(ctx: RequestContext, info: PluginInfo, path_prefix: str = "") -> Dict[str, Any]:
    """Build the manifest for the host a client reached us on.
    
    Args:
        ctx: Public scheme and host of the request
        info: Plugin description
        path_prefix: Prefix a proxy strips before forwarding (e.g. '/showme')
        
    Returns:
        JSON-serializable manifest
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "name_for_human": info.name_for_human,
        "name_for_model": info.name_for_model or model_name(info.name_for_human),
        "description_for_human": info.description_for_human,
        "description_for_model": info.description_for_model,
        "auth": {"type": "none"},
        "api": {
            "type": "openapi",
            "url": f"{ctx.base_url}{path_prefix}{OPENAPI_PATH}",
            "is_user_authenticated": False,
        },
        "logo_url": info.logo_url,
        "contact_email": info.contact_email,
        "legal_info_url": info.legal_info_url,
    }
