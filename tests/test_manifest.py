"""Tests for the plugin manifest."""

from showme.common.headers import RequestContext
from showme.manifest import PluginInfo, build_plugin_manifest, model_name


def _info(**overrides):
    fields = dict(
        name_for_human="Show Me",
        description_for_human="Render diagrams.",
        description_for_model="Use for diagrams.",
        logo_url="https://example.com/logo.png",
        contact_email="admin@example.com",
        legal_info_url="https://example.com/legal",
    )
    fields.update(overrides)
    return PluginInfo(**fields)


class TestPluginManifest:
    """Test manifest construction."""
    
    def test_openapi_url_follows_request(self):
        manifest = build_plugin_manifest(RequestContext("https", "showme.example"), _info())
        
        assert manifest["api"] == {
            "type": "openapi",
            "url": "https://showme.example/openapi.json",
            "is_user_authenticated": False,
        }
    
    def test_path_prefix(self):
        manifest = build_plugin_manifest(RequestContext("https", "tools.example"), _info(), path_prefix="/showme")
        
        assert manifest["api"]["url"] == "https://tools.example/showme/openapi.json"
    
    def test_static_fields(self):
        manifest = build_plugin_manifest(RequestContext("http", "localhost:9200"), _info())
        
        assert manifest["schema_version"] == "v1"
        assert manifest["name_for_human"] == "Show Me"
        assert manifest["name_for_model"] == "showme"
        assert manifest["auth"] == {"type": "none"}
        assert manifest["contact_email"] == "admin@example.com"
    
    def test_explicit_model_name(self):
        manifest = build_plugin_manifest(RequestContext("http", "h"), _info(name_for_model="diagrams"))
        
        assert manifest["name_for_model"] == "diagrams"
    
    def test_model_name(self):
        assert model_name("Show Me!") == "showme"
        assert model_name("Diagram Tool 2") == "diagramtool2"
