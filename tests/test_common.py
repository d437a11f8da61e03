"""Tests for common utilities."""

import json
import logging

import pytest
from showme.common.validators import is_valid_url, is_valid_payload
from showme.common.headers import (
    RequestContext,
    request_context_from_headers,
    get_forwarded_path_prefix,
)
from showme.common.url_builder import build_short_url
from showme.common.logging_config import JsonFormatter, setup_logging, get_logger


class TestValidators:
    """Test validation utilities."""
    
    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid
        
        valid, _ = is_valid_url("http://example.com/path")
        assert valid
        
        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value")
        assert valid
    
    def test_invalid_urls(self):
        """Test invalid URL validation."""
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()
        
        valid, error = is_valid_url("not a url")
        assert not valid
        
        valid, error = is_valid_url("not-a-url")
        assert not valid
        
        valid, error = is_valid_url("ftp://example.com")
        assert not valid
        assert "http" in error.lower()
        
        valid, error = is_valid_url("https://example.com:99999/")
        assert not valid
        
        valid, error = is_valid_url("https://" + "a" * 2048)
        assert not valid
        assert "too long" in error.lower()
    
    def test_payloads(self):
        """Any non-empty string is a valid payload."""
        assert is_valid_payload("graph TB; A-->B")[0]
        assert is_valid_payload("not a url")[0]
        assert not is_valid_payload("")[0]
        assert is_valid_payload("  \n")[0]


class TestHeaders:
    """Test header utilities."""
    
    def test_context_from_forwarded_headers(self):
        """Proxy headers win over the Host header."""
        headers = {
            "X-Forwarded-Proto": "https",
            "X-Forwarded-Host": "showme.example",
            "Host": "internal:9200",
        }
        
        ctx = request_context_from_headers(headers, "http://localhost:9200", "http")
        
        assert ctx == RequestContext(scheme="https", host="showme.example")
        assert ctx.base_url == "https://showme.example"
    
    def test_context_takes_first_forwarded_value(self):
        headers = {"x-forwarded-proto": "https, http", "x-forwarded-host": "a.example, b.example"}
        
        ctx = request_context_from_headers(headers, "http://localhost:9200")
        
        assert ctx.base_url == "https://a.example"
    
    def test_context_from_host_header(self):
        ctx = request_context_from_headers({"host": "localhost:9200"}, "http://fallback", "http")
        
        assert ctx.base_url == "http://localhost:9200"
    
    def test_context_fallback(self):
        """Test base URL fallback."""
        ctx = request_context_from_headers({}, "https://configured.example/")
        
        assert ctx.base_url == "https://configured.example"
    
    def test_forwarded_path_prefix(self):
        assert get_forwarded_path_prefix({"X-Forwarded-Prefix": "/showme/"}) == "/showme"
        assert get_forwarded_path_prefix({"x-forwarded-prefix": "tools"}) == "/tools"
        assert get_forwarded_path_prefix({"x-forwarded-prefix": "/"}) == ""
        assert get_forwarded_path_prefix({}) == ""


class TestURLBuilder:
    """Test URL building utilities."""
    
    def test_build_short_url_default_prefix(self):
        url = build_short_url(link_id="abc123", base_url="https://example.com/")
        
        assert url == "https://example.com/s/abc123"
    
    def test_build_short_url_no_prefix(self):
        url = build_short_url(link_id="abc123", base_url="https://example.com", path_prefix="")
        
        assert url == "https://example.com/abc123"


class TestLogging:
    """Test logging setup."""
    
    def test_setup_does_not_stack_handlers(self):
        logger = setup_logging(level="DEBUG")
        setup_logging(level="DEBUG")
        
        assert logger.name == "showme"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    
    def test_json_formatter_escapes(self):
        record = logging.LogRecord("showme", logging.INFO, __file__, 1, 'said "hi"', None, None)
        
        entry = json.loads(JsonFormatter().format(record))
        
        assert entry["message"] == 'said "hi"'
        assert entry["level"] == "INFO"
    
    def test_get_logger_namespaces(self):
        assert get_logger("web").name == "showme.web"
        assert get_logger("showme.service").name == "showme.service"
        assert get_logger().name == "showme"
    
    def test_web_loggers_share_namespace(self):
        from web_app import app_factory
        from web_app.middleware.logging import LoggingMiddleware
        
        assert app_factory.logger.name == "showme.web"
        assert LoggingMiddleware(app=None).logger is get_logger("web")
