"""
Tests for middleware and infrastructure components.
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from shared.config.logging import StructuredFormatter, get_logger, mask_email
from shared.infrastructure.correlation import (
    CorrelationIdFilter,
    CorrelationIdMiddleware,
    get_request_id,
    request_id_var,
)
from shared.infrastructure.db import safe_commit
from tiechef_api.core.cors import DEFAULT_CORS_ORIGINS, get_cors_origins
from tiechef_api.core.middlewares import (
    ContentTypeValidationMiddleware,
    SecurityHeadersMiddleware,
    register_middlewares,
)


# =============================================================================
# SecurityHeadersMiddleware Tests
# =============================================================================

class TestSecurityHeadersMiddleware:
    """Tests for security headers middleware."""

    @pytest.fixture
    def app_with_security_headers(self):
        app = FastAPI()
        app.add_middleware(SecurityHeadersMiddleware)

        @app.get("/test")
        def test_endpoint():
            return {"message": "ok"}

        return app

    def test_adds_basic_headers(self, app_with_security_headers):
        response = TestClient(app_with_security_headers).get("/test")

        assert response.headers.get("X-Content-Type-Options") == "nosniff"
        assert response.headers.get("X-Frame-Options") == "DENY"
        assert response.headers.get("Referrer-Policy") == "strict-origin-when-cross-origin"

    def test_adds_hsts_in_production(self):
        """Should add HSTS header only in production."""
        with patch("shared.config.settings.settings") as mock_settings:
            mock_settings.environment = "production"

            app = FastAPI()
            app.add_middleware(SecurityHeadersMiddleware)

            @app.get("/test")
            def test_endpoint():
                return {"message": "ok"}

            response = TestClient(app).get("/test")
            assert "max-age=31536000" in response.headers.get("Strict-Transport-Security", "")

    def test_no_hsts_in_development(self, app_with_security_headers):
        response = TestClient(app_with_security_headers).get("/test")
        assert "Strict-Transport-Security" not in response.headers

    def test_strips_server_header(self):
        app = FastAPI()
        app.add_middleware(SecurityHeadersMiddleware)

        @app.get("/test")
        def test_endpoint():
            return Response(content="ok", headers={"Server": "uvicorn"})

        response = TestClient(app).get("/test")
        assert response.status_code == 200
        assert "server" not in response.headers
        assert response.headers["X-Frame-Options"] == "DENY"


# =============================================================================
# ContentTypeValidationMiddleware Tests
# =============================================================================

class TestContentTypeValidationMiddleware:
    """Tests for content-type validation middleware."""

    @pytest.fixture
    def app_with_content_validation(self):
        app = FastAPI()
        app.add_middleware(ContentTypeValidationMiddleware)

        @app.post("/test")
        def post_endpoint(data: dict = None):
            return {"message": "ok"}

        @app.post("/api/health/echo")
        def exempt_endpoint():
            return {"message": "ok"}

        return app

    def test_allows_json_content_type(self, app_with_content_validation):
        response = TestClient(app_with_content_validation).post("/test", json={"key": "value"})
        assert response.status_code != 415

    def test_allows_bodyless_post(self, app_with_content_validation):
        """init-test-data and reset calls send no Content-Type."""
        response = TestClient(app_with_content_validation).post("/test")
        assert response.status_code != 415

    def test_rejects_unsupported_content_type(self, app_with_content_validation):
        response = TestClient(app_with_content_validation).post(
            "/test",
            content="some data",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code == 415
        assert "Unsupported Media Type" in response.json()["detail"]

    def test_exempts_health_endpoints(self, app_with_content_validation):
        response = TestClient(app_with_content_validation).post(
            "/api/health/echo",
            content="ping",
            headers={"Content-Type": "text/plain"},
        )
        assert response.status_code != 415


# =============================================================================
# CorrelationIdMiddleware Tests
# =============================================================================

class TestCorrelationIdMiddleware:
    """Tests for correlation ID middleware."""

    @pytest.fixture
    def app_with_correlation(self):
        app = FastAPI()
        app.add_middleware(CorrelationIdMiddleware)

        @app.get("/test")
        def test_endpoint():
            return {"request_id": get_request_id()}

        return app

    def test_generates_request_id_when_not_provided(self, app_with_correlation):
        response = TestClient(app_with_correlation).get("/test")

        request_id = response.headers.get("X-Request-ID")
        assert request_id is not None
        assert len(request_id) == 36  # UUID v4 length

    def test_uses_provided_request_id(self, app_with_correlation):
        custom_id = "my-custom-request-id-12345"
        response = TestClient(app_with_correlation).get("/test", headers={"X-Request-ID": custom_id})

        assert response.headers.get("X-Request-ID") == custom_id


# =============================================================================
# CorrelationIdFilter Tests
# =============================================================================

class TestCorrelationIdFilter:
    """Tests for correlation ID logging filter."""

    def test_adds_request_id_to_log_record(self):
        filter_obj = CorrelationIdFilter()
        token = request_id_var.set("test-request-123")
        try:
            record = MagicMock()
            assert filter_obj.filter(record) is True
            assert record.request_id == "test-request-123"
        finally:
            request_id_var.reset(token)

    def test_uses_dash_when_no_request_id(self):
        filter_obj = CorrelationIdFilter()
        token = request_id_var.set("")
        try:
            record = MagicMock()
            assert filter_obj.filter(record) is True
            assert record.request_id == "-"
        finally:
            request_id_var.reset(token)


# =============================================================================
# Logging Tests
# =============================================================================

class TestStructuredLogging:
    """Keyword arguments become structured fields."""

    def test_kwargs_reach_json_output(self):
        logger = get_logger("tiechef_api.tests.structured")
        captured = []

        class ListHandler(logging.Handler):
            def emit(self, record):
                captured.append(record)

        handler = ListHandler()
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            logger.info("Dish created", entity_id=7)
        finally:
            logger.removeHandler(handler)

        payload = json.loads(StructuredFormatter().format(captured[0]))
        assert payload["message"] == "Dish created"
        assert payload["data"] == {"entity_id": 7}

    def test_mask_email(self):
        masked = mask_email("maria.sidorova@tiechef.com")
        assert "maria.sidorova" not in masked
        assert masked.endswith("@tiechef.com")


# =============================================================================
# safe_commit Tests
# =============================================================================

class TestSafeCommit:
    """Tests for safe_commit utility."""

    def test_commits_successfully(self):
        mock_db = MagicMock()
        safe_commit(mock_db)

        mock_db.commit.assert_called_once()
        mock_db.rollback.assert_not_called()

    def test_rollbacks_and_reraises_on_error(self):
        mock_db = MagicMock()
        mock_db.commit.side_effect = Exception("Database error")

        with pytest.raises(Exception, match="Database error"):
            safe_commit(mock_db)

        mock_db.rollback.assert_called_once()


# =============================================================================
# Registration Tests
# =============================================================================

class TestRegistration:

    def test_registers_all_middlewares(self):
        app = FastAPI()
        register_middlewares(app)

        middleware_classes = [m.cls for m in app.user_middleware]
        assert SecurityHeadersMiddleware in middleware_classes
        assert ContentTypeValidationMiddleware in middleware_classes
        assert CorrelationIdMiddleware in middleware_classes

    def test_default_cors_origins(self):
        with patch("tiechef_api.core.cors.settings") as mock_settings:
            mock_settings.allowed_origins = ""
            assert get_cors_origins() == DEFAULT_CORS_ORIGINS

    def test_cors_origins_from_settings(self):
        with patch("tiechef_api.core.cors.settings") as mock_settings:
            mock_settings.allowed_origins = "https://a.example, https://b.example"
            assert get_cors_origins() == ["https://a.example", "https://b.example"]
