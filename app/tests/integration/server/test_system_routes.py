"""Tests for the system routes and request middleware."""

import pytest

pytestmark = pytest.mark.integration


class TestSystemRoutes:
    """Tests for /health, /version and /locales."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_version(self, client):
        assert "version" in client.get("/version").json()

    def test_locales(self, client):
        response = client.get("/locales", headers={"Accept-Language": "fr-CA"})
        assert response.json() == {
            "default": "en-US",
            "available": ["en-US", "fr"],
            "current": "fr",
        }


class TestRequestContext:
    """Tests for the correlation id middleware."""

    def test_correlation_id_generated(self, client):
        assert client.get("/health").headers["X-Correlation-ID"]

    def test_correlation_id_echoed(self, client):
        response = client.get("/health", headers={"X-Correlation-ID": "req-123"})
        assert response.headers["X-Correlation-ID"] == "req-123"


class TestAppState:
    """Tests for components published on app.state."""

    def test_catalog_and_renderer(self, client):
        state = client.app.state
        assert [loc.tag for loc in state.locale_catalog.available_locales] == ["en-US", "fr"]
        assert state.template_renderer.assets.manifest_path == "assets/manifest.json"
