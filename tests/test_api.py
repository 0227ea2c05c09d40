"""
Tests for FastAPI endpoints
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import Mock

from conftest import SAMPLE_ARTICLE_LINKS
from src.api.main import app, get_linker_dependency
from src.hosts.soup import HtmlLinker


@pytest.fixture
def test_linker(resolver):
    """Linker over the sample catalogue, without article extraction"""
    return HtmlLinker(resolver)


@pytest.fixture
def client(test_linker):
    """Create test client"""
    app.dependency_overrides[get_linker_dependency] = lambda: test_linker
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """Test health check endpoint"""

    def test_health_check(self, client):
        """Test health check returns service status"""
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data
        assert "catalogue_size" in data


class TestLinkEndpoint:
    """Test the link endpoint"""

    def test_link_page(self, client, sample_article_html):
        """Test linking a page returns markup, stats and the match log"""
        response = client.post("/api/link", json={"html": sample_article_html, "article_selector": "article"})
        assert response.status_code == 200

        data = response.json()
        assert data["stats"] == {"linked": len(SAMPLE_ARTICLE_LINKS), "mode": "single-phase"}
        assert [entry["text"] for entry in data["match_log"]] == SAMPLE_ARTICLE_LINKS
        assert 'class="wikilink"' in data["html"]
        assert data["debug_info"] is None

    def test_link_page_debug(self, client, sample_article_html):
        """Test debug mode returns the diagnostic trace"""
        response = client.post("/api/link", json={"html": sample_article_html, "debug": True})
        assert response.status_code == 200

        debug_info = response.json()["debug_info"]
        assert debug_info["selector"] == "article, main, body"
        assert debug_info["injection"]["skipped_already_linked"] == ["Barack Obama"]
        assert debug_info["discovery"] is None

    def test_no_entities(self, client):
        """Test a page without known entities comes back unchanged"""
        html = "<body><p>nothing to see here</p></body>"
        response = client.post("/api/link", json={"html": html})
        assert response.status_code == 200
        assert response.json()["html"] == html
        assert response.json()["stats"]["linked"] == 0

    def test_empty_html(self, client):
        """Test empty markup is rejected"""
        response = client.post("/api/link", json={"html": ""})
        assert response.status_code == 422

    def test_missing_html(self, client):
        """Test missing markup is rejected"""
        response = client.post("/api/link", json={"url": "https://example.com/"})
        assert response.status_code == 422

    def test_linker_failure(self, client):
        """Test unexpected failures return 500"""
        broken = Mock()
        broken.link.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_linker_dependency] = lambda: broken

        response = client.post("/api/link", json={"html": "<p>the reporter met Barack Obama</p>"})
        assert response.status_code == 500
