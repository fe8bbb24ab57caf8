"""
Integration tests for the appinfo API endpoints.
"""

import sys
from pathlib import Path

# Add parent directory to path to import clienticon modules
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from fastapi.testclient import TestClient
from clienticon.main import app
from clienticon.dependencies import get_appinfo_path

from conftest import app_tree


@pytest.fixture
def client_for():
    """Build a TestClient whose appinfo.vdf dependency points at `path`."""
    def _client(path):
        app.dependency_overrides[get_appinfo_path] = lambda: Path(path)
        return TestClient(app)
    yield _client
    app.dependency_overrides.clear()


@pytest.fixture
def library_appinfo(write_appinfo):
    return write_appinfo([
        (10, app_tree(10, "icon_ten")),
        (440, app_tree(440, "440_abcdef.ico")),
        (570, app_tree(570)),
    ])


class TestClientIconEndpoint:
    """GET /api/appinfo/{app_id}/clienticon"""

    def test_found(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/440/clienticon")
        assert response.status_code == 200
        assert response.json() == {"app_id": "440", "clienticon": "440_abcdef.ico"}

    def test_app_without_icon(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/570/clienticon")
        assert response.status_code == 200
        assert response.json()["clienticon"] is None

    def test_unknown_app(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/441/clienticon")
        assert response.status_code == 200
        assert response.json()["clienticon"] is None

    def test_missing_file_is_404(self, client_for, tmp_path):
        response = client_for(tmp_path / "missing.vdf").get("/api/appinfo/440/clienticon")
        assert response.status_code == 404
        assert "appinfo.vdf not found" in response.json()["detail"]

    def test_unreadable_file_is_500(self, client_for, tmp_path):
        path = tmp_path / "appinfo.vdf"
        path.write_bytes(b'\x29\x44')
        response = client_for(path).get("/api/appinfo/440/clienticon")
        assert response.status_code == 500


class TestStatusEndpoint:
    """GET /api/appinfo/status"""

    def test_missing_file(self, client_for, tmp_path):
        response = client_for(tmp_path / "missing.vdf").get("/api/appinfo/status")
        data = response.json()
        assert response.status_code == 200
        assert data["exists"] is False
        assert data["magic"] is None

    def test_existing_file(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/status")
        data = response.json()
        assert data["exists"] is True
        assert data["magic"] == "0x07564429"
        assert data["universe"] == 1
        assert data["key_count"] == 5
        assert data["size_bytes"] == library_appinfo.stat().st_size


class TestEntriesEndpoint:
    """GET /api/appinfo/entries"""

    def test_lists_entries(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/entries")
        data = response.json()
        assert response.status_code == 200
        assert [e["app_id"] for e in data] == [10, 440, 570]
        assert all(e["parsed"] for e in data)

    def test_limit(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/entries?limit=2")
        assert [e["app_id"] for e in response.json()] == [10, 440]

    def test_invalid_limit(self, client_for, library_appinfo):
        response = client_for(library_appinfo).get("/api/appinfo/entries?limit=0")
        assert response.status_code == 422

    def test_missing_file_is_404(self, client_for, tmp_path):
        response = client_for(tmp_path / "missing.vdf").get("/api/appinfo/entries")
        assert response.status_code == 404
