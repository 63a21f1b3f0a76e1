"""
notecache — Upload Form and Health Route Tests
===============================================
"""

import pytest

from notecache.config import Settings


class TestUploadForm:

    @pytest.mark.asyncio
    async def test_serves_packaged_form(self, test_client):
        response = await test_client.get("/UploadForm.html")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'action="/write"' in response.text
        assert 'name="note_name"' in response.text

    @pytest.mark.asyncio
    async def test_missing_form_is_500(self, test_client, app, tmp_path):
        app.state.settings = Settings(upload_form=tmp_path / "missing.html")

        response = await test_client.get("/UploadForm.html")

        assert response.status_code == 500
        assert response.text == "An error occurred while serving the file."


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_with_writable_cache(self, test_client, cache_dir):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["cache_writable"] is True
        assert body["cache_dir"] == str(cache_dir.resolve())

    @pytest.mark.asyncio
    async def test_unhealthy_without_cache_dir(self, test_client, cache_dir):
        cache_dir.rmdir()

        response = await test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "unhealthy"


class TestDocs:

    @pytest.mark.asyncio
    async def test_openapi_lists_note_routes(self, test_client):
        response = await test_client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert set(paths["/notes/{note_name}"]) == {"get", "put", "delete"}
        assert "post" in paths["/write"]
        assert "get" in paths["/notes"]
