"""Folder endpoint tests against the seeded database."""

import pytest

ARCHIVE = "111111111111111111111100"
DRAFTS = "111111111111111111111101"
UNKNOWN = "AAAAAAAAAAAAAAAAAAAAAAAA"


class TestFolders:

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, test_client):
        response = await test_client.get("/api/folders")

        assert response.status_code == 200
        assert [folder["name"] for folder in response.json()] == [
            "Archive", "Drafts", "Personal", "Work",
        ]
        assert set(response.json()[0].keys()) == {"id", "name", "createdAt", "updatedAt"}

    @pytest.mark.asyncio
    async def test_get_folder(self, test_client):
        response = await test_client.get(f"/api/folders/{ARCHIVE}")

        assert response.status_code == 200
        assert response.json()["name"] == "Archive"

    @pytest.mark.asyncio
    async def test_get_invalid_and_unknown(self, test_client):
        assert (await test_client.get("/api/folders/123")).status_code == 400
        assert (await test_client.get(f"/api/folders/{UNKNOWN}")).status_code == 404

    @pytest.mark.asyncio
    async def test_create_folder(self, test_client):
        response = await test_client.post("/api/folders", json={"name": "Recipes"})

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Recipes"
        assert response.headers["Location"] == f"/api/folders/{body['id']}"

    @pytest.mark.asyncio
    async def test_create_missing_name(self, test_client):
        response = await test_client.post("/api/folders", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Missing `name` in request body"

    @pytest.mark.asyncio
    async def test_create_duplicate_name(self, test_client):
        response = await test_client.post("/api/folders", json={"name": "Archive"})

        assert response.status_code == 400
        assert response.json()["message"] == "The folder name already exists"

    @pytest.mark.asyncio
    async def test_rename_folder(self, test_client):
        response = await test_client.put(f"/api/folders/{DRAFTS}", json={"name": "Ideas"})

        assert response.status_code == 200
        assert response.json()["name"] == "Ideas"

    @pytest.mark.asyncio
    async def test_rename_to_existing_name(self, test_client):
        response = await test_client.put(f"/api/folders/{DRAFTS}", json={"name": "Work"})

        assert response.status_code == 400
        assert response.json()["message"] == "The folder name already exists"

    @pytest.mark.asyncio
    async def test_delete_folder_keeps_notes(self, test_client):
        response = await test_client.delete(f"/api/folders/{DRAFTS}")
        assert response.status_code == 204

        assert (await test_client.get(f"/api/folders/{DRAFTS}")).status_code == 404
        for note_id in ("000000000000000000000001", "000000000000000000000002"):
            note = (await test_client.get(f"/api/notes/{note_id}")).json()
            assert note["folderId"] is None

    @pytest.mark.asyncio
    async def test_delete_unknown(self, test_client):
        assert (await test_client.delete(f"/api/folders/{UNKNOWN}")).status_code == 404
