"""Tag endpoint tests against the seeded database."""

import pytest

BREED = "222222222222222222222200"
DOMESTIC = "222222222222222222222202"
UNKNOWN = "AAAAAAAAAAAAAAAAAAAAAAAA"


class TestTags:

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, test_client):
        response = await test_client.get("/api/tags")

        assert response.status_code == 200
        assert [tag["name"] for tag in response.json()] == ["breed", "domestic", "feral", "hybrid"]

    @pytest.mark.asyncio
    async def test_get_tag(self, test_client):
        response = await test_client.get(f"/api/tags/{BREED}")

        assert response.status_code == 200
        assert response.json()["id"] == BREED
        assert response.json()["name"] == "breed"

    @pytest.mark.asyncio
    async def test_create_and_duplicate(self, test_client):
        created = await test_client.post("/api/tags", json={"name": "tabby"})
        assert created.status_code == 201
        assert created.headers["Location"].endswith(created.json()["id"])

        duplicate = await test_client.post("/api/tags", json={"name": "tabby"})
        assert duplicate.status_code == 400
        assert duplicate.json()["message"] == "The tag name already exists"

    @pytest.mark.asyncio
    async def test_blank_name(self, test_client):
        response = await test_client.post("/api/tags", json={"name": "   "})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_tag(self, test_client):
        response = await test_client.put(f"/api/tags/{BREED}", json={"name": "pedigree"})

        assert response.status_code == 200
        note = (await test_client.get("/api/notes/000000000000000000000000")).json()
        assert note["tags"] == [{"id": BREED, "name": "pedigree"}]

    @pytest.mark.asyncio
    async def test_delete_tag_pulls_it_from_notes(self, test_client):
        response = await test_client.delete(f"/api/tags/{DOMESTIC}")
        assert response.status_code == 204

        note = (await test_client.get("/api/notes/000000000000000000000003")).json()
        assert note["tags"] == []
        tagged = await test_client.get("/api/notes", params={"tagId": DOMESTIC})
        assert tagged.json() == []

    @pytest.mark.asyncio
    async def test_invalid_and_unknown(self, test_client):
        assert (await test_client.put("/api/tags/xyz", json={"name": "a"})).status_code == 400
        assert (await test_client.delete(f"/api/tags/{UNKNOWN}")).status_code == 404
