"""
Noteful API — User Registration Endpoint Tests
================================================

What we test:
    ✅ 201 with Location and no password in the body
    ✅ Password stored hashed
    ✅ 422 {code, reason, message, location} for each field rule
    ✅ 400 for a taken username
"""

import pytest
from sqlalchemy import select

from noteful.models import User
from noteful.security import verify_password

VALID = {"fullname": " Bob User ", "username": "bobuser", "password": "baseball"}


def _body(**overrides):
    body = dict(VALID)
    body.update(overrides)
    return {key: value for key, value in body.items() if value is not ...}


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_create_user(self, test_client, db_session):
        response = await test_client.post("/api/users", json=VALID)

        assert response.status_code == 201
        body = response.json()
        assert set(body.keys()) == {"id", "fullname", "username"}
        assert body["fullname"] == "Bob User"
        assert body["username"] == "bobuser"
        assert response.headers["Location"] == f"/api/users/{body['id']}"

        user = (await db_session.execute(select(User).where(User.id == body["id"]))).scalar_one()
        assert user.password != "baseball"
        assert verify_password("baseball", user.password)

    @pytest.mark.asyncio
    async def test_duplicate_username(self, test_client):
        assert (await test_client.post("/api/users", json=VALID)).status_code == 201

        response = await test_client.post("/api/users", json=VALID)

        assert response.status_code == 400
        assert response.json()["message"] == "The username already exists"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body, message, location",
        [
            (_body(username=...), "Missing field", "username"),
            (_body(password=...), "Missing field", "password"),
            (_body(username=42), "Incorrect field type: expected string", "username"),
            (_body(fullname=["Bob"]), "Incorrect field type: expected string", "fullname"),
            (_body(username=" bobuser"), "Field cannot start or end with whitespace", "username"),
            (_body(password="baseball "), "Field cannot start or end with whitespace", "password"),
            (_body(username=""), "Must be at least 1 characters long", "username"),
            (_body(password="short"), "Must be at least 8 characters long", "password"),
            (_body(password="x" * 73), "Must be at most 72 characters long", "password"),
        ],
    )
    async def test_field_errors(self, test_client, body, message, location):
        response = await test_client.post("/api/users", json=body)

        assert response.status_code == 422
        assert response.json() == {
            "code": 422,
            "reason": "ValidationError",
            "message": message,
            "location": location,
        }

    @pytest.mark.asyncio
    async def test_fullname_is_trimmed_or_defaulted(self, test_client):
        trimmed = await test_client.post(
            "/api/users", json={"fullname": "\t Ada Lovelace  ", "username": "ada", "password": "analytical"}
        )
        missing = await test_client.post(
            "/api/users", json={"username": "grace", "password": "compilers"}
        )

        assert trimmed.json()["fullname"] == "Ada Lovelace"
        assert missing.status_code == 201
        assert missing.json()["fullname"] == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("kwargs", [
        {},
        {"json": ["bobuser", "baseball"]},
        {"json": "bobuser"},
    ])
    async def test_body_that_is_not_an_object(self, test_client, kwargs):
        response = await test_client.post("/api/users", **kwargs)

        assert response.status_code == 422
        assert response.json() == {
            "code": 422,
            "reason": "ValidationError",
            "message": "Missing field",
            "location": "username",
        }
