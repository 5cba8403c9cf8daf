"""Tests: application wiring, documentation and error envelopes."""

import logging

from httpx import ASGITransport, AsyncClient

import crud
from app import app
from errors import ApiError, AuthError, InternalError, NotFoundError, ValidationError


async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


async def test_openapi_document_declares_bearer_auth(client):
    resp = await client.get("/docs.json")
    assert resp.status_code == 200
    doc = resp.json()
    schemes = doc["components"]["securitySchemes"]
    assert schemes["bearerAuth"] == {
        "type": "http",
        "scheme": "bearer",
        "bearerFormat": "JWT",
    }
    assert "/users/register" in doc["paths"]
    assert "/movies/{movie_id}" in doc["paths"]
    assert "security" not in doc["paths"]["/users/login"]["post"]
    assert doc["paths"]["/movies"]["get"]["security"] == [{"bearerAuth": []}]
    register = doc["paths"]["/users/register"]["post"]["requestBody"]["content"]
    assert set(register) == {"application/json", "application/x-www-form-urlencoded"}
    assert "/movies/" not in doc["paths"]


async def test_swagger_ui_is_served(client):
    resp = await client.get("/docs")
    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


async def test_unknown_route(client):
    resp = await client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Route not found", "route": "/nope"}


async def test_wrong_method_is_405(client):
    resp = await client.patch("/users/register")
    assert resp.status_code == 405
    assert "error" in resp.json()


async def test_unhandled_error_becomes_500(client, auth_headers, monkeypatch):
    async def boom(self, page=1):
        raise RuntimeError("database is on fire")

    monkeypatch.setattr(crud.MovieRepository, "find_all", boom)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        resp = await c.get("/movies", headers=auth_headers)

    assert resp.status_code == 500
    assert resp.json() == {"error": "database is on fire"}


async def test_access_log_records_unhandled_errors(
    client, auth_headers, monkeypatch, caplog
):
    async def boom(self, page=1):
        raise RuntimeError("database is on fire")

    monkeypatch.setattr(crud.MovieRepository, "find_all", boom)
    caplog.set_level(logging.INFO, logger="movies_api.access")

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        await c.get("/movies", headers=auth_headers)

    lines = [
        r.getMessage() for r in caplog.records if r.name == "movies_api.access"
    ]
    assert any(line.startswith("GET /movies 500 ") for line in lines)


async def test_access_log_records_status(client, caplog):
    caplog.set_level(logging.INFO, logger="movies_api.access")
    await client.get("/health")
    lines = [
        r.getMessage() for r in caplog.records if r.name == "movies_api.access"
    ]
    assert any(line.startswith("GET /health 200 ") for line in lines)


def test_error_taxonomy_status_codes():
    assert ValidationError("x").status_code == 400
    assert AuthError("x").status_code == 401
    assert NotFoundError("x").status_code == 404
    assert InternalError("x").status_code == 500
    assert isinstance(NotFoundError("x"), ApiError)
    assert NotFoundError("Movie not found").to_response() == {
        "error": "Movie not found"
    }
