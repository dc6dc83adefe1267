"""
Тесты служебных эндпоинтов и формата ошибок.
"""

import re

from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession

from rawpasta.db.repositories.document_repository import DocumentRepository
from rawpasta.main import app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"timestamp", "date", "status", "uptime"}
    assert body["status"] == "healthy"
    assert re.fullmatch(r"\d+\.\d{2} seconds", body["uptime"])
    assert body["date"].endswith("Z")


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"


def test_unknown_route_is_method_not_allowed(client):
    response = client.get("/nope")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_wrong_method_is_method_not_allowed(client):
    response = client.get("/upload")

    assert response.status_code == 405
    assert response.json() == {"error": "Method Not Allowed"}


def test_unexpected_failure_uses_error_shape(client, auth_headers, monkeypatch):
    async def refuse(self):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(DocumentRepository, "get_all_summaries", refuse)
    lenient_client = TestClient(app, raise_server_exceptions=False)

    response = lenient_client.get("/list", headers=auth_headers)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Internal Server Error"}


def test_health_degraded_when_database_refuses_connection(client, monkeypatch):
    async def refuse(self, *args, **kwargs):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr(AsyncSession, "execute", refuse)

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "degraded"
