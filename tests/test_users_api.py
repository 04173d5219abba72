# File: tests/test_users_api.py

"""
Endpoint tests for /api/users using FastAPI's TestClient.
"""

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from users_api.db.session import get_db
from users_api.core.config import settings
from users_api.main import app


def test_post_seeds_and_acknowledges(client):
    resp = client.post("/api/users")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Users created"}


def test_get_before_seeding_is_empty_list(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    assert resp.json() == []


def test_get_after_seeding_returns_second_sally(client):
    client.post("/api/users")

    resp = client.get("/api/users")
    assert resp.status_code == 200
    data = resp.json()
    assert isinstance(data, list)
    assert len(data) == 1
    assert data[0]["name"] == "Sally"
    assert data[0]["email"] == "sally@test1.com"
    assert data[0]["age"] == 13
    assert isinstance(data[0]["id"], int)


def test_get_uses_configured_pagination(client, monkeypatch):
    monkeypatch.setattr(settings, "users_skip", 0)
    client.post("/api/users")

    data = client.get("/api/users").json()
    assert [u["age"] for u in data] == [12, 13]


def test_get_uses_configured_filter(client, monkeypatch):
    monkeypatch.setattr(settings, "users_filter_name", "Kyle")
    monkeypatch.setattr(settings, "users_skip", 0)
    client.post("/api/users")

    data = client.get("/api/users").json()
    assert [u["email"] for u in data] == ["kyle@test.com"]


def test_posting_twice_still_serves_one_record(client):
    client.post("/api/users")
    client.post("/api/users")

    assert len(client.get("/api/users").json()) == 1


def test_storage_failure_is_a_generic_500():
    # No tables were created on this engine, so every query fails.
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SessionBroken = sessionmaker(bind=engine)

    def broken_db():
        session = SessionBroken()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = broken_db
    try:
        client = TestClient(app, raise_server_exceptions=False)
        assert client.get("/api/users").status_code == 500
        assert client.post("/api/users").status_code == 500
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


def test_index_page_fetches_users(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert "<h1>Hello World</h1>" in resp.text
    assert "fetch('/api/users')" in resp.text


def test_health_endpoint(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
