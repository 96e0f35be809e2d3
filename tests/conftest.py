"""Pytest configuration for the todo API tests.

Every test gets its own todos/users files under tmp_path, so nothing
touches the real data/ directory.
"""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def data_files(tmp_path, monkeypatch):
    """Point both collections at temporary files."""
    todos_path = tmp_path / "todos.json"
    users_path = tmp_path / "users.json"
    monkeypatch.setenv("TODOS_FILE", str(todos_path))
    monkeypatch.setenv("USERS_FILE", str(users_path))
    monkeypatch.setenv("JWT_SECRET", "test-secret")
    return {"todos": todos_path, "users": users_path}


@pytest.fixture
def client(data_files):
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    """Sign up a fresh user and return headers carrying its token."""
    resp = client.post("/auth/signup", json={"username": "alice", "password": "pw123"})
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}
