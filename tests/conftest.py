# tests/conftest.py
# Base de datos SQLite temporal y override de la sesión de FastAPI.

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine

from app.models import automation, expense, income, user  # noqa: F401  registra las tablas
from app.database import get_session
from app.main import app as fastapi_app

PASSWORD = "Str0ng!Pass"


@pytest.fixture()
def test_engine(tmp_path: Path):
    # Archivo (no :memory:) para que varias conexiones vean los mismos datos
    url = f"sqlite:///{tmp_path / 'test_finance.db'}"
    engine = create_engine(url, connect_args={"check_same_thread": False})
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def client(test_engine):
    def _get_test_session():
        with Session(test_engine) as s:
            yield s

    fastapi_app.dependency_overrides[get_session] = _get_test_session
    # sin "with": no dispara el lifespan sobre la base real
    c = TestClient(fastapi_app)
    try:
        yield c
    finally:
        fastapi_app.dependency_overrides.clear()


def signup(client, email="ann@example.com", first_name="Ann", password=PASSWORD):
    r = client.post(
        "/signup",
        json={"firstName": first_name, "emailId": email, "password": password},
    )
    assert r.status_code == 201, r.text
    return r.json()["data"]


@pytest.fixture()
def auth_client(client):
    signup(client)
    return client
