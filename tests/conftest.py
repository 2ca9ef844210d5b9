from __future__ import annotations

import os

# Конфиг читается при импорте, выставляем до импорта приложения
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SECRET_KEY"] = "test-secret"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from fittrack.core.db import Base, get_db
from fittrack.models import User, UserRole

DEFAULT_PASSWORD = "pw123456"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Регистрирует и логинит пользователя; возвращает {"id", "email", "headers"}"""
    def _signup(email: str, name: str = "Tester", password: str = DEFAULT_PASSWORD) -> dict:
        resp = client.post("/api/register", json={"email": email, "password": password, "name": name})
        assert resp.status_code == 201, resp.text
        resp = client.post("/api/login", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        body = resp.json()
        return {
            "id": body["user"]["id"],
            "email": email,
            "headers": {"Authorization": f"Bearer {body['access_token']}"},
        }

    return _signup


@pytest.fixture
def make_admin(session_factory):
    def _make_admin(email: str) -> None:
        session = session_factory()
        try:
            session.query(User).filter(User.email == email).update({"role": UserRole.ADMIN})
            session.commit()
        finally:
            session.close()

    return _make_admin


@pytest.fixture
def group_for(client):
    def _group_for(user: dict, name: str = "Runners") -> str:
        resp = client.post("/api/groups", json={"name": name}, headers=user["headers"])
        assert resp.status_code == 200, resp.text
        return resp.json()["group"]["id"]

    return _group_for
