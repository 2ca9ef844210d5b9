from __future__ import annotations

import jwt
import pytest

from fittrack.core.config import SECRET_KEY, SESSION_COOKIE_NAME
from fittrack.core.errors import Unauthenticated
from fittrack.core.logs import mask_email
from fittrack.core.security import decode_access_token
from fittrack.services import auth_service, user_service


def test_register_creates_user_with_user_role(client):
    resp = client.post("/api/register", json={"email": "a@x.com", "password": "pw123456", "name": "Ann"})
    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["email"] == "a@x.com"
    assert user["role"] == "USER"


def test_register_rejects_missing_fields(client):
    resp = client.post("/api/register", json={"email": "a@x.com", "password": "pw123456"})
    assert resp.status_code == 400


def test_register_rejects_duplicate_email(client):
    payload = {"email": "a@x.com", "password": "pw123456", "name": "Ann"}
    assert client.post("/api/register", json=payload).status_code == 201
    resp = client.post("/api/register", json=payload)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "User already exists"


def test_login_returns_token_with_id_and_role(client, signup):
    user = signup("a@x.com")
    token = user["headers"]["Authorization"].split()[1]
    payload = decode_access_token(token)
    assert payload["sub"] == user["id"]
    assert payload["role"] == "USER"


def test_login_sets_session_cookie(client, signup):
    signup("a@x.com")
    assert client.cookies.get(SESSION_COOKIE_NAME)
    # без заголовка Authorization работает cookie
    resp = client.get("/api/me")
    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "a@x.com"


def test_login_wrong_password(client, signup):
    signup("a@x.com")
    resp = client.post("/api/login", json={"email": "a@x.com", "password": "nope"})
    assert resp.status_code == 401


def test_requests_without_session_are_rejected(client):
    assert client.get("/api/activities").status_code == 401
    assert client.get("/api/groups").status_code == 401
    assert client.get("/api/leaderboard").status_code == 401


def test_invalid_and_foreign_tokens_are_rejected(client):
    assert client.get("/api/me", headers={"Authorization": "Bearer garbage"}).status_code == 401
    forged = jwt.encode({"sub": "someone"}, "other-secret", algorithm="HS256")
    assert client.get("/api/me", headers={"Authorization": f"Bearer {forged}"}).status_code == 401
    unknown = jwt.encode({"sub": "missing-user"}, SECRET_KEY, algorithm="HS256")
    assert client.get("/api/me", headers={"Authorization": f"Bearer {unknown}"}).status_code == 401


def test_logout_clears_cookie(client, signup):
    signup("a@x.com")
    client.post("/api/logout")
    assert client.get("/api/me").status_code == 401


def test_authorize(db):
    user_service.register(db, "Bob@X.com", "secret123", "Bob")

    identity = auth_service.authorize(db, "bob@x.com", "secret123")
    assert identity["email"] == "bob@x.com"
    assert identity["name"] == "Bob"
    assert identity["role"] == "USER"

    for email, password in [("bob@x.com", "wrong"), ("nobody@x.com", "secret123"), ("", "x"), ("bob@x.com", None)]:
        with pytest.raises(Unauthenticated):
            auth_service.authorize(db, email, password)


def test_mask_email():
    assert mask_email("alice@example.com") == "a***e@example.com"
    assert mask_email("ab@x.com") == "a*@x.com"
    assert mask_email(None) == "***"
