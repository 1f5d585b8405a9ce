"""Shared fixtures for web API tests."""

import time

import pytest
from fastapi.testclient import TestClient
from jose import jwt

JWT_SECRET = "test-supabase-jwt-secret"


def _make_token(user_id="user-123", email="test@example.com", secret=JWT_SECRET, **claims):
    payload = {
        "sub": user_id,
        "email": email,
        "aud": "authenticated",
        "exp": int(time.time()) + 3600,
        **claims,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {_make_token()}"}


@pytest.fixture
def auth_headers_b():
    """Second user token for isolation tests."""
    return {"Authorization": f"Bearer {_make_token('user-456', 'b@example.com')}"}


@pytest.fixture
def web_env(clean_env, monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "anon-key")
    monkeypatch.setenv("SUPABASE_JWT_SECRET", JWT_SECRET)
    monkeypatch.delenv("SUPABASE_JWT_AUD", raising=False)

    from web.deps import get_config

    get_config.cache_clear()
    yield clean_env
    get_config.cache_clear()


@pytest.fixture
def app(web_env, fake_client, today):
    """App wired to the in-memory store and a fixed calendar day."""
    from web.app import app
    from web.deps import get_user_client, get_user_today

    app.dependency_overrides[get_user_client] = lambda: fake_client
    app.dependency_overrides[get_user_today] = lambda: today
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_token():
    """Factory for signed access tokens with overridable claims."""
    return _make_token
