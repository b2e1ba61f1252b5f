"""
Unit tests for backend/auth.py
"""
import time

import jwt
import pytest
from fastapi import HTTPException

from backend.auth import JWT_ALGORITHM, get_current_user, validate_api_key, validate_jwt
from backend.settings import get_settings

SECRET = "test-jwt-secret-for-exercise-catalog-tests"


@pytest.fixture(autouse=True)
def auth_env(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", SECRET)
    monkeypatch.setenv("API_KEYS", "sk_test_abc,sk_test_def")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _token(claims, secret=SECRET):
    return jwt.encode(claims, secret, algorithm=JWT_ALGORITHM)


@pytest.mark.unit
class TestValidateApiKey:
    """Tests for API key validation."""

    def test_valid_key_returns_admin(self):
        assert validate_api_key("sk_test_abc") == "admin"

    def test_key_with_user_suffix(self):
        assert validate_api_key("sk_test_def:user_42") == "user_42"

    def test_unknown_key_rejected(self):
        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_nope")
        assert exc_info.value.status_code == 401

    def test_no_configured_keys(self, monkeypatch):
        monkeypatch.setenv("API_KEYS", "")
        get_settings.cache_clear()

        with pytest.raises(HTTPException) as exc_info:
            validate_api_key("sk_test_abc")
        assert exc_info.value.detail == "API key authentication not configured"


@pytest.mark.unit
class TestValidateJwt:
    """Tests for bearer JWT validation."""

    def test_valid_token(self):
        token = _token({"sub": "user_1", "exp": int(time.time()) + 60})
        assert validate_jwt(f"Bearer {token}") == "user_1"

    def test_missing_bearer_prefix(self):
        token = _token({"sub": "user_1"})
        with pytest.raises(HTTPException):
            validate_jwt(token)

    def test_expired_token(self):
        token = _token({"sub": "user_1", "exp": int(time.time()) - 60})
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(f"Bearer {token}")
        assert exc_info.value.detail == "Token expired"

    def test_wrong_secret(self):
        token = _token({"sub": "user_1"}, secret="another-secret-that-does-not-match-config")
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(f"Bearer {token}")
        assert exc_info.value.detail == "Invalid token"

    def test_missing_subject(self):
        token = _token({"role": "user"})
        with pytest.raises(HTTPException) as exc_info:
            validate_jwt(f"Bearer {token}")
        assert exc_info.value.detail == "Token missing user ID"


@pytest.mark.unit
class TestGetCurrentUser:
    """Tests for the combined auth dependency."""

    @pytest.mark.asyncio
    async def test_api_key_takes_precedence(self):
        user = await get_current_user(authorization="Bearer junk", x_api_key="sk_test_abc:u9")
        assert user == "u9"

    @pytest.mark.asyncio
    async def test_bearer_token(self):
        token = _token({"sub": "user_7"})
        assert await get_current_user(authorization=f"Bearer {token}", x_api_key=None) == "user_7"

    @pytest.mark.asyncio
    async def test_no_credentials(self):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(authorization=None, x_api_key=None)
        assert exc_info.value.status_code == 401
