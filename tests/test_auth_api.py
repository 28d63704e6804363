"""
Tests for the authentication endpoints.

The auth platform is replaced with FakeAuth; tokens are real JWTs signed
with the test secret so the verification path runs unchanged.
"""

import jwt
import pytest
from fastapi import HTTPException

from atlas.config import get_settings
from atlas.services.auth_service import AuthService
from tests.conftest import OWNER_ID, make_token


class TestSchemaValidation:
    def test_register_rejects_short_password(self, client, fake_auth):
        response = client.post("/api/v1/auth/register", json={"email": "gm@example.com", "password": "short"})
        assert response.status_code == 422

    def test_register_rejects_bad_email(self, client, fake_auth):
        response = client.post("/api/v1/auth/register", json={"email": "not-an-email", "password": "longenough"})
        assert response.status_code == 422


class TestAuthEndpoints:
    def test_register(self, client, fake_auth):
        response = client.post("/api/v1/auth/register", json={"email": "gm@example.com", "password": "longenough"})
        assert response.status_code == 201
        body = response.json()
        assert body["user_id"] == OWNER_ID
        assert body["email"] == "gm@example.com"
        assert body["refresh_token"] == f"{OWNER_ID}-refresh"

    def test_register_without_session(self, client, fake_auth):
        fake_auth.with_session = False
        response = client.post("/api/v1/auth/register", json={"email": "gm@example.com", "password": "longenough"})
        assert response.status_code == 400

    def test_login(self, client, fake_auth):
        response = client.post("/api/v1/auth/login", json={"email": "gm@example.com", "password": "secret"})
        assert response.status_code == 200
        assert response.json()["access_token"]

    def test_login_failure(self, client, fake_auth):
        fake_auth.fail = True
        response = client.post("/api/v1/auth/login", json={"email": "gm@example.com", "password": "wrong"})
        assert response.status_code == 401
        assert "Authentication failed" in response.json()["detail"]

    def test_refresh(self, client, fake_auth):
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "owner-refresh"})
        assert response.status_code == 200
        assert response.json()["user_id"] == OWNER_ID

    def test_refresh_failure(self, client, fake_auth):
        fake_auth.fail = True
        response = client.post("/api/v1/auth/refresh", json={"refresh_token": "stale"})
        assert response.status_code == 401

    def test_logout(self, client, fake_auth, owner_headers):
        response = client.post("/api/v1/auth/logout", headers=owner_headers)
        assert response.status_code == 204
        assert fake_auth.signed_out

    def test_logout_requires_sign_in(self, client, fake_auth):
        assert client.post("/api/v1/auth/logout").status_code == 401


class TestTokenVerification:
    def test_viewer_from_token(self):
        viewer = AuthService().get_viewer(make_token("u-42", "dm@example.com"))
        assert viewer.user_id == "u-42"
        assert viewer.email == "dm@example.com"

    def test_wrong_audience(self):
        token = jwt.encode({"sub": "u-42", "aud": "anon"}, get_settings().SUPABASE_JWT_SECRET, algorithm="HS256")
        with pytest.raises(HTTPException) as exc_info:
            AuthService().verify_token(token)
        assert exc_info.value.status_code == 401

    def test_missing_subject(self):
        token = jwt.encode({"aud": "authenticated"}, get_settings().SUPABASE_JWT_SECRET, algorithm="HS256")
        with pytest.raises(HTTPException) as exc_info:
            AuthService().verify_token(token)
        assert exc_info.value.status_code == 401
