"""API tests for consultant login and token authentication."""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from timebill.adapters.configuration.config import settings
from timebill.adapters.outbound.security.auth_consultant_manager import TOKEN_TYPE, ConsultantAuthManager


@pytest.fixture
def consultant(client):
    return client.post("/api/consultants", json={"code": "ANA", "name": "Ana", "password": "segredo"}).json()


class TestLogin:
    """Tests for POST /api/login."""

    def test_login_success(self, client, consultant):
        response = client.post("/api/login", json={"code": "ANA", "password": "segredo"})

        assert response.status_code == 200
        body = response.json()
        assert body["consultant"] == consultant
        assert body["tokenType"] == "bearer"
        assert body["accessToken"]
        assert "password" not in body["consultant"]

    def test_wrong_password(self, client, consultant):
        response = client.post("/api/login", json={"code": "ANA", "password": "errada"})

        assert response.status_code == 401
        assert response.json() == {"message": "Código ou senha inválidos", "code": "INVALID_CREDENTIALS"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_code_gives_same_error(self, client, consultant):
        response = client.post("/api/login", json={"code": "ZZZ", "password": "segredo"})

        assert response.status_code == 401
        assert response.json()["message"] == "Código ou senha inválidos"

    def test_missing_password(self, client):
        response = client.post("/api/login", json={"code": "ANA"})

        assert response.status_code == 400

    def test_login_after_password_change(self, client, consultant):
        client.put(f"/api/consultants/{consultant['id']}", json={"password": "nova"})

        assert client.post("/api/login", json={"code": "ANA", "password": "segredo"}).status_code == 401
        assert client.post("/api/login", json={"code": "ANA", "password": "nova"}).status_code == 200


class TestCurrentConsultant:
    """Tests for GET /api/me."""

    def test_me_with_token(self, client, consultant):
        token = client.post("/api/login", json={"code": "ANA", "password": "segredo"}).json()["accessToken"]

        response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json() == consultant

    def test_me_without_token(self, client):
        response = client.get("/api/me")

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    def test_me_with_garbage_token(self, client):
        response = client.get("/api/me", headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    def test_expired_token(self, client, consultant):
        expired = datetime.now(timezone.utc) - timedelta(minutes=1)
        token = jwt.encode(
            {"sub": str(consultant["id"]), "exp": int(expired.timestamp()), "type": TOKEN_TYPE},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_of_another_type(self, client, consultant):
        token = jwt.encode(
            {"sub": str(consultant["id"]), "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )

        response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_of_deleted_consultant(self, client, consultant):
        token = client.post("/api/login", json={"code": "ANA", "password": "segredo"}).json()["accessToken"]
        client.delete(f"/api/consultants/{consultant['id']}")

        response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


class TestPasswordHashing:
    """Tests for the password helpers."""

    async def test_hash_and_verify(self):
        hashed = await ConsultantAuthManager.hash_password("segredo")

        assert hashed != "segredo"
        assert await ConsultantAuthManager.verify_password("segredo", hashed)
        assert not await ConsultantAuthManager.verify_password("outra", hashed)

    async def test_unrecognized_hash_does_not_match(self):
        assert not await ConsultantAuthManager.verify_password("segredo", "segredo")
