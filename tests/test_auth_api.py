import pytest
from fastapi import status

from .conftest import BaseIntegrationTest
from .factories import user_factory

API = "/api/v1"


class TestAuthAPI(BaseIntegrationTest):
    """Integration tests for Authentication API"""

    @pytest.mark.asyncio
    async def test_register_returns_token_and_user(self, client):
        response = await client.post(f"{API}/auth/register", json=user_factory.create_user_data())

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User registered successfully"
        assert body["data"]["token"]
        assert body["data"]["user"]["email"] == "test@example.com"
        assert "password" not in body["data"]["user"]
        assert "password_hash" not in body["data"]["user"]
        assert "error" not in body

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, client):
        await client.post(f"{API}/auth/register", json=user_factory.create_user_data())

        response = await client.post(f"{API}/auth/register", json=user_factory.create_user_data(name="other"))

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_register_short_password(self, client):
        response = await client.post(f"{API}/auth/register", json=user_factory.create_user_data(password="123"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Validation failed"
        assert body["error"]

    @pytest.mark.asyncio
    async def test_login_success(self, client):
        await client.post(f"{API}/auth/register", json=user_factory.create_user_data())

        response = await client.post(
            f"{API}/auth/login", json={"email": "test@example.com", "password": "secret123"}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["token"]

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client):
        await client.post(f"{API}/auth/register", json=user_factory.create_user_data())

        response = await client.post(
            f"{API}/auth/login", json={"email": "test@example.com", "password": "wrongpassword"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid email or password"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client):
        response = await client.post(
            f"{API}/auth/login", json={"email": "nonexistent@example.com", "password": "wrongpassword"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid email or password"

    @pytest.mark.asyncio
    async def test_token_endpoint_and_me(self, client):
        await client.post(f"{API}/auth/register", json=user_factory.create_user_data())

        response = await client.post(
            f"{API}/auth/token", data={"username": "test@example.com", "password": "secret123"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"

        me = await client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["data"]["email"] == "test@example.com"

    @pytest.mark.asyncio
    async def test_invalid_token_format(self, client):
        """Test invalid token formats"""
        invalid_tokens = [
            "not_a_token",
            "Bearer without_token",
            "Bearer.invalid.format",
            "Bearer " + "a" * 1000,
        ]

        for token in invalid_tokens:
            response = await client.get(f"{API}/auth/me", headers={"Authorization": token})
            assert response.status_code == status.HTTP_401_UNAUTHORIZED
            assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_missing_token(self, client):
        response = await client.get(f"{API}/auth/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"
