"""
Tests for the user profile routes, health and app-wide response headers.
"""
import uuid

from jobportal.core.security import create_access_token


class TestProfile:
    """Test GET /user/me and PUT /user/update-user."""

    async def test_get_me(self, client, auth_headers):
        response = await client.get("/api/v1/user/me", headers=auth_headers)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["email"] == "owner@example.com"
        assert "password" not in user

    async def test_update_profile(self, client, auth_headers):
        response = await client.put(
            "/api/v1/user/update-user",
            json={"name": "Ravi", "lastName": "Kumar", "location": "Delhi"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["name"] == "Ravi"
        assert user["lastName"] == "Kumar"
        assert user["location"] == "Delhi"

    async def test_partial_update_keeps_other_fields(self, client, auth_headers):
        response = await client.put(
            "/api/v1/user/update-user",
            json={"location": "Chennai"},
            headers=auth_headers,
        )

        user = response.json()["user"]
        assert user["location"] == "Chennai"
        assert user["name"] == "Test"

    async def test_email_and_password_not_changed(self, client, auth_headers):
        await client.put(
            "/api/v1/user/update-user",
            json={"email": "new@example.com", "password": "hacked123"},
            headers=auth_headers,
        )

        me = await client.get("/api/v1/user/me", headers=auth_headers)
        assert me.json()["user"]["email"] == "owner@example.com"

        login = await client.post(
            "/api/v1/auth/login",
            json={"email": "owner@example.com", "password": "secret123"},
        )
        assert login.status_code == 200

    async def test_blank_name_rejected(self, client, auth_headers):
        response = await client.put(
            "/api/v1/user/update-user",
            json={"name": " "},
            headers=auth_headers,
        )

        assert response.status_code == 400

    async def test_vanished_user(self, client):
        token = create_access_token(str(uuid.uuid4()))
        response = await client.put(
            "/api/v1/user/update-user",
            json={"name": "Ghost"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 404
        assert response.json()["error"] == "USER_NOT_FOUND"

    async def test_requires_auth(self, client):
        response = await client.put("/api/v1/user/update-user", json={"name": "Ravi"})

        assert response.status_code == 401


class TestHealth:
    """Test GET /health."""

    async def test_health(self, client):
        response = await client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json()["checks"]["database"] == "healthy"


class TestSecurityHeaders:
    """Every response carries the security headers."""

    async def test_headers_on_success(self, client):
        response = await client.get("/api/v1/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Referrer-Policy"] == "no-referrer"
        assert "Strict-Transport-Security" in response.headers

    async def test_headers_on_error(self, client):
        response = await client.get("/api/v1/user/me")

        assert response.status_code == 401
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestDocs:
    async def test_docs_served_by_default(self, client):
        response = await client.get("/docs")

        assert response.status_code == 200
        assert "swagger" in response.text.lower()
