"""Integration tests for the authentication endpoints."""

from datetime import timedelta
from uuid import uuid4

from tests.conftest import TEST_JWT_SECRET
from tests.integration.api.conftest import TEST_EMAIL, TEST_PASSWORD
from userbase_identity import JWTService


def _keys(value) -> set[str]:
    """Collect every key of a nested JSON document."""
    if isinstance(value, dict):
        keys = set(value)
        for item in value.values():
            keys |= _keys(item)
        return keys
    if isinstance(value, list):
        keys = set()
        for item in value:
            keys |= _keys(item)
        return keys
    return set()


class TestRegister:
    """Tests for POST /api/auth/register."""

    def test_register_success(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["user"]["email"] == TEST_EMAIL
        assert data["user"]["name"] is None
        assert "createdAt" in data["user"]
        assert data["token"]

    def test_register_never_returns_password_material(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        )

        keys = {key.lower() for key in _keys(response.json())}
        assert not any("password" in key for key in keys)
        assert TEST_PASSWORD not in response.text

    def test_register_token_is_usable(self, test_client, registered_user):
        response = test_client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {registered_user['token']}"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == registered_user["user"]["id"]

    def test_register_duplicate_email(self, test_client, registered_user, auth_headers):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL, "password": "different"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

        users = test_client.get("/api/users", headers=auth_headers).json()
        assert len(users) == 1

    def test_register_invalid_email(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": TEST_PASSWORD},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_register_missing_password(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL},
        )

        assert response.status_code == 400
        data = response.json()
        assert data["code"] == "VALIDATION_ERROR"
        assert [error["field"] for error in data["errors"]] == ["password"]

    def test_register_empty_password(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL, "password": ""},
        )

        assert response.status_code == 400

    def test_register_password_too_long(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            json={"email": TEST_EMAIL, "password": "x" * 73},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_register_malformed_body(self, test_client):
        response = test_client.post(
            "/api/auth/register",
            content="not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"


class TestLogin:
    """Tests for POST /api/auth/login."""

    def test_login_success(self, test_client, registered_user):
        response = test_client.post(
            "/api/auth/login",
            json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == registered_user["user"]["id"]
        assert data["token"]

    def test_login_token_resolves_to_registered_user(
        self,
        test_client,
        registered_user,
    ):
        login = test_client.post(
            "/api/auth/login",
            json={"email": TEST_EMAIL, "password": TEST_PASSWORD},
        ).json()

        subject = JWTService(TEST_JWT_SECRET).verify_token(login["token"]).subject
        assert str(subject) == registered_user["user"]["id"]

    def test_wrong_password_and_unknown_email_look_the_same(
        self,
        test_client,
        registered_user,
    ):
        wrong_password = test_client.post(
            "/api/auth/login",
            json={"email": TEST_EMAIL, "password": "wrong"},
        )
        unknown_email = test_client.post(
            "/api/auth/login",
            json={"email": "nobody@b.com", "password": TEST_PASSWORD},
        )

        assert wrong_password.status_code == 401
        assert unknown_email.status_code == 401
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["code"] == "INVALID_CREDENTIALS"

    def test_login_missing_fields(self, test_client):
        response = test_client.post("/api/auth/login", json={})

        assert response.status_code == 400
        fields = {error["field"] for error in response.json()["errors"]}
        assert fields == {"email", "password"}


class TestMe:
    """Tests for GET /api/auth/me."""

    def test_me_returns_current_user(self, test_client, registered_user, auth_headers):
        response = test_client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        user = response.json()["user"]
        assert user["id"] == registered_user["user"]["id"]
        assert user["email"] == TEST_EMAIL
        assert user["name"] == "Alice"
        assert "updatedAt" in user
        assert not any("password" in key.lower() for key in user)

    def test_me_without_token(self, test_client):
        response = test_client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHENTICATED"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_me_with_expired_token(self, test_client, registered_user):
        token = JWTService(TEST_JWT_SECRET).create_token(
            registered_user["user"]["id"],
            expires_delta=timedelta(seconds=-1),
        )

        response = test_client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["code"] == "INVALID_TOKEN"

    def test_me_with_token_from_other_secret(self, test_client, registered_user):
        token = JWTService("not-the-server-secret").create_token(
            registered_user["user"]["id"],
        )

        response = test_client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    def test_expired_and_forged_tokens_look_the_same(
        self,
        test_client,
        registered_user,
    ):
        user_id = registered_user["user"]["id"]
        expired = JWTService(TEST_JWT_SECRET).create_token(
            user_id,
            expires_delta=timedelta(seconds=-1),
        )
        forged = JWTService("not-the-server-secret").create_token(user_id)

        responses = [
            test_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
            for token in (expired, forged, "garbage")
        ]

        assert {response.status_code for response in responses} == {401}
        assert responses[0].json() == responses[1].json() == responses[2].json()

    def test_me_for_unknown_subject(self, test_client):
        token = JWTService(TEST_JWT_SECRET).create_token(uuid4())

        response = test_client.get(
            "/api/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"


class TestHealth:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCors:
    def test_preflight_for_allowed_origin(self, test_client):
        response = test_client.options(
            "/api/auth/login",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert (
            response.headers["access-control-allow-origin"] == "http://localhost:5173"
        )
