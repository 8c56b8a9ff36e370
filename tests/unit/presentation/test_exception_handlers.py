"""Tests for the API exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import OperationalError

from userbase.domain.shared.exceptions import InfrastructureError, UnauthenticatedError
from userbase.presentation.api.exception_handlers import setup_exception_handlers
from userbase_identity import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    InvalidTokenError,
    UserNotFoundError,
)


class _Payload(BaseModel):
    email: str


def _build_app() -> FastAPI:
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/invalid-email")
    async def invalid_email():
        raise InvalidEmailError("Invalid email format")

    @app.get("/conflict")
    async def conflict():
        raise EmailAlreadyExistsError("a@b.com")

    @app.get("/unauthenticated")
    async def unauthenticated():
        raise UnauthenticatedError

    @app.get("/invalid-token")
    async def invalid_token():
        raise InvalidTokenError("Token has expired")

    @app.get("/not-found")
    async def not_found():
        raise UserNotFoundError("some-id")

    @app.get("/infrastructure")
    async def infrastructure():
        raise InfrastructureError

    @app.get("/database")
    async def database():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    @app.post("/payload")
    async def payload(body: _Payload):
        return body

    return app


@pytest.fixture
def client():
    return TestClient(_build_app(), raise_server_exceptions=False)


@pytest.mark.parametrize(
    ("path", "status_code", "code"),
    [
        ("/invalid-email", 400, "INVALID_EMAIL"),
        ("/conflict", 409, "EMAIL_ALREADY_EXISTS"),
        ("/unauthenticated", 401, "UNAUTHENTICATED"),
        ("/invalid-token", 401, "INVALID_TOKEN"),
        ("/not-found", 404, "USER_NOT_FOUND"),
        ("/infrastructure", 503, "INFRASTRUCTURE_ERROR"),
        ("/database", 503, "INFRASTRUCTURE_ERROR"),
        ("/boom", 500, "INTERNAL_ERROR"),
    ],
)
def test_exception_maps_to_status(client, path, status_code, code):
    response = client.get(path)

    assert response.status_code == status_code
    assert response.json()["code"] == code
    assert set(response.json()) == {"detail", "code"}


def test_unauthenticated_sets_www_authenticate(client):
    response = client.get("/invalid-token")
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_details_are_not_exposed(client):
    assert "a@b.com" not in client.get("/conflict").text
    assert "Token has expired" not in client.get("/invalid-token").text
    assert "connection refused" not in client.get("/database").text
    assert "secret internals" not in client.get("/boom").text


def test_request_validation_is_400(client):
    response = client.post("/payload", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "email"


def test_request_validation_does_not_echo_input(client):
    response = client.post("/payload", json={"email": ["hunter2"]})

    assert response.status_code == 400
    assert "hunter2" not in response.text
