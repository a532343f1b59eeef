"""Unit tests for the exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gateway.core.exceptions import gateway_exception_handler, general_exception_handler
from gateway.tools.errors import BackendError, GatewayError, NotFoundError, ValidationError


@pytest.fixture
def client():
    app = FastAPI()
    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    @app.get("/missing")
    async def missing():
        raise NotFoundError("ghost")

    @app.get("/invalid")
    async def invalid():
        raise ValidationError("id", "string", "missing required parameter")

    @app.get("/backend")
    async def backend():
        raise BackendError("get_student", ConnectionError("refused"))

    @app.get("/timeout")
    async def timeout():
        raise BackendError("get_student", TimeoutError(), code="TIMEOUT", retryable=True)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "path, status_code, text",
    [
        ("/missing", 400, "tool ghost not found"),
        ("/invalid", 400, "invalid parameter 'id': missing required parameter"),
        ("/backend", 502, "get_student failed: refused"),
        ("/timeout", 504, "get_student failed: TimeoutError"),
    ],
)
def test_gateway_errors_are_plain_text(client, path, status_code, text):
    response = client.get(path)

    assert response.status_code == status_code
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == text


def test_unexpected_error_is_hidden(client):
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.text == "Internal server error"
    assert "secret" not in response.text
