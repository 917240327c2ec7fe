"""
Centralized error handling tests - response envelopes and log sanitizing
"""

import json
import logging

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from utils.error_handling import ErrorHandlingConfig, setup_error_handling


class Payload(BaseModel):
    count: int


@pytest.fixture
def error_app():
    app = FastAPI()
    setup_error_handling(app)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    @app.get("/missing")
    async def missing():
        raise HTTPException(status_code=404, detail="Not found")

    @app.post("/payload")
    async def payload(body: Payload):
        return {"count": body.count}

    return app


@pytest.fixture
def error_client(error_app):
    with TestClient(error_app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_http_exception_envelope(error_client):
    response = error_client.get("/missing")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "HTTP 404"
    assert body["message"] == "Not found"
    assert "timestamp" in body


def test_unknown_route_uses_same_envelope(error_client):
    response = error_client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["error"] == "HTTP 404"


def test_validation_error_envelope(error_client):
    response = error_client.post("/payload", json={"count": "many", "password": "hunter2"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "Validation Error"
    assert body["error_count"] == 1
    assert body["detail"][0]["field"] == "body -> count"


def test_unhandled_exception_hides_internals(error_client, caplog):
    with caplog.at_level(logging.ERROR, logger="utils.error_handling"):
        response = error_client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal Server Error"
    assert body["message"] == "An unexpected error occurred"
    assert "database exploded" not in response.text
    assert any("database exploded" in record.getMessage() for record in caplog.records)


def test_logged_request_body_is_sanitized(error_client, caplog):
    with caplog.at_level(logging.ERROR, logger="utils.error_handling"):
        error_client.post("/payload", json={"count": "many", "password": "hunter2"})

    entries = [json.loads(record.getMessage()) for record in caplog.records]
    bodies = [entry["context"]["request_body"] for entry in entries if "context" in entry]
    assert {"count": "many", "password": "***REDACTED***"} in bodies


def test_sanitize_data_truncates_long_strings():
    text = "x" * (ErrorHandlingConfig.MAX_BODY_LOG_SIZE + 10)

    assert ErrorHandlingConfig.sanitize_data(text).endswith("...[TRUNCATED]")
    assert ErrorHandlingConfig.sanitize_data({"api_key": "abc", "nested": [{"token": "t"}]}) == {
        "api_key": "***REDACTED***",
        "nested": [{"token": "***REDACTED***"}],
    }
