"""Tests for the HTTP API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from jsdoc_parser import __version__
from jsdoc_parser.api import create_app
from jsdoc_parser.config import Settings, get_settings


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(create_app()) as test_client:
        yield test_client


class TestHealthRoutes:
    def test_health(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "version": __version__,
            "grammar": "healthy",
        }

    def test_live(self, client: TestClient):
        assert client.get("/live").json() == {"alive": True}


class TestSignatureRoutes:
    def test_describe(self, client: TestClient):
        response = client.post(
            "/api/v1/signatures",
            json={"source": "\nfunction f(a = [1, 2], ...rest) {}", "line": 2},
        )

        assert response.status_code == 200
        assert response.json() == {
            "function": {
                "name": "f",
                "location": {"line": 1, "column": 0},
                "params": [
                    {"name": "a", "type": "array", "defaultValue": "[]"},
                    {"name": "rest", "type": "array"},
                ],
                "returns": {"returns": False},
            }
        }

    def test_no_function(self, client: TestClient):
        response = client.post("/api/v1/signatures", json={"source": "let x = 1;"})

        assert response.status_code == 200
        assert response.json() == {"function": None}

    def test_reuse_placeholder_override(self, client: TestClient):
        response = client.post(
            "/api/v1/signatures",
            json={"source": "function f({ a }, { b }) {}", "reuse_placeholder": True},
        )

        names = [p["name"] for p in response.json()["function"]["params"]]
        assert names == ["Unknown", "a", "Unknown", "b"]

    def test_parse_error(self, client: TestClient):
        response = client.post("/api/v1/signatures", json={"source": "function f( {"})

        assert response.status_code == 422
        assert response.json()["detail"]["error"] == "parse_error"

    def test_unknown_param_type(self, client: TestClient):
        response = client.post("/api/v1/signatures", json={"source": "function f([a]) {}"})

        assert response.status_code == 422
        assert response.json()["detail"] == {
            "error": "unknown_param_type",
            "message": "Unknown param type: array_pattern",
            "kind": "array_pattern",
        }

    def test_source_too_large(self, client: TestClient):
        client.app.dependency_overrides[get_settings] = lambda: Settings(max_source_bytes=10)

        response = client.post(
            "/api/v1/signatures",
            json={"source": "function tooLong() {}"},
        )

        assert response.status_code == 413

    def test_lone_surrogate_default(self, client: TestClient):
        response = client.post(
            "/api/v1/signatures",
            json={"source": 'function f(a = "\\uD800") {}'},
        )

        assert response.status_code == 200
        assert response.json()["function"]["params"] == [
            {"name": "a", "type": "string", "defaultValue": "\ud800"}
        ]

    def test_infinite_number_default(self, client: TestClient):
        response = client.post("/api/v1/signatures", json={"source": "function f(a = 1e400) {}"})

        assert response.status_code == 422
        assert response.json()["detail"]["kind"] == "number"
