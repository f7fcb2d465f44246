"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "accounts-api"
        assert schema["info"]["version"] == "0.1.0"

    @pytest.mark.parametrize("path", ["/register", "/login", "/contact"])
    def test_endpoints_documented_as_post(self, schema: dict, path: str) -> None:
        assert path in schema["paths"]
        assert "post" in schema["paths"][path]

    def test_register_documents_error_responses(self, schema: dict) -> None:
        responses = schema["paths"]["/register"]["post"]["responses"]
        assert {"201", "400", "409", "500"} <= set(responses)

    def test_login_documents_error_responses(self, schema: dict) -> None:
        responses = schema["paths"]["/login"]["post"]["responses"]
        assert {"200", "400", "401", "500"} <= set(responses)

    def test_register_request_schema(self, schema: dict) -> None:
        properties = schema["components"]["schemas"]["RegisterRequest"]["properties"]
        assert set(properties) == {"name", "email", "password", "gender"}

    def test_user_profile_schema_has_no_secret_fields(self, schema: dict) -> None:
        properties = schema["components"]["schemas"]["UserProfile"]["properties"]
        assert set(properties) == {"name", "email", "gender"}
