"""Unit tests for ErrorResponseBuilder utility.

Tests the ApplicationError -> RFC 7807 response mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    conflict,
    not_found,
    unauthorized,
    validation_failed,
)
from src.core.enums import ErrorCode
from src.presentation.routers.api.v1.errors import PROBLEM_JSON, ErrorResponseBuilder


def _request(path: str) -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


def _body(response) -> dict:
    return json.loads(bytes(response.body).decode())


@pytest.mark.unit
class TestErrorResponseBuilder:
    def test_not_found(self):
        error = not_found("Property", 123, ErrorCode.PROPERTY_NOT_FOUND)

        response = ErrorResponseBuilder.from_application_error(
            error=error,
            request=_request("/api/v1/properties/123"),
            trace_id="550e8400-e29b-41d4-a716-446655440000",
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.media_type == PROBLEM_JSON
        body = _body(response)
        assert body["type"].endswith("/errors/not_found")
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == "Property with id 123 was not found"
        assert body["instance"] == "/api/v1/properties/123"
        assert body["trace_id"] == "550e8400-e29b-41d4-a716-446655440000"
        assert "errors" not in body

    def test_validation_failure_lists_field_error(self):
        error = validation_failed(
            "Tax percentage must be between 0 and 100",
            field="tax_percentage",
            code=ErrorCode.INVALID_TAX_PERCENTAGE,
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/v1/properties/7/sell"), trace_id="t-1"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert _body(response)["errors"] == [
            {
                "field": "tax_percentage",
                "code": ErrorCode.INVALID_TAX_PERCENTAGE.value,
                "message": "Tax percentage must be between 0 and 100",
            }
        ]

    def test_conflict(self):
        error = conflict(
            "Property", "code_internal", "Property with code 'A' already exists",
            ErrorCode.PROPERTY_ALREADY_EXISTS,
        )

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/v1/properties"), trace_id="t"
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert _body(response)["title"] == "Resource Conflict"

    def test_unauthorized_sets_www_authenticate(self):
        error = unauthorized("Invalid username/email or password", ErrorCode.INVALID_CREDENTIALS)

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/v1/auth/login"), trace_id="t"
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    def test_empty_trace_id_is_omitted(self):
        error = ApplicationError(code=ApplicationErrorCode.QUERY_FAILED, message="boom")

        response = ErrorResponseBuilder.from_application_error(
            error=error, request=_request("/api/v1/owners"), trace_id=""
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "trace_id" not in _body(response)

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
            (ApplicationErrorCode.INVALID_OPERATION, 400),
            (ApplicationErrorCode.UNAUTHORIZED, 401),
            (ApplicationErrorCode.NOT_FOUND, 404),
            (ApplicationErrorCode.CONFLICT, 409),
            (ApplicationErrorCode.COMMAND_EXECUTION_FAILED, 500),
            (ApplicationErrorCode.QUERY_FAILED, 500),
        ],
    )
    def test_status_codes(self, code, expected):
        assert ErrorResponseBuilder.get_status_code(code) == expected
