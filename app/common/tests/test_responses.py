"""
Tests for the shared response envelope helpers
"""

from common.application.result import Err, ErrorCode
from common.responses import err_response, validation_error_response


class TestErrResponse:
    def test_not_found_maps_to_404(self):
        # Given
        err = Err(code=ErrorCode.NOT_FOUND, message="Job not found")

        # When
        response = err_response(err)

        # Then
        assert response.status_code == 404
        assert response.data == {
            "success": False,
            "error": "Job not found",
            "error_code": "NOT_FOUND",
        }

    def test_invalid_credentials_maps_to_401(self):
        response = err_response(
            Err(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid email or password")
        )

        assert response.status_code == 401

    def test_registration_disabled_maps_to_403(self):
        response = err_response(
            Err(code=ErrorCode.REGISTRATION_DISABLED, message="Registration is disabled")
        )

        assert response.status_code == 403

    def test_business_rule_errors_default_to_400(self):
        response = err_response(
            Err(
                code=ErrorCode.ALREADY_CLOSED,
                message="Job is already closed",
                details={"id": 3},
            )
        )

        assert response.status_code == 400
        assert response.data["details"] == {"id": 3}


class TestValidationErrorResponse:
    def test_includes_details(self):
        response = validation_error_response(
            "Invalid job data", details={"title": ["required"]}
        )

        assert response.status_code == 400
        assert response.data["error_code"] == "VALIDATION_ERROR"
        assert response.data["details"] == {"title": ["required"]}
