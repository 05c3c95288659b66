"""
Unit tests for relay error codes and responses
"""

import pytest

from cloud_relay.models.errors import (
    ERROR_MESSAGES,
    ERROR_STATUS_CODES,
    ErrorCode,
    RelayError,
    create_error_response,
)


@pytest.mark.unit
class TestRelayError:
    @pytest.mark.parametrize("error_code,status_code", [
        (ErrorCode.INVALID_REQUEST, 400),
        (ErrorCode.PAYLOAD_TOO_LARGE, 413),
        (ErrorCode.OCR_FAILED, 500),
        (ErrorCode.IMAGE_GENERATION_FAILED, 500),
        (ErrorCode.INTERNAL_ERROR, 500),
    ])
    def test_status_codes(self, error_code, status_code):
        assert RelayError(error_code).status_code == status_code

    def test_every_code_has_message_and_status(self):
        for code in ErrorCode:
            assert code in ERROR_MESSAGES
            assert code in ERROR_STATUS_CODES

    def test_default_message(self):
        error = RelayError(ErrorCode.OCR_FAILED)
        assert error.message == ERROR_MESSAGES[ErrorCode.OCR_FAILED]
        assert str(error) == error.message

    def test_details_not_in_body(self):
        error = RelayError(
            ErrorCode.OCR_FAILED,
            details={"error_type": "ClientError", "provider_message": "secret"}
        )

        assert error.to_dict() == {
            "error": ERROR_MESSAGES[ErrorCode.OCR_FAILED],
            "error_code": "OCR_FAILED",
        }

    def test_client_error_flag(self):
        assert RelayError(ErrorCode.INVALID_REQUEST).is_client_error
        assert not RelayError(ErrorCode.IMAGE_GENERATION_FAILED).is_client_error

    def test_create_error_response(self):
        body, status = create_error_response(ErrorCode.INVALID_REQUEST, "No prompt provided.")

        assert status == 400
        assert body["error"] == "No prompt provided."
        assert body["error_code"] == "INVALID_REQUEST"

    def test_to_response_matches_create_error_response(self):
        error = RelayError(ErrorCode.INTERNAL_ERROR)

        assert error.to_response() == create_error_response(ErrorCode.INTERNAL_ERROR)
