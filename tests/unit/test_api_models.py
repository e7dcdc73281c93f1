"""
Unit tests for API request/response models.

Tests Pydantic model validation and the camelCase wire names.
"""

import pytest
from pydantic import ValidationError

from src.api.models import (
    ErrorResponse,
    MessageResponse,
    VerifyRequest,
    VerifyResponse,
    WaitlistRequest,
)


class TestWaitlistRequest:
    """Tests for WaitlistRequest model."""

    def test_email_kept_verbatim(self) -> None:
        """Format checks belong to the domain; the model does not normalize."""
        request = WaitlistRequest(email=" Not An Email ")
        assert request.email == " Not An Email "

    def test_email_optional(self) -> None:
        assert WaitlistRequest().email is None

    def test_non_string_email_rejected(self) -> None:
        with pytest.raises(ValidationError):
            WaitlistRequest(email=["a@b.c"])  # type: ignore[arg-type]


class TestVerifyRequest:
    """Tests for VerifyRequest model."""

    def test_parses_camel_case_public_key(self) -> None:
        request = VerifyRequest.model_validate(
            {"publicKey": "abc", "message": "hello", "signature": "xyz"}
        )
        assert request.public_key == "abc"
        assert request.message == "hello"
        assert request.signature == "xyz"

    def test_signature_as_byte_array(self) -> None:
        request = VerifyRequest.model_validate({"signature": [1, 2, 3]})
        assert request.signature == [1, 2, 3]

    def test_all_fields_optional(self) -> None:
        request = VerifyRequest.model_validate({})
        assert request.public_key is None
        assert request.message is None
        assert request.signature is None

    def test_signature_object_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VerifyRequest.model_validate({"signature": {"bytes": [1, 2]}})


class TestResponses:
    """Tests for response models."""

    def test_verify_response_serializes_is_valid_camel_case(self) -> None:
        response = VerifyResponse(message="Signature verified", is_valid=True)
        assert response.model_dump(by_alias=True) == {
            "message": "Signature verified",
            "isValid": True,
        }

    def test_message_response(self) -> None:
        assert MessageResponse(message="ok").message == "ok"

    def test_error_response(self) -> None:
        assert ErrorResponse(message="Server error").model_dump() == {"message": "Server error"}
