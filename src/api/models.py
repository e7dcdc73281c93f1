"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Request fields are optional so that absent values reach the domain layer,
which owns the format and presence rules and their error messages.
"""

from pydantic import BaseModel, ConfigDict, Field


class WaitlistRequest(BaseModel):
    """Request model for joining the waitlist."""

    email: str | None = Field(None, description="Email address (local@domain.tld)")


class MessageResponse(BaseModel):
    """Response model carrying a human-readable message."""

    message: str


class VerifyRequest(BaseModel):
    """Request model for wallet signature verification."""

    model_config = ConfigDict(populate_by_name=True)

    public_key: str | None = Field(
        None,
        alias="publicKey",
        description="base58-encoded Ed25519 public key",
    )
    message: str | None = Field(None, description="Text that was signed")
    signature: str | list[int] | None = Field(
        None,
        description="64-byte detached signature, base58 or array of byte values",
    )


class VerifyResponse(BaseModel):
    """Response model for a signature check that reached the verifier."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    is_valid: bool = Field(..., alias="isValid")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    message: str
