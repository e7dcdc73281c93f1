"""
API routes - Waitlist and wallet signature endpoints.

This module defines the HTTP endpoints:
- POST /api/waitlist - Add an email to the waitlist
- POST /api/auth/verify - Verify a wallet signature over a message

Handlers are plain functions so blocking pymongo calls run in the threadpool.
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.api.dependencies import get_signature_verifier, get_waitlist_service
from src.api.models import (
    ErrorResponse,
    MessageResponse,
    VerifyRequest,
    VerifyResponse,
    WaitlistRequest,
)
from src.domain.exceptions import (
    CryptoOperationFailure,
    DuplicateEntry,
    InvalidFormat,
    MalformedKey,
    MalformedSignature,
    MissingParameters,
    StoreUnavailable,
)
from src.domain.ports import VerifyResult
from src.domain.signature import SignatureVerifier
from src.domain.waitlist import WaitlistService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["api"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


@router.post(
    "/waitlist",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid email format"},
        409: {"model": ErrorResponse, "description": "Email already on the waitlist"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Join the waitlist",
    description="Submit an email address to be added to the waitlist. "
    "Each address can be added only once.",
)
def join_waitlist(
    request_data: WaitlistRequest,
    service: WaitlistService = Depends(get_waitlist_service),
):
    """
    Add an email to the waitlist.

    - **email**: Address of the form local@domain.tld
    """
    try:
        service.register(request_data.email)
    except InvalidFormat:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid email format")
    except DuplicateEntry:
        return _error(status.HTTP_409_CONFLICT, "Email is already in the waitlist")
    except StoreUnavailable as e:
        logger.error(f"Error adding email: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")
    return MessageResponse(message="Email added to the waitlist")


@router.post(
    "/auth/verify",
    response_model=VerifyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing or malformed parameters"},
        401: {"model": VerifyResponse, "description": "Signature does not match"},
        500: {"model": ErrorResponse, "description": "Server error"},
    },
    summary="Verify a wallet signature",
    description="Check that the signature over the message was produced by "
    "the private key behind the given public key.",
)
def verify_signature(
    request_data: VerifyRequest,
    verifier: SignatureVerifier = Depends(get_signature_verifier),
):
    """
    Verify a detached Ed25519 signature.

    - **publicKey**: base58 wallet public key
    - **message**: The signed text
    - **signature**: base58 string or array of 64 byte values
    """
    try:
        result = verifier.verify(
            request_data.public_key, request_data.message, request_data.signature
        )
    except MissingParameters:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing required parameters")
    except MalformedKey:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid public key")
    except MalformedSignature:
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid signature encoding")
    except CryptoOperationFailure as e:
        logger.error(f"Error verifying signature: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

    if result == VerifyResult.VALID:
        return VerifyResponse(message="Signature verified", is_valid=True)

    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"message": "Invalid signature", "isValid": False},
    )
