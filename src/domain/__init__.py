"""
Domain layer - Pure business logic with zero framework imports.

This package contains the waitlist registrar and the wallet signature
verifier. It defines its own port interfaces for infrastructure
abstraction, keeping persistence behind a Protocol.
"""

from .exceptions import (
    CryptoOperationFailure,
    DuplicateEntry,
    InvalidFormat,
    MalformedKey,
    MalformedSignature,
    MissingParameters,
    SignatureError,
    StoreUnavailable,
    WaitlistError,
)
from .ports import VerifyResult, WaitlistEntry, WaitlistRepository
from .signature import SignatureVerifier
from .waitlist import WaitlistService

__all__ = [
    "CryptoOperationFailure",
    "DuplicateEntry",
    "InvalidFormat",
    "MalformedKey",
    "MalformedSignature",
    "MissingParameters",
    "SignatureError",
    "SignatureVerifier",
    "StoreUnavailable",
    "VerifyResult",
    "WaitlistEntry",
    "WaitlistError",
    "WaitlistRepository",
    "WaitlistService",
]
