"""
Domain exceptions - Semantic error types for the waitlist and signature checks.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class WaitlistError(Exception):
    """Base class for waitlist domain errors."""

    pass


class InvalidFormat(WaitlistError):
    """Email is missing or does not have the local@domain.tld shape."""

    pass


class DuplicateEntry(WaitlistError):
    """Email is already on the waitlist."""

    pass


class StoreUnavailable(WaitlistError):
    """The persistence layer failed (connection lost, write rejected, ...)."""

    pass


class SignatureError(Exception):
    """Base class for signature verification errors."""

    pass


class MissingParameters(SignatureError):
    """One of public key, message or signature was not supplied."""

    pass


class MalformedKey(SignatureError):
    """Public key is not a valid base58-encoded 32-byte Ed25519 key."""

    pass


class MalformedSignature(SignatureError):
    """Signature does not decode to a 64-byte detached signature."""

    pass


class CryptoOperationFailure(SignatureError):
    """The verification primitive failed for a reason other than a bad signature."""

    pass
