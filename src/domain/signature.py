"""
Signature verification - Proof of control of a wallet key.

Checks a detached Ed25519 signature over the UTF-8 bytes of a message
against a base58-encoded public key (Solana wallet address format).

Outcomes are kept apart:
- Missing or undecodable input raises a SignatureError subclass
- A well-formed signature that does not match returns VerifyResult.INVALID
- A match returns VerifyResult.VALID

There is no challenge, nonce or expiry here. A caller that uses this as a
login step must issue and track the signed message itself.
"""

import logging
from collections.abc import Sequence

import base58
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from .exceptions import (
    CryptoOperationFailure,
    MalformedKey,
    MalformedSignature,
    MissingParameters,
)
from .ports import VerifyResult

logger = logging.getLogger(__name__)

PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64


def decode_public_key(public_key: str) -> Ed25519PublicKey:
    """
    Decode a base58 public key into an Ed25519 key object.

    Raises:
        MalformedKey: On a bad alphabet, wrong length or unloadable key
    """
    if not isinstance(public_key, str):
        raise MalformedKey("Public key must be a base58 string")
    try:
        raw = base58.b58decode(public_key)
    except ValueError as e:
        raise MalformedKey(f"Public key is not valid base58: {e}") from e

    if len(raw) != PUBLIC_KEY_LENGTH:
        raise MalformedKey(f"Public key must be {PUBLIC_KEY_LENGTH} bytes, got {len(raw)}")

    try:
        return Ed25519PublicKey.from_public_bytes(raw)
    except ValueError as e:
        raise MalformedKey(str(e)) from e


def decode_signature(signature: str | Sequence[int]) -> bytes:
    """
    Decode a detached signature.

    Accepts a base58 string or a sequence of byte values, the form a
    browser wallet's Uint8Array takes once serialized to JSON.

    Raises:
        MalformedSignature: On bad encoding or a length other than 64 bytes
    """
    try:
        if isinstance(signature, str):
            raw = base58.b58decode(signature)
        elif isinstance(signature, Sequence) and all(
            isinstance(b, int) and not isinstance(b, bool) for b in signature
        ):
            raw = bytes(signature)
        else:
            raise MalformedSignature("Signature must be a base58 string or a list of bytes")
    except ValueError as e:
        raise MalformedSignature(f"Signature could not be decoded: {e}") from e

    if len(raw) != SIGNATURE_LENGTH:
        raise MalformedSignature(f"Signature must be {SIGNATURE_LENGTH} bytes, got {len(raw)}")
    return raw


class SignatureVerifier:
    """
    Stateless Ed25519 detached-signature checker.

    Does not consult any key registry; any well-formed key is accepted.
    """

    def verify(
        self,
        public_key: str | None,
        message: str | None,
        signature: str | Sequence[int] | None,
    ) -> VerifyResult:
        """
        Verify that signature was made over message by the holder of public_key.

        Args:
            public_key: base58-encoded 32-byte Ed25519 public key
            message: Signed text, verified over its UTF-8 encoding
            signature: 64-byte signature as base58 or a list of byte values

        Returns:
            VerifyResult.VALID or VerifyResult.INVALID

        Raises:
            MissingParameters: If any argument is missing or empty
            MalformedKey: If the public key cannot be decoded
            MalformedSignature: If the signature cannot be decoded
            CryptoOperationFailure: If the primitive fails unexpectedly
        """
        if not public_key or not message or not signature:
            raise MissingParameters("publicKey, message and signature are required")

        key = decode_public_key(public_key)
        signature_bytes = decode_signature(signature)
        message_bytes = message.encode("utf-8")

        try:
            key.verify(signature_bytes, message_bytes)
        except InvalidSignature:
            logger.info("Signature rejected for key %s", public_key)
            return VerifyResult.INVALID
        except Exception as e:
            logger.error(f"Signature verification failed for key {public_key}: {e}")
            raise CryptoOperationFailure(str(e)) from e

        logger.info("Signature verified for key %s", public_key)
        return VerifyResult.VALID
