"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Ed25519 key pairs and base58 encodings for signature tests
- Application settings that do not depend on the environment
"""

from collections.abc import Callable

import base58
import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from src.config.settings import Settings


def _encode_public_key(private_key: Ed25519PrivateKey) -> str:
    raw = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return base58.b58encode(raw).decode()


@pytest.fixture
def private_key() -> Ed25519PrivateKey:
    """Fresh Ed25519 private key."""
    return Ed25519PrivateKey.generate()


@pytest.fixture
def public_key(private_key: Ed25519PrivateKey) -> str:
    """base58-encoded public key matching private_key."""
    return _encode_public_key(private_key)


@pytest.fixture
def other_public_key() -> str:
    """base58-encoded public key of an unrelated key pair."""
    return _encode_public_key(Ed25519PrivateKey.generate())


@pytest.fixture
def sign(private_key: Ed25519PrivateKey) -> Callable[[str], bytes]:
    """Sign the UTF-8 bytes of a message with private_key."""

    def _sign(message: str) -> bytes:
        return private_key.sign(message.encode("utf-8"))

    return _sign


@pytest.fixture
def sign_b58(sign: Callable[[str], bytes]) -> Callable[[str], str]:
    """Sign a message and return the signature as base58."""

    def _sign_b58(message: str) -> str:
        return base58.b58encode(sign(message)).decode()

    return _sign_b58


@pytest.fixture
def settings() -> Settings:
    """Settings with an explicit connection string and no .env file."""
    return Settings(
        _env_file=None,
        mongo_db_server="mongodb://localhost:27017",
        mongo_db_name="waitlist_test",
    )
