"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the types and interfaces (ports) that the domain
requires from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Protocol


@dataclass(frozen=True)
class WaitlistEntry:
    """
    A persisted waitlist record.

    Created once by a successful registration; never updated or deleted
    by this service.
    """

    email: str
    registered_at: datetime


class VerifyResult(Enum):
    """
    Result of a signature verification.

    Malformed input is not a result - it is raised as a SignatureError.
    """

    VALID = "valid"
    INVALID = "invalid"


class WaitlistRepository(Protocol):
    """Port interface for waitlist persistence."""

    def find_by_email(self, email: str) -> WaitlistEntry | None:
        """
        Look up an entry by its exact email value.

        Returns:
            The stored entry, or None if the email is not on the waitlist

        Raises:
            StoreUnavailable: If the store cannot be queried
        """
        ...

    def add(self, entry: WaitlistEntry) -> None:
        """
        Persist a new entry.

        The store must enforce email uniqueness itself, so that two
        concurrent adds of the same email cannot both succeed.

        Raises:
            DuplicateEntry: If the store already holds the email
            StoreUnavailable: If the write fails for any other reason
        """
        ...
