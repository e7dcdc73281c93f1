"""
Waitlist domain service - Email collection with uniqueness.

The registrar validates the email shape, checks for an existing entry
and stores a new one. The lookup is only a fast path: the repository's
store-level unique constraint decides when two registrations race.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from .exceptions import DuplicateEntry, InvalidFormat
from .ports import WaitlistEntry, WaitlistRepository

logger = logging.getLogger(__name__)

# local@domain.tld, no whitespace or extra '@' in any part
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _utc_now() -> datetime:
    return datetime.now(UTC)


def is_valid_email(email: str | None) -> bool:
    """Return True if email is a non-empty string of the form local@domain.tld."""
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


@dataclass
class WaitlistService:
    """
    Domain service for waitlist registration.

    Performs exactly one write on success and none on any failure.
    """

    repository: WaitlistRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    def register(self, email: str | None) -> WaitlistEntry:
        """
        Add an email to the waitlist.

        Args:
            email: Email address, stored exactly as given

        Returns:
            The newly stored entry

        Raises:
            InvalidFormat: If the email is missing or malformed
            DuplicateEntry: If the email is already on the waitlist
            StoreUnavailable: If the store fails
        """
        if not is_valid_email(email):
            raise InvalidFormat(email)

        if self.repository.find_by_email(email) is not None:
            logger.info("Email already on waitlist: %s", email)
            raise DuplicateEntry(email)

        entry = WaitlistEntry(email=email, registered_at=self.clock())
        self.repository.add(entry)
        logger.info("Email added to waitlist: %s", email)
        return entry
