"""
MongoDB repository adapter - Implements WaitlistRepository protocol.

This module provides the MongoDB implementation of the domain's
repository port using pymongo.

Uniqueness Design:
-----------------
The "one entry per email" invariant is owned by a unique index on the
``email`` field, created by ensure_indexes() at startup. The service's
find-then-insert sequence is not atomic, so two concurrent registrations
can both pass the lookup; the index rejects the second insert with
DuplicateKeyError, which is translated to the domain's DuplicateEntry.

Document layout (compatible with existing ``waitlists`` data):
    { "_id": ObjectId, "email": str, "date": datetime }
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from src.config.settings import Settings
from src.domain.exceptions import DuplicateEntry, StoreUnavailable
from src.domain.ports import WaitlistEntry

logger = logging.getLogger(__name__)

EMAIL_INDEX_NAME = "email_unique"


class MongoWaitlistRepository:
    """
    Implements WaitlistRepository protocol via pymongo.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All pymongo failures are converted to domain exceptions.
    """

    def __init__(self, collection: Collection) -> None:
        """
        Initialize repository with the waitlist collection.

        Args:
            collection: pymongo Collection holding waitlist documents
        """
        self._collection = collection

    def find_by_email(self, email: str) -> WaitlistEntry | None:
        """
        Fetch the entry with exactly this email, if any.

        Returns:
            WaitlistEntry or None when the email is not stored
        """
        try:
            document = self._collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"Waitlist lookup failed: {e}")
            raise StoreUnavailable("Waitlist lookup failed") from e

        if document is None:
            return None
        return WaitlistEntry(email=document["email"], registered_at=document["date"])

    def add(self, entry: WaitlistEntry) -> None:
        """
        Insert a new entry.

        Raises:
            DuplicateEntry: If the unique email index rejects the insert
            StoreUnavailable: For any other pymongo failure
        """
        try:
            self._collection.insert_one({"email": entry.email, "date": entry.registered_at})
        except DuplicateKeyError as e:
            logger.info("Concurrent registration lost the race: %s", entry.email)
            raise DuplicateEntry(entry.email) from e
        except PyMongoError as e:
            logger.error(f"Waitlist insert failed: {e}")
            raise StoreUnavailable("Waitlist insert failed") from e


def connect(settings: Settings) -> MongoClient:
    """
    Create a MongoDB client and confirm the server is reachable.

    The client owns its own connection pool and is meant to live for the
    whole process.

    Raises:
        StoreUnavailable: If the server cannot be reached
    """
    client: MongoClient = MongoClient(
        settings.mongo_db_server,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        tz_aware=True,
    )
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"MongoDB connection error: {e}")
        raise StoreUnavailable("MongoDB connection failed") from e

    logger.info("MongoDB connected")
    return client


def get_waitlist_collection(client: MongoClient, settings: Settings) -> Collection:
    """Return the waitlist collection named in settings."""
    return client[settings.mongo_db_name][settings.waitlist_collection]


def ensure_indexes(collection: Collection) -> None:
    """
    Create the unique email index if it does not exist.

    create_index is idempotent, so this runs on every startup.

    Raises:
        StoreUnavailable: If the index cannot be built (for example, the
            collection already contains duplicate emails)
    """
    logger.info(f"Ensuring indexes on collection: {collection.name}")
    try:
        collection.create_index([("email", ASCENDING)], unique=True, name=EMAIL_INDEX_NAME)
    except PyMongoError as e:
        logger.error(f"Index creation failed on {collection.name} - {e}")
        raise StoreUnavailable(f"Index creation failed: {collection.name}") from e
    logger.info("Index ready: %s", EMAIL_INDEX_NAME)
