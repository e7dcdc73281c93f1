"""Repository adapters - Database implementations."""

from .mongo import MongoWaitlistRepository, connect, ensure_indexes, get_waitlist_collection

__all__ = ["MongoWaitlistRepository", "connect", "ensure_indexes", "get_waitlist_collection"]
