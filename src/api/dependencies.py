"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from pymongo.collection import Collection

from src.adapters.repository.mongo import MongoWaitlistRepository
from src.domain.signature import SignatureVerifier
from src.domain.waitlist import WaitlistService

# Module-level singleton - SignatureVerifier is stateless
_signature_verifier = SignatureVerifier()


def get_collection(request: Request) -> Collection:
    """
    Get the waitlist collection from app state.

    The client and collection are created during app lifespan startup
    and stored in app.state.
    """
    return request.app.state.waitlist_collection


def get_repository(request: Request) -> MongoWaitlistRepository:
    """Create repository over the waitlist collection from app state."""
    collection = get_collection(request)
    return MongoWaitlistRepository(collection)


def get_waitlist_service(request: Request) -> WaitlistService:
    """Create waitlist service with the injected repository."""
    repository = get_repository(request)
    return WaitlistService(repository=repository)


def get_signature_verifier() -> SignatureVerifier:
    """Get signature verifier (singleton)."""
    return _signature_verifier
