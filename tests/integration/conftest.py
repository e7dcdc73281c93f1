"""
Shared fixtures for integration tests.

Integration tests run against the MongoDB named by MONGO_DB_SERVER and
are skipped when it is unset or unreachable. They use a dedicated
database so real waitlist data is never touched.
"""

import os
from collections.abc import Generator

import pytest
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from src.adapters.repository.mongo import ensure_indexes
from src.config.settings import Settings

TEST_DB_NAME = "waitlist_integration_test"


@pytest.fixture(scope="module")
def mongo_url() -> str:
    url = os.environ.get("MONGO_DB_SERVER")
    if not url:
        pytest.skip("MONGO_DB_SERVER not set")
    return url


@pytest.fixture(scope="module")
def mongo_client(mongo_url: str) -> Generator[MongoClient, None, None]:
    """Create a client for integration tests, skipping if the server is down."""
    client: MongoClient = MongoClient(mongo_url, serverSelectionTimeoutMS=2000, tz_aware=True)
    try:
        client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        pytest.skip(f"MongoDB not reachable: {e}")
    yield client
    client.drop_database(TEST_DB_NAME)
    client.close()


@pytest.fixture
def integration_settings(mongo_url: str) -> Settings:
    return Settings(_env_file=None, mongo_db_server=mongo_url, mongo_db_name=TEST_DB_NAME)


@pytest.fixture
def collection(mongo_client: MongoClient) -> Collection:
    return mongo_client[TEST_DB_NAME]["waitlists"]


@pytest.fixture(autouse=True)
def clean_collection(collection: Collection) -> Generator[None, None, None]:
    """Empty the waitlist collection and ensure its index before each test."""
    collection.delete_many({})
    ensure_indexes(collection)
    yield
