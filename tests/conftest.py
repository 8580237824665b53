"""
pytest Fixtures for Library GraphQL Tests

This file contains shared fixtures used across all test files.

Every test gets its own seeded LibraryStore, so a mutation in one test
never leaks into another. The client fixture swaps the app's store
dependency for that fresh store.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["ENVIRONMENT"] = "development"
os.environ["ENABLE_BASIC_SCHEMA"] = "true"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from app.graphql.context import GraphQLContext
from app.main import app
from app.schemas import AuthorRecord, BookRecord
from app.store import LibraryStore, get_store


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def store() -> LibraryStore:
    """Create a store holding the sample dataset."""
    return LibraryStore.seeded()


@pytest.fixture
def dangling_store() -> LibraryStore:
    """
    Create a store with a book whose author index points past the end
    of the author collection.
    """
    return LibraryStore(
        authors=[AuthorRecord(firstname="Ursula", lastname="Le Guin")],
        books=[
            BookRecord(
                title="The Dispossessed",
                author=0,
                chapters=["Anarres", "Urras"],
            ),
            BookRecord(
                title="Lost Manuscript",
                author=7,
                chapters=["Only Chapter"],
            ),
        ],
    )


@pytest.fixture
def context(store: LibraryStore) -> GraphQLContext:
    """GraphQL context for executing schemas without HTTP."""
    return GraphQLContext(store=store)


# =============================================================================
# CLIENT FIXTURES
# =============================================================================


def _client_for(store: LibraryStore) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def client(store: LibraryStore) -> Generator[TestClient, None, None]:
    """
    Create a test client backed by the fresh `store` fixture.

    We override the get_store dependency so the GraphQL context and the
    health endpoint both see the test store.
    """
    yield from _client_for(store)


@pytest.fixture
def dangling_client(dangling_store: LibraryStore) -> Generator[TestClient, None, None]:
    """Create a test client backed by `dangling_store`."""
    yield from _client_for(dangling_store)
