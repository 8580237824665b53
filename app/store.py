"""
Library Store Module

This module holds the in-memory author and book collections that every
GraphQL request reads from.

Store Lifecycle
===============
1. Process starts → the store is seeded with the sample dataset
2. Requests read derived views (authors with positional ids, book copies)
3. The only write is appending a new author; nothing is updated or deleted

Books point at authors by position (AuthorIndex), so the author list is
append-only: an author's id never changes during the process lifetime.

Concurrency
===========
The store may be shared by threaded callers (worker threads, test pools,
scripts). Appends are serialized through a single lock for any such caller;
reads work on a snapshot of the list taken under the same lock.
"""

import logging
import threading
from collections.abc import Iterable
from functools import lru_cache

from app.schemas import AuthorIndex, AuthorRecord, AuthorView, BookRecord

logger = logging.getLogger(__name__)


# =============================================================================
# Seed Data
# =============================================================================
SEED_AUTHORS = [
    {"firstname": "J.K.", "lastname": "Rowling"},
    {"firstname": "Michael", "lastname": "Crichton"},
]

SEED_BOOKS = [
    {
        "title": "Harry Potter and the Chamber of Secrets",
        "author": 0,
        "chapters": ["Chapter 1", "Chapter 2", "Chapter 3"],
    },
    {
        "title": "Jurassic Park",
        "author": 1,
        "chapters": ["Intro", "The Story", "Outro"],
    },
]


class LibraryStore:
    """
    In-memory collections of authors and books.

    A store is passed explicitly to the resolver layer, so tests can
    build isolated instances instead of sharing module-level state.
    """

    def __init__(
        self,
        authors: Iterable[AuthorRecord] = (),
        books: Iterable[BookRecord] = (),
    ) -> None:
        self._authors: list[AuthorRecord] = list(authors)
        self._books: list[BookRecord] = list(books)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "LibraryStore":
        """Create a store holding the sample dataset."""
        return cls(
            authors=[AuthorRecord(**data) for data in SEED_AUTHORS],
            books=[BookRecord(**data) for data in SEED_BOOKS],
        )

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def list_authors(self) -> list[AuthorView]:
        """
        Get every author with its derived fields.

        Returns:
            Author views in insertion order, `id` set to the position
            and `name` to "firstname lastname"
        """
        with self._lock:
            snapshot = list(self._authors)
        return [
            AuthorView.from_record(index, record)
            for index, record in enumerate(snapshot)
        ]

    def list_books(self) -> list[BookRecord]:
        """
        Get copies of every book.

        Returns:
            A new list of book copies in insertion order
        """
        return [book.model_copy() for book in self._books]

    def author_count(self) -> int:
        """Number of authors currently stored."""
        with self._lock:
            return len(self._authors)

    def book_count(self) -> int:
        """Number of books currently stored."""
        return len(self._books)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def append_author(self, record: AuthorRecord) -> AuthorView:
        """
        Append an author to the collection.

        The new author's id is its position, assigned while holding the
        lock so concurrent appends never share a position.

        Args:
            record: Author to store

        Returns:
            View of the stored author
        """
        with self._lock:
            index = AuthorIndex(len(self._authors))
            self._authors.append(record)

        logger.info(
            f"Added author {record.firstname} {record.lastname} at index {index}"
        )
        return AuthorView.from_record(index, record)


@lru_cache
def get_store() -> LibraryStore:
    """
    Get the process-wide library store.

    Seeded on first use and shared by every request afterwards.
    Tests override this dependency with a fresh store.

    Returns:
        Cached LibraryStore instance
    """
    logger.info("Seeding library store")
    return LibraryStore.seeded()
