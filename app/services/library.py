"""
Library Service

The resolver layer: pure functions that compute query results and
relationship traversals from a LibraryStore.

Each operation takes the store plus one small parameter object instead of
a generic (parent, args, context, info) bag. The GraphQL types build these
objects from field arguments or from the already-resolved parent.

Relationships:
- Book.author: the author at the book's index, or None if out of range
- Author.books: every book whose author index equals the author's id
"""

import logging
import re
from dataclasses import dataclass

from app.schemas import AuthorDraft, AuthorView, BookRecord
from app.services.errors import InvalidPatternError
from app.store import LibraryStore

logger = logging.getLogger(__name__)


# =============================================================================
# Parameter Types
# =============================================================================


@dataclass(frozen=True)
class BookParent:
    """The resolved book a nested author field hangs from."""

    author: int


@dataclass(frozen=True)
class AuthorParent:
    """The resolved author a nested books field hangs from."""

    id: int


@dataclass(frozen=True)
class AuthorLookup:
    """
    Arguments for resolving a single author.

    An explicit index wins over the parent book's author index.
    """

    index: int | None = None
    parent: BookParent | None = None


@dataclass(frozen=True)
class BookFilter:
    """
    Arguments for resolving a list of books.

    A title pattern wins over the parent author.
    """

    title: str | None = None
    parent: AuthorParent | None = None


# =============================================================================
# Query Resolvers
# =============================================================================


def resolve_authors(store: LibraryStore) -> list[AuthorView]:
    """Get every author, unfiltered."""
    return store.list_authors()


def resolve_author(store: LibraryStore, lookup: AuthorLookup) -> AuthorView | None:
    """
    Get a single author by position.

    Args:
        store: Library store
        lookup: Explicit index and/or parent book

    Returns:
        The author, or None when no index applies or it is out of range
    """
    if lookup.index is not None:
        index = lookup.index
    elif lookup.parent is not None:
        index = lookup.parent.author
    else:
        return None

    authors = store.list_authors()
    # Negative positions are out of range, not offsets from the end
    if not 0 <= index < len(authors):
        return None

    return authors[index]


def resolve_books(store: LibraryStore, books_filter: BookFilter) -> list[BookRecord]:
    """
    Get books, optionally filtered.

    The title is used as a regular expression as given (not escaped) and
    matches anywhere in the book title.

    Args:
        store: Library store
        books_filter: Title pattern and/or parent author

    Returns:
        Matching books in insertion order

    Raises:
        InvalidPatternError: If the title is not a valid regular expression
    """
    books = store.list_books()

    if books_filter.title is not None:
        try:
            pattern = re.compile(books_filter.title)
        except re.error as exc:
            logger.warning(f"Rejected title pattern {books_filter.title!r}: {exc}")
            raise InvalidPatternError(books_filter.title, str(exc)) from exc
        return [book for book in books if pattern.search(book.title)]

    if books_filter.parent is not None:
        return [book for book in books if book.author == books_filter.parent.id]

    return books


def resolve_book(store: LibraryStore, title: str) -> BookRecord | None:
    """Get the first book whose title equals `title` exactly."""
    for book in store.list_books():
        if book.title == title:
            return book
    return None


# =============================================================================
# Mutations
# =============================================================================


def create_author(store: LibraryStore, draft: AuthorDraft) -> AuthorView:
    """
    Append a new author to the store.

    The author is visible to every later read. No uniqueness check is
    made; two drafts with the same names create two authors.

    Args:
        store: Library store
        draft: First and last name of the new author

    Returns:
        View of the new author
    """
    return store.append_author(draft.to_record())
