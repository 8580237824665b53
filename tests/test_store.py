"""
Tests for the Library Store

Covers the derived author views, book copies, and appends.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from app.schemas import AuthorRecord, BookRecord
from app.store import SEED_AUTHORS, SEED_BOOKS, LibraryStore, get_store


class TestListAuthors:
    """Tests for LibraryStore.list_authors."""

    def test_ids_are_positions(self, store: LibraryStore):
        """Test that each author's id is its position."""
        authors = store.list_authors()

        assert [a.id for a in authors] == list(range(len(SEED_AUTHORS)))

    def test_name_joins_first_and_last_name(self, store: LibraryStore):
        """Test that name is firstname and lastname joined by a space."""
        for index, author in enumerate(store.list_authors()):
            seed = SEED_AUTHORS[index]
            assert author.name == seed["firstname"] + " " + seed["lastname"]

    def test_seeded_names(self, store: LibraryStore):
        """Test the sample authors in insertion order."""
        names = [a.name for a in store.list_authors()]

        assert names == ["J.K. Rowling", "Michael Crichton"]

    def test_listing_is_stable(self, store: LibraryStore):
        """Test that repeated reads return the same authors."""
        assert store.list_authors() == store.list_authors()

    def test_empty_store(self):
        """Test listing authors of an empty store."""
        assert LibraryStore().list_authors() == []

    def test_returned_list_is_a_copy(self, store: LibraryStore):
        """Test that changing the returned list leaves the store alone."""
        before = store.list_authors()
        authors = store.list_authors()
        authors.clear()

        assert store.author_count() == 2
        assert store.list_authors() == before

    def test_views_cannot_be_modified(self, store: LibraryStore):
        """Test that returned author views are frozen."""
        before = store.list_authors()
        author = store.list_authors()[0]

        with pytest.raises(ValidationError):
            author.firstname = "Changed"

        assert store.author_count() == 2
        assert store.list_authors() == before
        assert store.list_authors()[0].name == "J.K. Rowling"


class TestListBooks:
    """Tests for LibraryStore.list_books."""

    def test_returns_all_books(self, store: LibraryStore):
        """Test that every seeded book is returned in order."""
        titles = [b.title for b in store.list_books()]

        assert titles == [b["title"] for b in SEED_BOOKS]

    def test_returned_list_is_a_copy(self, store: LibraryStore):
        """Test that changing the returned list leaves the store alone."""
        books = store.list_books()
        books.clear()

        assert store.book_count() == 2
        assert len(store.list_books()) == 2

    def test_records_cannot_be_modified(self, store: LibraryStore):
        """Test that returned books are frozen."""
        book = store.list_books()[0]

        with pytest.raises(ValidationError):
            book.title = "Changed"

        assert store.list_books()[0].title == "Harry Potter and the Chamber of Secrets"

    def test_chapters_are_immutable(self, store: LibraryStore):
        """Test that chapters are stored as a tuple."""
        book = store.list_books()[1]

        assert book.chapters == ("Intro", "The Story", "Outro")
        assert isinstance(book.chapters, tuple)


class TestBookRecord:
    """Tests for BookRecord validation."""

    def test_chapters_required_non_empty(self):
        """Test that a book must have at least one chapter."""
        with pytest.raises(ValidationError):
            BookRecord(title="Empty", author=0, chapters=[])

    def test_chapters_list_converted(self):
        """Test that a chapter list is stored as a tuple."""
        book = BookRecord(title="T", author=0, chapters=["One"])

        assert book.chapters == ("One",)


class TestAppendAuthor:
    """Tests for LibraryStore.append_author."""

    def test_append_assigns_next_position(self, store: LibraryStore):
        """Test that the new author gets the next index."""
        view = store.append_author(AuthorRecord(firstname="Mary", lastname="Shelley"))

        assert view.id == 2
        assert view.name == "Mary Shelley"

    def test_append_visible_to_reads(self, store: LibraryStore):
        """Test that appended authors appear in later listings."""
        store.append_author(AuthorRecord(firstname="Mary", lastname="Shelley"))

        authors = store.list_authors()
        assert len(authors) == 3
        assert authors[2].name == "Mary Shelley"
        assert store.author_count() == 3

    def test_existing_ids_unchanged(self, store: LibraryStore):
        """Test that appending does not move existing authors."""
        before = store.list_authors()
        store.append_author(AuthorRecord(firstname="Mary", lastname="Shelley"))

        assert store.list_authors()[:2] == before

    def test_concurrent_appends_get_distinct_ids(self, store: LibraryStore):
        """Test that parallel appends never share a position."""

        def add(i: int) -> int:
            record = AuthorRecord(firstname="Writer", lastname=str(i))
            return store.append_author(record).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(add, range(50)))

        assert sorted(ids) == list(range(2, 52))
        assert store.author_count() == 52


class TestGetStore:
    """Tests for the process-wide store dependency."""

    def test_get_store_is_cached(self):
        """Test that every call returns the same store."""
        assert get_store() is get_store()

    def test_get_store_is_seeded(self):
        """Test that the shared store starts with the sample books."""
        assert get_store().book_count() == len(SEED_BOOKS)
