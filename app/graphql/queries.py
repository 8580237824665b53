"""
GraphQL Query Resolvers

Defines all read operations (queries) for the full GraphQL schema.
Each resolver reads the store from the context and delegates to the
library service.
"""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.author import AuthorType, author_to_graphql
from app.graphql.types.book import BookType, book_to_graphql
from app.services.library import (
    AuthorLookup,
    BookFilter,
    resolve_author,
    resolve_authors,
    resolve_book,
    resolve_books,
)


@strawberry.type
class Query:
    """
    GraphQL Query type containing all read operations.

    All resolvers receive an `info` parameter that contains the
    GraphQL context with the library store.
    """

    @strawberry.field(description="Get books, optionally filtered by title")
    def books(
        self,
        info: Info[GraphQLContext, None],
        title: str | None = None,
    ) -> list[BookType | None] | None:
        """
        Get all books, or those whose title matches a pattern.

        Args:
            title: Regular expression searched for in each title

        Returns:
            Matching books; null with an error if the pattern is invalid
        """
        books = resolve_books(info.context.store, BookFilter(title=title))
        return [book_to_graphql(b) for b in books]

    @strawberry.field(description="Get a single book by its exact title")
    def book(self, info: Info[GraphQLContext, None], title: str) -> BookType | None:
        """Get a single book by title, or null if none matches."""
        book = resolve_book(info.context.store, title)

        if book is None:
            return None

        return book_to_graphql(book)

    @strawberry.field(description="Get every author")
    def authors(
        self, info: Info[GraphQLContext, None]
    ) -> list[AuthorType | None] | None:
        """Get all authors in insertion order."""
        return [author_to_graphql(a) for a in resolve_authors(info.context.store)]

    @strawberry.field(description="Get a single author by index")
    def author(self, info: Info[GraphQLContext, None], index: int) -> AuthorType | None:
        """Get the author at `index`, or null if it is out of range."""
        author = resolve_author(info.context.store, AuthorLookup(index=index))

        if author is None:
            return None

        return author_to_graphql(author)
