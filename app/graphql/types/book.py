"""
GraphQL Book Type

Defines the Book type for GraphQL queries. The author is not embedded:
the book keeps its author index and resolves the author on demand.
"""

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.author import AuthorType, author_to_graphql
from app.schemas import BookRecord
from app.services.library import AuthorLookup, BookParent, resolve_author


@strawberry.type(name="Book")
class BookType:
    """
    GraphQL type representing a book.

    Maps to BookRecord; `author_index` stays out of the schema.
    """

    title: str
    chapters: list[str]
    author_index: strawberry.Private[int]

    @strawberry.field(description="Author of this book")
    def author(self, info: Info[GraphQLContext, None]) -> AuthorType | None:
        """The author at this book's index, or null if out of range."""
        author = resolve_author(
            info.context.store,
            AuthorLookup(parent=BookParent(author=self.author_index)),
        )
        if author is None:
            return None
        return author_to_graphql(author)


def book_to_graphql(book: BookRecord) -> BookType:
    """Convert a BookRecord to the GraphQL BookType."""
    return BookType(
        title=book.title,
        chapters=list(book.chapters),
        author_index=book.author,
    )
