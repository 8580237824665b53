"""
GraphQL Author Type

Defines the Author type and its input type for GraphQL operations.
"""

from typing import TYPE_CHECKING, Annotated

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.schemas import AuthorView
from app.services.library import AuthorParent, BookFilter, resolve_books

if TYPE_CHECKING:
    from app.graphql.types.book import BookType


@strawberry.type(name="Author")
class AuthorType:
    """
    GraphQL type representing a book author.

    Maps to AuthorView; `id` is the author's position in the store.
    """

    id: int
    firstname: str
    lastname: str
    name: str

    @strawberry.field(description="Books written by this author")
    def books(
        self, info: Info[GraphQLContext, None]
    ) -> (
        list[Annotated["BookType", strawberry.lazy("app.graphql.types.book")] | None]
        | None
    ):
        """Books whose author index equals this author's id."""
        from app.graphql.types.book import book_to_graphql

        books = resolve_books(
            info.context.store, BookFilter(parent=AuthorParent(id=self.id))
        )
        return [book_to_graphql(b) for b in books]


@strawberry.input(name="AuthorInput")
class AuthorInput:
    """
    Input type for creating authors.
    """

    firstname: str
    lastname: str


def author_to_graphql(author: AuthorView) -> AuthorType:
    """Convert an AuthorView to the GraphQL AuthorType."""
    return AuthorType(
        id=author.id,
        firstname=author.firstname,
        lastname=author.lastname,
        name=author.name,
    )
