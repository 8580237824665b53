"""
Basic GraphQL Schema

The first, minimal version of the API: authors only have a name, a book
embeds its author object directly, queries take no arguments, and there
are no mutations.

It reads the same store as the full schema, so an author created through
the full schema also appears here.

Example Query:
    query {
        books {
            title
            author { name }
            chapters
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from app.config import get_settings
from app.graphql.context import GraphQLContext, get_context
from app.services.library import (
    AuthorLookup,
    BookFilter,
    BookParent,
    resolve_author,
    resolve_authors,
    resolve_books,
)


@strawberry.type(name="Author")
class BasicAuthorType:
    """Author with only a display name."""

    name: str | None = None


@strawberry.type(name="Book")
class BasicBookType:
    """Book with its author embedded."""

    title: str | None = None
    author: BasicAuthorType | None = None
    chapters: list[str | None] = strawberry.field(default_factory=list)


@strawberry.type(name="Query")
class BasicQuery:
    """Root query type of the basic schema."""

    @strawberry.field(description="Get every book")
    def books(self, info: Info[GraphQLContext, None]) -> list[BasicBookType | None] | None:
        store = info.context.store
        items = []
        for book in resolve_books(store, BookFilter()):
            author = resolve_author(store, AuthorLookup(parent=BookParent(author=book.author)))
            items.append(
                BasicBookType(
                    title=book.title,
                    author=BasicAuthorType(name=author.name) if author else None,
                    chapters=list(book.chapters),
                )
            )
        return items

    @strawberry.field(description="Get every author")
    def authors(self, info: Info[GraphQLContext, None]) -> list[BasicAuthorType | None] | None:
        return [BasicAuthorType(name=a.name) for a in resolve_authors(info.context.store)]


basic_schema = strawberry.Schema(query=BasicQuery)


def create_basic_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router serving the basic schema.

    Returns:
        GraphQLRouter configured with the basic schema and context
    """
    return GraphQLRouter(
        basic_schema,
        context_getter=get_context,
        graphql_ide=get_settings().graphql_ide_option,
    )
