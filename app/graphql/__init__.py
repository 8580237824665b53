"""
GraphQL Package

This package provides the GraphQL API using Strawberry GraphQL.

Two schemas are served from the same in-memory store:
- Full schema (/graphql): authors with first/last name and their books,
  books with a resolved author, title filtering, and createAuthor
- Basic schema (/v1/graphql): authors with a name, books with an
  embedded author, no arguments and no mutations

Example Query:
    query {
        books(title: "Harry") {
            title
            chapters
            author { name }
        }
    }
"""

import strawberry
from strawberry.fastapi import GraphQLRouter

from app.config import get_settings
from app.graphql.context import get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query
from app.graphql.basic import basic_schema, create_basic_graphql_router

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        # Options: "graphiql", "apollo-sandbox", "pathfinder", or None to disable;
        # always None in production
        graphql_ide=get_settings().graphql_ide_option,
    )


__all__ = [
    "schema",
    "basic_schema",
    "create_graphql_router",
    "create_basic_graphql_router",
]
