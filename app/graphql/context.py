"""
GraphQL Context

Provides the library store to all GraphQL resolvers.

The context is created fresh for each GraphQL request and passed
to all resolvers via the `info` parameter. The store itself comes from
the `get_store` dependency, so tests can swap it for an isolated one.
"""

from strawberry.fastapi import BaseContext

from app.dependencies import Store
from app.store import LibraryStore


class GraphQLContext(BaseContext):
    """
    Context object available to all GraphQL resolvers.

    Inherits from Strawberry's BaseContext for proper integration.

    Attributes:
        store: In-memory library store
    """

    def __init__(self, store: LibraryStore):
        super().__init__()
        self.store = store


async def get_context(store: Store) -> GraphQLContext:
    """
    Create GraphQL context for each request.

    Strawberry resolves FastAPI dependencies declared on this function,
    so the store is injected the same way as in any route.

    Args:
        store: Library store from the get_store dependency

    Returns:
        GraphQLContext holding the store
    """
    return GraphQLContext(store=store)
