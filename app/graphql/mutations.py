"""
GraphQL Mutation Resolvers

Defines all write operations (mutations) for the full GraphQL schema.
The only write is appending a new author.
"""

import logging

import strawberry
from strawberry.types import Info

from app.graphql.context import GraphQLContext
from app.graphql.types.author import AuthorInput, AuthorType, author_to_graphql
from app.schemas import AuthorDraft
from app.services.library import create_author

logger = logging.getLogger(__name__)


@strawberry.type
class Mutation:
    """
    GraphQL Mutation type containing all write operations.
    """

    @strawberry.mutation(description="Create a new author")
    def create_author(
        self,
        info: Info[GraphQLContext, None],
        author: AuthorInput,
    ) -> AuthorType:
        """
        Append a new author to the library.

        The author gets the next free index and shows up in every
        later `authors` query.
        """
        draft = AuthorDraft(firstname=author.firstname, lastname=author.lastname)
        created = create_author(info.context.store, draft)
        logger.debug(f"createAuthor returned author {created.id}")

        return author_to_graphql(created)
