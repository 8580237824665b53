"""
GraphQL Types Package

This package contains the GraphQL type definitions for the full schema.
Types are defined using Strawberry's decorator syntax.

Types defined here:
- AuthorType: Author with the books written by them
- AuthorInput: Input for the createAuthor mutation
- BookType: Book with its author resolved from the author index
"""

from app.graphql.types.author import AuthorInput, AuthorType, author_to_graphql
from app.graphql.types.book import BookType, book_to_graphql

__all__ = [
    # Author types
    "AuthorType",
    "AuthorInput",
    "author_to_graphql",
    # Book types
    "BookType",
    "book_to_graphql",
]
