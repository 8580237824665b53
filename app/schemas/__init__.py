"""
Pydantic Schemas Package

This package contains the Pydantic models for the records held in the
library store and the views derived from them.

Schema Naming Convention:
- XxxRecord: What the store keeps (frozen)
- XxxDraft: Fields supplied when creating a new record
- XxxView: Derived read representation
"""

from app.schemas.author import AuthorBase, AuthorDraft, AuthorRecord, AuthorView
from app.schemas.book import AuthorIndex, BookRecord

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorDraft",
    "AuthorRecord",
    "AuthorView",
    # Book schemas
    "AuthorIndex",
    "BookRecord",
]
