"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers and the
GraphQL context getters. FastAPI's Depends() function manages them, and
tests replace them through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends

from app.store import LibraryStore, get_store

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def health(store: LibraryStore = Depends(get_store)):
#
# You can write:
#   def health(store: Store):

Store = Annotated[LibraryStore, Depends(get_store)]
