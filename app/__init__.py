"""
Library GraphQL Application Package

Example GraphQL servers over an in-memory library of authors and books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- store.py: In-memory author/book store and its seed data
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection aliases
- schemas/: Pydantic record and view schemas
- services/: Resolver layer (queries, relationships, mutation)
- graphql/: Strawberry schemas, types, and routers
"""

__version__ = "0.1.0"
