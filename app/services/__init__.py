"""
Services Package

This package contains the logic behind the GraphQL fields, kept
separate from the Strawberry types so it can be tested in isolation.

Current services:
- errors.py: Errors raised by the resolver layer
- library.py: Query resolvers, relationship traversal, createAuthor
"""
