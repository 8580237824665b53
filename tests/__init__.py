"""
Test Suite for Library GraphQL

Test Organization:
- conftest.py: Shared fixtures (fresh store, test client)
- test_store.py: Tests for the in-memory library store
- test_library.py: Tests for the resolver layer
- test_graphql.py: Tests for the full schema at /graphql
- test_basic_graphql.py: Tests for the basic schema at /v1/graphql
- test_config.py: Tests for settings validation
- test_main.py: Tests for the root and health endpoints

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_graphql.py

    # Run with verbose output
    pytest -v
"""
