"""Unit tests for centralized database layer.

This package contains unit tests for the database layer in
pinknail/core/database, including:

- Entity defaults and table metadata
- Repository tests (mocked sessions and in-memory SQLite)
- Engine and session helper tests

All tests use in-memory SQLite or mocks to ensure fast execution
without requiring external database services.
"""
