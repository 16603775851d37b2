"""Unit tests for the database layer.

This package contains unit tests for juicebox_factory/core/database,
including:

- Entity model defaults and constraints (SQLModel)
- Repository queries against in-memory SQLite
- Error translation with mocked sessions
"""
