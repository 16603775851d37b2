"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns used across all
repository implementations. Built with async SQLAlchemy sessions over
SQLModel entities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from juicebox_factory.core.errors import DuplicateSubmissionError, UpstreamError, ValidationFailedError
from juicebox_factory.core.logging_config import get_logger

logger = get_logger(__name__)

UNIQUE_VIOLATION_SQLSTATE = "23505"

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class BaseRepository(ABC, Generic[EntityType]):
    """Base async repository interface with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLAlchemy session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @abstractmethod
    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """

    @abstractmethod
    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """

    @abstractmethod
    async def delete(self, entity_id: str | int) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """

    async def _save(self, entity: EntityType) -> EntityType:
        """Add, commit and refresh ``entity``, translating database failures."""
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def _commit(self) -> None:
        """Commit the session.

        Raises:
            DuplicateSubmissionError: A uniqueness constraint was violated
            ValidationFailedError: A NOT NULL, foreign key or check constraint was violated
            UpstreamError: Any other database failure (non-external, maps to 500)
        """
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Integrity error on {self.model.__name__}: {e.orig}")
            if is_unique_violation(e):
                raise DuplicateSubmissionError(f"{self.model.__name__} violates a uniqueness constraint") from e
            raise ValidationFailedError(f"{self.model.__name__} violates a data constraint: {e.orig}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Database error on {self.model.__name__}: {e}", exc_info=True)
            raise UpstreamError("database", str(e), external=False, cause=e) from e


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a select statement.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters; ``None`` values are skipped

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether ``error`` comes from a UNIQUE or primary key constraint.

    Postgres drivers expose the SQLSTATE; SQLite only reports it in the message.
    """
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION_SQLSTATE
    message = str(error.orig).lower()
    return "unique constraint" in message or "duplicate key" in message
