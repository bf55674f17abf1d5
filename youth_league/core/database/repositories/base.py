"""
Base repository and query utilities.

This module provides the async repository shared by every table. It carries
the common CRUD operations; table repositories add relationship-aware reads
on top.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar, Union

from sqlalchemy import Text, inspect
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

from youth_league.core.errors import EntityNotFoundError
from youth_league.core.logging_config import get_logger

from ..base import as_reference

logger = get_logger(__name__)

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

Identity = Union[int, str, Sequence[Union[int, str]]]


class QueryBuilder:
    """Utility class for building SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        ``None`` values and unknown attributes are skipped. Values compared
        against text reference columns are rendered as text first.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is None or not hasattr(model, key):
                continue
            attribute = getattr(model, key)
            if isinstance(attribute.expression.type, Text) and not isinstance(value, str):
                value = as_reference(value)
            stmt = stmt.where(attribute == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

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


class AsyncBaseRepository(Generic[EntityType]):
    """Async repository with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @property
    def table_name(self) -> str:
        return self.model.__tablename__  # type: ignore[return-value]

    def _coerce_identity(self, entity_id: Identity) -> Any:
        """Turn a caller-supplied key into the mapper's primary key value.

        Serial keys accept ints and numeric strings, the latter being how
        reference columns store them. Any other string maps to ``None``, which
        matches no row.
        """
        if isinstance(entity_id, str):
            return int(entity_id) if entity_id.isdigit() else None
        return entity_id

    def _identity_of(self, entity: EntityType) -> tuple:
        return tuple(inspect(self.model).primary_key_from_instance(entity))

    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        logger.debug(f"Created {self.table_name} row {self._identity_of(entity)}")
        return entity

    async def create_from(self, payload: Union[SQLModel, Dict[str, Any]]) -> EntityType:
        """Validate a payload against the table model and persist it.

        Args:
            payload: Base model instance or plain mapping of field values

        Returns:
            Persisted entity

        Raises:
            pydantic.ValidationError: if the payload fails validation
        """
        data = payload.model_dump() if isinstance(payload, SQLModel) else payload
        entity = self.model.model_validate(data)
        return await self.create(entity)

    async def get_by_id(self, entity_id: Identity) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        identity = self._coerce_identity(entity_id)
        if identity is None:
            return None
        return await self.session.get(self.model, identity)

    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance

        Raises:
            EntityNotFoundError: if no row with the entity's key exists
        """
        identity = self._identity_of(entity)
        if any(part is None for part in identity) or await self.session.get(self.model, identity) is None:
            raise EntityNotFoundError(self.table_name, identity)
        merged = await self.session.merge(entity)
        await self.session.commit()
        await self.session.refresh(merged)
        return merged

    async def delete(self, entity_id: Identity) -> bool:
        """Delete entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return False
        await self.session.delete(entity)
        await self.session.commit()
        logger.debug(f"Deleted {self.table_name} row {entity_id!r}")
        return True

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities in primary key order with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model).order_by(*inspect(self.model).primary_key)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, self.model, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.exec(stmt)
        return list(result.all())
