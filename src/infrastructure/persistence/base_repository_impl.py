"""Base repository implementation for infrastructure layer."""

import logging

from typing import Any, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.base import BaseEntity
from src.domain.repositories.base import BaseRepository
from src.infrastructure.exceptions import DatabaseError, UpdateError


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseEntity)


class BaseRepositoryImpl(BaseRepository[T]):
    """Generic CRUD repository over a SQLAlchemy ORM model.

    Type Parameters:
        T: Domain entity type that extends BaseEntity

    Attributes:
        session: Async database session
        entity_class: Domain entity class for type conversions
        model_class: ORM model class

    Note:
        Subclasses must implement the conversion methods:
        _to_entity(), _to_model() and _update_model()
    """

    def __init__(
        self,
        session: AsyncSession,
        entity_class: type[T],
        model_class: type[Any],
    ):
        self.session = session
        self.entity_class = entity_class
        self.model_class = model_class

    async def get_by_id(self, entity_id: int) -> T | None:
        """Get entity by ID."""
        try:
            model = await self.session.get(self.model_class, entity_id)
        except SQLAlchemyError as e:
            logger.error(f"Database error getting {self._name} {entity_id}: {e}")
            raise DatabaseError(
                f"Failed to get {self._name}", {"id": entity_id, "error": str(e)}
            ) from e
        return self._to_entity(model) if model else None

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[T]:
        """Get all entities with optional pagination."""
        query = select(self.model_class).order_by(self.model_class.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)

        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Database error listing {self._name}: {e}")
            raise DatabaseError(
                f"Failed to list {self._name}", {"error": str(e)}
            ) from e
        return [self._to_entity(model) for model in result.scalars().all()]

    async def create(self, entity: T) -> T:
        """Create a new entity."""
        model = self._to_model(entity)
        try:
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error creating {self._name}: {e}")
            raise DatabaseError(
                f"Failed to create {self._name}", {"error": str(e)}
            ) from e
        return self._to_entity(model)

    async def update(self, entity: T) -> T:
        """Update an existing entity."""
        if not entity.id:
            raise ValueError("Entity must have an ID to update")

        model = await self.session.get(self.model_class, entity.id)
        if not model:
            raise UpdateError(
                f"{self._name} not found", {"id": entity.id}
            )

        self._update_model(model, entity)
        try:
            await self.session.flush()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error updating {self._name} {entity.id}: {e}")
            raise UpdateError(
                f"Failed to update {self._name}", {"id": entity.id, "error": str(e)}
            ) from e
        return self._to_entity(model)

    async def delete(self, entity_id: int) -> bool:
        """Delete an entity by ID."""
        model = await self.session.get(self.model_class, entity_id)
        if not model:
            return False

        await self.session.delete(model)
        await self.session.flush()
        return True

    async def count(self) -> int:
        """Count total number of entities."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model_class)
        )
        count = result.scalar()
        return count if count is not None else 0

    @property
    def _name(self) -> str:
        return self.entity_class.__name__

    def _to_entity(self, model: Any) -> T:
        """Convert database model to domain entity."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _to_model(self, entity: T) -> Any:
        """Convert domain entity to database model."""
        raise NotImplementedError("Subclass must implement _to_model")

    def _update_model(self, model: Any, entity: T) -> None:
        """Update model fields from entity."""
        raise NotImplementedError("Subclass must implement _update_model")
