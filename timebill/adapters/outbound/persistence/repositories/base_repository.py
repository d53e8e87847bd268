# timebill/adapters/outbound/persistence/repositories/base_repository.py (async version)

from dataclasses import fields
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
import logging

from timebill.adapters.outbound.persistence.models.base_model import Base
from timebill.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceInUseException,
    DatabaseOperationException,
)

# Define generic type for SQLAlchemy models
ModelType = TypeVar("ModelType", bound=Base)
# Define generic type for domain dataclasses
DomainType = TypeVar("DomainType")

# Configure logger
logger = logging.getLogger(__name__)


class AsyncCRUDBase(Generic[ModelType, DomainType]):
    """
    Async base class for implementing the Repository pattern.

    Provides generic CRUD operations bound to one session. Writes are only
    flushed; the unit of work that owns the session decides when to commit.

    Attributes:
        model: SQLAlchemy model class
        domain_model: Dataclass returned to the application layer
        db: Async session of the current unit of work
        logger: Configured logger for the class
    """

    model: Type[ModelType]
    domain_model: Type[DomainType]

    def __init__(self, db: AsyncSession):
        """
        Initialize the repository with the session of the current unit of work.

        Args:
            db: Async database session
        """
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{self.model.__name__}")

    def to_domain(self, db_obj: ModelType) -> DomainType:
        """
        Convert database model to domain model.

        Args:
            db_obj: ORM instance

        Returns:
            Domain dataclass with the same field values
        """
        return self.domain_model(**{f.name: getattr(db_obj, f.name) for f in fields(self.domain_model)})

    async def _get_model(self, id: Any) -> Optional[ModelType]:
        try:
            result = await self.db.execute(select(self.model).where(self.model.id == id))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with ID {id}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__}",
                original_error=e
            )

    async def get(self, id: Any) -> Optional[DomainType]:
        """
        Get an entity by ID.

        Args:
            id: ID of the entity

        Returns:
            Entity found or None if it doesn't exist
        """
        db_obj = await self._get_model(id)
        return self.to_domain(db_obj) if db_obj is not None else None

    async def get_by_field(self, field_name: str, value: Any) -> Optional[DomainType]:
        """
        Get an entity by the value of a specific field.

        Args:
            field_name: Name of the field/column to filter
            value: Value to filter

        Returns:
            Entity found or None if it doesn't exist

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model).where(getattr(self.model, field_name) == value).limit(1)
            result = await self.db.execute(query)
            db_obj = result.scalar_one_or_none()
            return self.to_domain(db_obj) if db_obj is not None else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching {self.model.__name__} with {field_name}={value}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error fetching {self.model.__name__} by {field_name}",
                original_error=e
            )

    async def list(self, **filters) -> List[DomainType]:
        """
        Get entities, optionally filtered by field equality, ordered by ID.

        Args:
            **filters: Filters in the format field=value

        Returns:
            List of found entities

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            query = select(self.model)
            for field, value in filters.items():
                query = query.where(getattr(self.model, field) == value)

            result = await self.db.execute(query.order_by(self.model.id))
            return [self.to_domain(obj) for obj in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error listing {self.model.__name__}s",
                original_error=e
            )

    async def create(self, data: Dict[str, Any]) -> DomainType:
        """
        Create a new entity.

        Args:
            data: Column values of the new entity

        Returns:
            Newly created entity

        Raises:
            ResourceAlreadyExistsException: If a unique column already holds the value
            DatabaseOperationException: If another database error occurs
        """
        try:
            db_obj = self.model(**data)
            self.db.add(db_obj)
            await self.db.flush()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} created with ID: {db_obj.id}")
            return self.to_domain(db_obj)

        except IntegrityError as e:
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Attempt to create duplicate {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.model.__name__} with these data already exists"
                )
            self.logger.error(f"Integrity error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            self.logger.error(f"Error creating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error creating {self.model.__name__}",
                original_error=e
            )

    async def update(self, id: Any, data: Dict[str, Any]) -> Optional[DomainType]:
        """
        Update an existing entity with the given fields.

        Args:
            id: ID of the entity
            data: Fields to change

        Returns:
            Updated entity, or None if it doesn't exist

        Raises:
            ResourceAlreadyExistsException: If the update violates a uniqueness constraint
            DatabaseOperationException: If another database error occurs
        """
        db_obj = await self._get_model(id)
        if db_obj is None:
            return None

        try:
            for field, value in data.items():
                setattr(db_obj, field, value)

            await self.db.flush()
            await self.db.refresh(db_obj)

            self.logger.info(f"{self.model.__name__} with ID {db_obj.id} updated")
            return self.to_domain(db_obj)

        except IntegrityError as e:
            error_msg = str(e).lower()
            if 'unique' in error_msg or 'duplicate' in error_msg:
                self.logger.warning(f"Uniqueness violation updating {self.model.__name__}: {str(e)}")
                raise ResourceAlreadyExistsException(
                    detail=f"Could not update {self.model.__name__}: value already exists"
                )
            self.logger.error(f"Integrity error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(original_error=e)

        except SQLAlchemyError as e:
            self.logger.error(f"Error updating {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error updating {self.model.__name__}",
                original_error=e
            )

    async def delete(self, id: Any) -> bool:
        """
        Remove an entity by ID. Nothing is cascaded.

        Args:
            id: ID of the entity to remove

        Returns:
            True if the entity was removed, False if it didn't exist

        Raises:
            ResourceInUseException: If other rows still reference the entity
            DatabaseOperationException: If an error occurs during removal
        """
        db_obj = await self._get_model(id)
        if db_obj is None:
            return False

        try:
            await self.db.delete(db_obj)
            await self.db.flush()

            self.logger.info(f"{self.model.__name__} with ID {id} removed")
            return True

        except IntegrityError as e:
            self.logger.warning(f"Integrity error removing {self.model.__name__}: {str(e)}")
            raise ResourceInUseException(
                detail=f"Cannot remove {self.model.__name__} as it is being used by other entities",
                resource_id=id
            )

        except SQLAlchemyError as e:
            self.logger.error(f"Error removing {self.model.__name__}: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error removing {self.model.__name__}",
                original_error=e
            )

    async def count(self) -> int:
        """
        Count all entities.

        Raises:
            DatabaseOperationException: If an error occurs in the query
        """
        try:
            result = await self.db.execute(select(func.count()).select_from(self.model))
            return result.scalar_one()

        except SQLAlchemyError as e:
            self.logger.error(f"Error counting {self.model.__name__}s: {str(e)}")
            raise DatabaseOperationException(
                detail=f"Error counting {self.model.__name__}s",
                original_error=e
            )
