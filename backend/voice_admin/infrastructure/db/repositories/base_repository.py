"""
Base Repository for Voice Admin

Generic async repository implementing the create/read/update operations
every entity shares. Repositories receive their ``AsyncSession`` from the
caller, so tests can hand in an isolated in-memory session.
"""

from abc import ABC, abstractmethod
from typing import Any, TypeVar, Generic, List, Optional, Type

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from voice_admin.infrastructure.exceptions import ConflictError


# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=SQLModel)
CreateSchemaType = TypeVar("CreateSchemaType", bound=SQLModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=SQLModel)


class IReadRepository(ABC, Generic[ModelType]):
    """
    Interface for read operations.

    Separates read concerns from write concerns.
    """

    @abstractmethod
    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """Get a single record by ID."""
        pass

    @abstractmethod
    async def get_all(self) -> List[ModelType]:
        """Get all records."""
        pass

    @abstractmethod
    async def exists(self, id: int) -> bool:
        """Check if a record exists."""
        pass


class IWriteRepository(ABC, Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Interface for write operations.

    No delete: rows are never removed through the application.
    """

    @abstractmethod
    async def create(self, data: CreateSchemaType) -> ModelType:
        """Create a new record."""
        pass

    @abstractmethod
    async def update(
        self,
        id: int,
        data: UpdateSchemaType,
        **overrides: Any
    ) -> Optional[ModelType]:
        """Update an existing record."""
        pass


class BaseRepository(
    IReadRepository[ModelType],
    IWriteRepository[ModelType, CreateSchemaType, UpdateSchemaType],
    Generic[ModelType, CreateSchemaType, UpdateSchemaType]
):
    """
    Generic async repository with create/read/update operations.

    Args:
        model: The SQLModel table class to operate on
        session: Async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        self._model = model
        self._session = session

    @property
    def session(self) -> AsyncSession:
        """Get the current session."""
        return self._session

    @property
    def table_name(self) -> str:
        return self._model.__tablename__

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            id: Integer primary key

        Returns:
            Model instance or None if not found
        """
        return await self._session.get(self._model, id)

    async def get_all(self) -> List[ModelType]:
        """
        Get all records in insertion order.

        Returns:
            List of model instances ordered by id
        """
        stmt = select(self._model).order_by(self._model.id)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def get_for_update(self, id: int) -> Optional[ModelType]:
        """
        Get a record while holding its row lock until the transaction ends.

        SELECT ... FOR UPDATE on PostgreSQL; SQLite ignores the clause.
        """
        stmt = (
            select(self._model)
            .where(self._model.id == id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, id: int) -> bool:
        """
        Check if a record exists.

        Args:
            id: Integer primary key

        Returns:
            True if exists, False otherwise
        """
        result = await self.get_by_id(id)
        return result is not None

    async def add(self, db_obj: ModelType) -> ModelType:
        """
        Persist an already-built model instance.

        Raises:
            ConflictError: If the store rejects the row on a unique or foreign key constraint
        """
        self._session.add(db_obj)
        await self._flush("insert")
        await self._session.refresh(db_obj)
        return db_obj

    async def create(self, data: CreateSchemaType) -> ModelType:
        """
        Create a new record.

        Args:
            data: Create schema with field values

        Returns:
            Created model instance
        """
        db_obj = self._model.model_validate(data.model_dump())
        return await self.add(db_obj)

    async def update(
        self,
        id: int,
        data: UpdateSchemaType,
        **overrides: Any
    ) -> Optional[ModelType]:
        """
        Update an existing record.

        Args:
            id: Integer primary key
            data: Update schema; only fields explicitly set are written
            overrides: Extra column values applied after ``data``

        Returns:
            Updated model instance or None if not found
        """
        db_obj = await self.get_by_id(id)
        if not db_obj:
            return None

        update_data = data.model_dump(exclude_unset=True)
        update_data.update(overrides)

        for field, value in update_data.items():
            setattr(db_obj, field, value)

        self._session.add(db_obj)
        await self._flush("update")
        await self._session.refresh(db_obj)
        return db_obj

    async def count(self) -> int:
        """
        Get total count of records.

        Returns:
            Total number of records
        """
        stmt = select(func.count()).select_from(self._model)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _flush(self, operation: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            raise ConflictError(
                f"Constraint violated on {self.table_name}: {e.orig}",
                operation=operation,
                table=self.table_name,
                original_error=e,
            ) from e
