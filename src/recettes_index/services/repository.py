"""
Base repository for mapped models.

Session Management Pattern:
- Each repository receives an optional async session factory (the backend client)
- If none is provided, the global factory from services.database is used
- Every call opens its own session_scope, so calls are independent and can
  run concurrently

Every SQLAlchemy failure is logged and re-raised as BackendError; nothing
is retried.
"""

import logging
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql import Select

from recettes_index.models.base import BaseModel
from recettes_index.services.database import session_scope
from recettes_index.services.exceptions import BackendError
from recettes_index.services.logging_utils import get_service_logger, log_operation

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = get_service_logger(__name__)


class BaseRepository(Generic[ModelT]):
    """
    list/get/insert over one mapped model.

    Subclasses set ``model``. Relationships are loaded the way the model
    declares them (joined or selectin), so returned objects are fully
    materialized and usable after the session is closed.
    """

    model: Type[ModelT]

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self._session_factory = session_factory

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def _session_scope(self):
        return session_scope(self._session_factory)

    def _list_statement(self) -> Select:
        return select(self.model)

    async def _fetch_all(self, operation: str, statement: Select, **context: Any) -> List[Any]:
        """Run a select in its own session and return every scalar row."""
        try:
            async with self._session_scope() as session:
                result = await session.execute(statement)
                rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            self._log_failure(operation, e, **context)
            raise BackendError(f"Failed to retrieve {self.table_name}", e) from e

        log_operation(
            logger,
            operation=operation,
            outcome="success",
            level=logging.DEBUG,
            table=self.table_name,
            count=len(rows),
            **context,
        )
        return rows

    def _log_failure(self, operation: str, error: Exception, **context: Any) -> None:
        log_operation(
            logger,
            operation=operation,
            outcome="error",
            level=logging.ERROR,
            table=self.table_name,
            error=str(error),
            **context,
        )

    async def list(self) -> List[ModelT]:
        """
        Retrieve every row of the table.

        Returns:
            List of model instances in backend order, [] for an empty table

        Raises:
            BackendError: If the backend query fails
        """
        return await self._fetch_all("list", self._list_statement())

    async def get(self, entity_id: Any) -> Optional[ModelT]:
        """
        Retrieve one row by primary key.

        Args:
            entity_id: Primary key value (a tuple for composite keys)

        Returns:
            Model instance, or None if no row has that key

        Raises:
            BackendError: If the backend query fails
        """
        try:
            async with self._session_scope() as session:
                entity = await session.get(self.model, entity_id)
        except SQLAlchemyError as e:
            self._log_failure("get", e, entity_id=entity_id)
            raise BackendError(f"Failed to retrieve {self.table_name} {entity_id}", e) from e

        return entity

    async def _insert_in_session(self, session: AsyncSession, entity: ModelT) -> Optional[ModelT]:
        session.add(entity)
        await session.flush()

        identity = inspect(entity).identity
        if identity is None:
            return None

        # Re-read so server defaults and eager relationships are populated
        return await session.get(self.model, identity, populate_existing=True)

    async def insert(self, entity: ModelT) -> Optional[ModelT]:
        """
        Insert one new row.

        No validation is applied here; see utils.validators.

        Args:
            entity: Transient model instance. Leave the primary key unset,
                the backend assigns it.

        Returns:
            The backend's row (id, created_at and relationships loaded), or
            None if the backend reports that no row was created

        Raises:
            BackendError: If the backend rejects the insert
        """
        try:
            async with self._session_scope() as session:
                created = await self._insert_in_session(session, entity)
        except SQLAlchemyError as e:
            self._log_failure("insert", e)
            raise BackendError(f"Failed to insert into {self.table_name}", e) from e

        if created is None:
            log_operation(
                logger,
                operation="insert",
                outcome="not_created",
                level=logging.WARNING,
                table=self.table_name,
            )
            return None

        log_operation(
            logger,
            operation="insert",
            outcome="success",
            table=self.table_name,
            entity_id=inspect(created).identity,
        )
        return created
