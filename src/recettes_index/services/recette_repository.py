"""
Recette Repository - simplified access to the recettes table.

Reads and writes only id, name and created_at. Rows inserted here have
no rating, notes or book.
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from recettes_index.models import Recette, Recipe
from recettes_index.services.database import session_scope
from recettes_index.services.exceptions import BackendError
from recettes_index.services.logging_utils import get_service_logger, log_operation
from recettes_index.services.recipe_repository import RecipeRepository

logger = get_service_logger(__name__)


class RecetteRepository:
    """
    Repository returning Recette projections.

    Writes and primary-key reads go through a RecipeRepository over the
    same session factory; list() selects only the projected columns.
    """

    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self._session_factory = session_factory
        self._recipes = RecipeRepository(session_factory)

    @property
    def table_name(self) -> str:
        return self._recipes.table_name

    async def list(self) -> List[Recette]:
        """
        Retrieve every recipe as a Recette.

        Returns:
            List of Recette, [] for an empty table

        Raises:
            BackendError: If the backend query fails
        """
        statement = select(Recipe.id, Recipe.name, Recipe.created_at)
        try:
            async with session_scope(self._session_factory) as session:
                result = await session.execute(statement)
                recettes = [Recette.from_row(row) for row in result.all()]
        except SQLAlchemyError as e:
            log_operation(
                logger,
                operation="list",
                outcome="error",
                level=logging.ERROR,
                table=self.table_name,
                error=str(e),
            )
            raise BackendError(f"Failed to retrieve {self.table_name}", e) from e

        log_operation(
            logger,
            operation="list",
            outcome="success",
            level=logging.DEBUG,
            table=self.table_name,
            count=len(recettes),
        )
        return recettes

    async def get(self, entity_id: int) -> Optional[Recette]:
        """Retrieve one recipe as a Recette, or None."""
        recipe = await self._recipes.get(entity_id)
        return Recette.from_row(recipe) if recipe is not None else None

    async def insert(self, entity: Recette) -> Optional[Recette]:
        """
        Insert a recipe with just a name.

        Returns:
            Recette with the backend-assigned id and created_at, or None

        Raises:
            BackendError: If the backend rejects the insert
        """
        created = await self._recipes.insert(Recipe(name=entity.name))
        return Recette.from_row(created) if created is not None else None
