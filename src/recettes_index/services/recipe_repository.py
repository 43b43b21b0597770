"""
Recipe Repository - data access for the recettes table.

Recipes load their book with a left-outer join, so a recipe without a
book comes back with ``book`` set to None.
"""

from typing import List, Optional

from sqlalchemy import select

from recettes_index.models import BookAuthor, Recipe
from recettes_index.services.repository import BaseRepository
from recettes_index.utils.constants import RATING_MAX, RATING_MIN


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for full recipe rows."""

    model = Recipe

    async def search(self, term: str, rating: Optional[int] = None) -> List[Recipe]:
        """
        Find recipes whose name contains a term, ignoring case.

        Args:
            term: Text to look for; wildcard characters match literally
            rating: Only keep recipes with this rating. Values outside the
                rating scale are ignored.

        Returns:
            Matching Recipe instances ordered by id, [] if none match
        """
        statement = select(Recipe).where(Recipe.name.icontains(term, autoescape=True))
        if rating is not None and RATING_MIN <= rating <= RATING_MAX:
            statement = statement.where(Recipe.rating == rating)

        return await self._fetch_all(
            "search", statement.order_by(Recipe.id), term=term, rating=rating
        )

    async def list_by_book(self, book_id: int) -> List[Recipe]:
        """
        Retrieve the recipes taken from one book.

        Returns:
            List of Recipe instances, [] if the book has none
        """
        statement = select(Recipe).where(Recipe.book_id == book_id)
        return await self._fetch_all("list_by_book", statement, book_id=book_id)

    async def list_by_author(self, author_id: int) -> List[Recipe]:
        """
        Retrieve the recipes from every book written by one author.

        Returns:
            List of Recipe instances, [] if the author has none
        """
        statement = (
            select(Recipe)
            .join(BookAuthor, BookAuthor.book_id == Recipe.book_id)
            .where(BookAuthor.author_id == author_id)
        )
        return await self._fetch_all("list_by_author", statement, author_id=author_id)
