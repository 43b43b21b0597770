"""
Author Repository - data access for the authors table.

Authors come back with their books loaded.
"""

from typing import List

from sqlalchemy import or_, select

from recettes_index.models import Author
from recettes_index.services.repository import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository for cookbook authors."""

    model = Author

    async def search_by_name(self, term: str) -> List[Author]:
        """
        Find authors whose first or last name contains a term, ignoring case.

        An author matching on both names is returned once.

        Returns:
            Matching Author instances ordered by id, [] if none match
        """
        statement = (
            select(Author)
            .where(
                or_(
                    Author.first_name.icontains(term, autoescape=True),
                    Author.last_name.icontains(term, autoescape=True),
                )
            )
            .order_by(Author.id)
        )
        return await self._fetch_all("search_by_name", statement, term=term)
