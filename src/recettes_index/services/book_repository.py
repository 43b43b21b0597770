"""
Book Repository - data access for the books table.

Books come back with their authors loaded.
"""

from typing import List

from sqlalchemy import select

from recettes_index.models import Book
from recettes_index.services.repository import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for cookbooks."""

    model = Book

    async def search_by_title(self, term: str) -> List[Book]:
        """Books whose title contains ``term`` (case-insensitive), ordered by id."""
        statement = (
            select(Book).where(Book.title.icontains(term, autoescape=True)).order_by(Book.id)
        )
        return await self._fetch_all("search_by_title", statement, term=term)
