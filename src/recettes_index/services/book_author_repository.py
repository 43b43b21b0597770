"""
BookAuthor Repository - manages the many-to-many link between books and authors.

Rows are only ever inserted; the backend enforces that both ids exist.
"""

from typing import Iterable, List, Union

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from recettes_index.models import Author, BookAuthor
from recettes_index.utils.constants import ERROR_INVALID_POSITIVE

from recettes_index.services.exceptions import BackendError, ValidationError
from recettes_index.services.logging_utils import get_service_logger, log_operation
from recettes_index.services.repository import BaseRepository

logger = get_service_logger(__name__)


def _author_id(author: Union[Author, int]) -> int:
    return author.id if isinstance(author, Author) else author


class BookAuthorRepository(BaseRepository[BookAuthor]):
    """Repository for books_authors junction rows."""

    model = BookAuthor

    async def link_authors(
        self, book_id: int, authors: Iterable[Union[Author, int]]
    ) -> List[BookAuthor]:
        """
        Link several authors to one book in a single unit of work.

        Args:
            book_id: Book to link
            authors: Author instances or author ids

        Returns:
            Created BookAuthor rows, [] when no authors were given

        Raises:
            ValidationError: If book_id or an author id is not a positive integer
            BackendError: If the backend rejects the rows (e.g. unknown ids)
        """
        author_ids = [_author_id(author) for author in authors]
        if not author_ids:
            return []

        errors = []
        if book_id is None or book_id <= 0:
            errors.append(f"Book ID: {ERROR_INVALID_POSITIVE}")
        if any(author_id is None or author_id <= 0 for author_id in author_ids):
            errors.append(f"Author ID: {ERROR_INVALID_POSITIVE}")
        if errors:
            raise ValidationError(errors)

        links = [BookAuthor(book_id=book_id, author_id=author_id) for author_id in author_ids]

        try:
            async with self._session_scope() as session:
                session.add_all(links)
                await session.flush()
        except SQLAlchemyError as e:
            self._log_failure("link_authors", e, book_id=book_id)
            raise BackendError(f"Failed to link authors to book {book_id}", e) from e

        log_operation(
            logger,
            operation="link_authors",
            outcome="success",
            table=self.table_name,
            book_id=book_id,
            count=len(links),
        )
        return links

    async def authors_for_book(self, book_id: int) -> List[Author]:
        """
        Retrieve the authors of one book through the junction table.

        Returns:
            List of Author instances ordered by id, [] if none are linked
        """
        statement = (
            select(Author)
            .join(BookAuthor, BookAuthor.author_id == Author.id)
            .where(BookAuthor.book_id == book_id)
            .order_by(Author.id)
        )
        return await self._fetch_all("authors_for_book", statement, book_id=book_id)
