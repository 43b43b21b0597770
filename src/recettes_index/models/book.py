"""
Book model for cookbooks.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from recettes_index.utils.constants import MAX_TITLE_LENGTH, TABLE_BOOK, TABLE_BOOK_AUTHOR

from .base import BaseModel


class Book(BaseModel):
    """
    Book model representing a cookbook.

    Attributes:
        id: Primary key, assigned by the backend
        title: Book title
        authors: Authors linked through books_authors, ordered by author id.
            Each author arrives with its own books loaded.
    """

    __tablename__ = TABLE_BOOK

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(MAX_TITLE_LENGTH), nullable=False, default="")

    # Relationships
    authors = relationship(
        "Author",
        secondary=TABLE_BOOK_AUTHOR,
        back_populates="books",
        order_by="Author.id",
        lazy="selectin",
        join_depth=2,
    )

    def __repr__(self) -> str:
        """String representation of book."""
        return f"Book(id={self.id}, title='{self.title}')"
