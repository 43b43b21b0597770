"""
Author model for cookbook authors.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from recettes_index.utils.constants import MAX_NAME_LENGTH, TABLE_AUTHOR, TABLE_BOOK_AUTHOR

from .base import BaseModel


class Author(BaseModel):
    """
    Author model.

    Attributes:
        id: Primary key, assigned by the backend
        first_name: First name
        last_name: Optional last name
        books: Books linked through books_authors, ordered by book id.
            Each book arrives with its own authors loaded.
    """

    __tablename__ = TABLE_AUTHOR

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(MAX_NAME_LENGTH), nullable=False, default="")
    last_name = Column(String(MAX_NAME_LENGTH), nullable=True)

    # Relationships
    books = relationship(
        "Book",
        secondary=TABLE_BOOK_AUTHOR,
        back_populates="authors",
        order_by="Book.id",
        lazy="selectin",
        join_depth=2,
    )

    @property
    def full_name(self) -> str:
        """First and last name, or just the first name when there is no last name."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def __repr__(self) -> str:
        """String representation of author."""
        return f"Author(id={self.id}, full_name='{self.full_name}')"
