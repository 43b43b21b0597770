"""
BookAuthor junction model.

Each row is one edge of the many-to-many relationship between Book and
Author. Book.authors and Author.books read through this table.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer

from recettes_index.utils.constants import TABLE_BOOK_AUTHOR

from .base import BaseModel


class BookAuthor(BaseModel):
    """
    Junction table linking books to authors.

    Attributes:
        book_id: Foreign key to Book (part of the primary key)
        author_id: Foreign key to Author (part of the primary key)
    """

    __tablename__ = TABLE_BOOK_AUTHOR

    book_id = Column(Integer, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True)
    author_id = Column(Integer, ForeignKey("authors.id", ondelete="CASCADE"), primary_key=True)

    # Indexes
    __table_args__ = (
        Index("idx_books_authors_book_id", "book_id"),
        Index("idx_books_authors_author_id", "author_id"),
    )

    def __repr__(self) -> str:
        """String representation of the association."""
        return f"BookAuthor(book_id={self.book_id}, author_id={self.author_id})"
