"""
Recipe model for tracked recipes.

A recipe may come from a cookbook (book_id + page) or stand alone; the
book association is a left-outer join so standalone recipes still load.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from recettes_index.utils.constants import (
    MAX_NAME_LENGTH,
    RATING_MAX,
    RATING_MIN,
    TABLE_RECIPE,
)

from .base import BaseModel


class Recipe(BaseModel):
    """
    Recipe model.

    Attributes:
        id: Primary key, assigned by the backend
        name: Recipe name (required)
        rating: Star rating, 1 to 5 when present
        notes: Optional notes or modifications
        book_id: Optional foreign key to Book
        book_page: Page in the book (column "page")
        book: Associated Book, or None
    """

    __tablename__ = TABLE_RECIPE

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Advisory constraints live in Column.info, see utils.validators
    name = Column(String(MAX_NAME_LENGTH), nullable=False, info={"required": True})
    rating = Column(Integer, nullable=True, info={"range": (RATING_MIN, RATING_MAX)})
    notes = Column(Text, nullable=True)

    # Cookbook reference
    book_id = Column(Integer, ForeignKey("books.id", ondelete="SET NULL"), nullable=True)
    book_page = Column("page", Integer, nullable=True)

    # Relationships
    book = relationship("Book", lazy="joined", innerjoin=False)

    # Indexes
    __table_args__ = (
        Index("idx_recettes_name", "name"),
        Index("idx_recettes_rating", "rating"),
        Index("idx_recettes_book_id", "book_id"),
        Index("idx_recettes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        """String representation of recipe."""
        return f"Recipe(id={self.id}, name='{self.name}', rating={self.rating})"
