"""
Database models package.

This package contains the SQLAlchemy ORM models and the simplified
Recette projection.
"""

from .base import Base, BaseModel
from .recipe import Recipe
from .book import Book
from .author import Author
from .book_author import BookAuthor
from .recette import Recette

__all__ = [
    "Base",
    "BaseModel",
    # Mapped models
    "Recipe",
    "Book",
    "Author",
    "BookAuthor",
    # Projections
    "Recette",
]
