"""
Service layer for Recettes Index.

Repositories wrap the SQLAlchemy async session factory (the backend
client) and expose list/insert style operations per entity.
"""

from .exceptions import BackendError, ServiceError, ValidationError
from .recipe_repository import RecipeRepository
from .recette_repository import RecetteRepository
from .book_repository import BookRepository
from .author_repository import AuthorRepository
from .book_author_repository import BookAuthorRepository

__all__ = [
    "ServiceError",
    "BackendError",
    "ValidationError",
    "RecipeRepository",
    "RecetteRepository",
    "BookRepository",
    "AuthorRepository",
    "BookAuthorRepository",
]
