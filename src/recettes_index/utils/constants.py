"""
Constants for the Recettes Index data-access layer.

This module defines:
- Application metadata
- Table names
- Advisory validation limits
- Error messages
"""

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Recettes Index"
APP_VERSION = "0.1.0"
DATABASE_VERSION = "1.0"

# ============================================================================
# Database Constants
# ============================================================================

# Database file name (SQLite backend)
DATABASE_FILENAME = "recettes_index.db"

# Table names
TABLE_RECIPE = "recettes"
TABLE_BOOK = "books"
TABLE_AUTHOR = "authors"
TABLE_BOOK_AUTHOR = "books_authors"

# Environment variables
ENV_ENVIRONMENT = "RECETTES_INDEX_ENV"
ENV_DATABASE_URL = "RECETTES_INDEX_DATABASE_URL"
ENV_SQL_ECHO = "RECETTES_INDEX_SQL_ECHO"

# ============================================================================
# Validation Constants
# ============================================================================

# Rating is a 1-5 star scale
RATING_MIN = 1
RATING_MAX = 5

# String length limits
MAX_NAME_LENGTH = 200
MAX_TITLE_LENGTH = 300
MAX_NOTES_LENGTH = 2000

# ============================================================================
# Error Messages
# ============================================================================

ERROR_REQUIRED_FIELD = "This field is required"
ERROR_INVALID_NUMBER = "Must be a valid number"
ERROR_INVALID_POSITIVE = "Must be a positive number"
