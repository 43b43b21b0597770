"""Service layer exception classes for Recettes Index.

Exception Hierarchy:
    ServiceError (base)
    ├── BackendError
    └── ValidationError
"""

from typing import List, Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class BackendError(ServiceError):
    """Raised when the backend client fails.

    Covers transport failures, constraint violations and query errors. The
    client's exception is kept unchanged on ``original_error``.

    Args:
        message: What the repository was doing
        original_error: Exception raised by the backend client

    Example:
        >>> raise BackendError("Failed to retrieve recettes", err)
        BackendError: Backend error: Failed to retrieve recettes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.original_error = original_error
        super().__init__(f"Backend error: {message}")


class ValidationError(ServiceError):
    """Raised when data validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Validation failed: {error_msg}")
