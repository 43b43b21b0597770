"""Service layer logging utilities.

Provides structured logging for repository operations so every call logs
the same way.

Usage:
    from recettes_index.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="list",
        outcome="success",
        table="recettes",
        count=12,
    )
"""

import logging
from typing import Any

LOGGER_PREFIX = "recettes_index.services"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger for a service module.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger named 'recettes_index.services.<module>'

    Example:
        >>> get_service_logger("recettes_index.services.recipe_repository").name
        'recettes_index.services.recipe_repository'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The message is "<operation>: <outcome>"; the context goes through
    ``extra`` so handlers can pick the fields up.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "list", "insert", "link_authors")
        outcome: Outcome description (e.g., "success", "not_created", "error")
        level: Log level (default: INFO)
        **context: Additional context fields. Common fields:
            - table: Table the operation ran against
            - count: Number of rows returned or written
            - entity_id: Primary key involved
            - error: Error message if outcome is "error"
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
