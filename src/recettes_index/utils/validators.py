"""
Advisory validation for Recettes Index models.

The models carry their constraints as column metadata (``Column.info``):

- ``{"required": True}``: value must be a non-empty string
- ``{"range": (min, max)}``: value, when present, must be an int in range

Nothing in the repositories calls these functions; they are consumed by
callers (forms, importers) that want to check data before inserting it.
"""

from typing import Any, List, Optional, Tuple

from .constants import (
    ERROR_INVALID_NUMBER,
    ERROR_REQUIRED_FIELD,
    MAX_NAME_LENGTH,
    MAX_NOTES_LENGTH,
    RATING_MAX,
    RATING_MIN,
)


def validate_required_string(value: Optional[str], field_name: str = "Field") -> Tuple[bool, str]:
    """
    Validate that a string field is not empty.

    Args:
        value: The string value to validate
        field_name: Name of the field for error messages

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value is None or (isinstance(value, str) and value.strip() == ""):
        return False, f"{field_name}: {ERROR_REQUIRED_FIELD}"
    return True, ""


def validate_string_length(
    value: Optional[str], max_length: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a string doesn't exceed maximum length.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if value and len(value) > max_length:
        return False, f"{field_name}: Must be {max_length} characters or less"
    return True, ""


def validate_int_range(
    value: Any, min_value: int, max_value: int, field_name: str = "Field"
) -> Tuple[bool, str]:
    """
    Validate that a value is an integer within [min_value, max_value].

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False, f"{field_name}: {ERROR_INVALID_NUMBER}"
    if value < min_value or value > max_value:
        return False, f"{field_name} must be between {min_value} and {max_value}"
    return True, ""


def _field_label(key: str) -> str:
    return key.replace("_", " ").title()


def validate_model(instance: Any) -> Tuple[bool, List[str]]:
    """
    Check a model instance against the constraints declared in column info.

    Args:
        instance: Any mapped model instance

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    for attr in instance.__mapper__.column_attrs:
        info = attr.columns[0].info
        if not info:
            continue

        value = getattr(instance, attr.key)
        label = _field_label(attr.key)

        if info.get("required"):
            is_valid, error = validate_required_string(value, label)
            if not is_valid:
                errors.append(error)

        value_range = info.get("range")
        if value_range is not None and value is not None:
            is_valid, error = validate_int_range(value, value_range[0], value_range[1], label)
            if not is_valid:
                errors.append(error)

    return len(errors) == 0, errors


def validate_recipe_data(data: dict) -> Tuple[bool, list]:
    """
    Validate all fields for a recipe given as a plain dictionary.

    Args:
        data: Dictionary containing recipe fields

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    is_valid, error = validate_required_string(data.get("name"), "Name")
    if not is_valid:
        errors.append(error)
    else:
        is_valid, error = validate_string_length(data.get("name"), MAX_NAME_LENGTH, "Name")
        if not is_valid:
            errors.append(error)

    if data.get("rating") is not None:
        is_valid, error = validate_int_range(data["rating"], RATING_MIN, RATING_MAX, "Rating")
        if not is_valid:
            errors.append(error)

    if data.get("notes"):
        is_valid, error = validate_string_length(data.get("notes"), MAX_NOTES_LENGTH, "Notes")
        if not is_valid:
            errors.append(error)

    # Page only makes sense for a recipe taken from a book
    if data.get("page") is not None and data.get("book_id") is None:
        errors.append("Page: Requires a book")

    return len(errors) == 0, errors


def sanitize_string(value: Optional[str]) -> Optional[str]:
    """
    Strip whitespace, mapping blank strings to None.

    Keeps optional text columns absent instead of storing "".
    """
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None
