"""
Base model class for all database models.

Provides common functionality and fields for all models:
- Creation timestamp (created_at)
- Column-keyed serialization (to_dict, from_dict)
- SQLAlchemy declarative base

Primary keys are declared on each model, since the junction table uses a
composite key.
"""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import Column, DateTime, func, inspect
from sqlalchemy.orm import declarative_base


# Create the declarative base for all models
Base = declarative_base()


class BaseModel(Base):
    """
    Abstract base model with common fields and methods.

    All models inherit:
    - created_at: Timestamp when the row was created
    - to_dict(): Convert model to a dictionary keyed by column name
    - from_dict(): Build a transient instance from such a dictionary
    """

    __abstract__ = True

    # Server-assigned; eager_defaults reads it back in the INSERT itself
    created_at = Column(DateTime, nullable=False, server_default=func.now())

    __mapper_args__ = {"eager_defaults": True}

    def to_dict(self, include_relationships: bool = False) -> Dict[str, Any]:
        """
        Convert model instance to dictionary.

        Keys are column names, not attribute names (``book_page`` is
        written as ``page``). Relationships that were not loaded are left
        out rather than triggering a lazy load.

        Args:
            include_relationships: If True, include loaded related objects

        Returns:
            Dictionary representation of the model
        """
        result = {}

        for attr in self.__mapper__.column_attrs:
            value = getattr(self, attr.key)

            # Convert datetime to ISO format string
            if isinstance(value, datetime):
                value = value.isoformat()

            result[attr.columns[0].name] = value

        if include_relationships:
            unloaded = inspect(self).unloaded
            for relationship in self.__mapper__.relationships:
                rel_name = relationship.key
                if rel_name in unloaded:
                    continue

                rel_value = getattr(self, rel_name)

                if rel_value is None:
                    result[rel_name] = None
                elif isinstance(rel_value, list):
                    # Many-to-many relationship
                    result[rel_name] = [item.to_dict() for item in rel_value]
                else:
                    # Many-to-one relationship
                    result[rel_name] = rel_value.to_dict()

        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Build a transient instance from a dictionary keyed by column name.

        Unknown keys are ignored, missing keys stay None, and ISO strings
        in datetime columns are parsed back to datetimes.

        Args:
            data: Column-keyed values, e.g. a row returned by to_dict()

        Returns:
            New, unsaved model instance
        """
        values = {}
        for attr in cls.__mapper__.column_attrs:
            column = attr.columns[0]
            if column.name not in data:
                continue

            value = data[column.name]
            if isinstance(value, str) and isinstance(column.type, DateTime):
                value = datetime.fromisoformat(value)
            values[attr.key] = value

        return cls(**values)

    def __repr__(self) -> str:
        """String representation, e.g. "Book(id=1)"."""
        class_name = self.__class__.__name__
        attrs = []

        if hasattr(self, "id") and self.id is not None:
            attrs.append(f"id={self.id}")

        attrs_str = ", ".join(attrs)
        return f"{class_name}({attrs_str})"
