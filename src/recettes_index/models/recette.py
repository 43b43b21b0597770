"""
Recette: simplified recipe projection.

Only id, name and creation date of a row in the recettes table, for
callers that do not deal with ratings, notes or books.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Recette:
    """
    Reduced view of a recipe row.

    Attributes:
        name: Recipe name
        id: Primary key (None until inserted)
        created_at: Creation timestamp (None until inserted)
    """

    name: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row: Any) -> "Recette":
        """Build from a result row or a Recipe instance exposing id, name and created_at."""
        return cls(id=row.id, name=row.name, created_at=row.created_at)

    def to_dict(self) -> Dict[str, Any]:
        """Column-keyed dictionary with the timestamp as ISO string."""
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
