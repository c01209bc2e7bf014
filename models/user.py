"""
models/user.py
--------------
Domain model for a user record and its mapping to/from table rows.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional

from errors import MappingError


@dataclass(frozen=True)
class User:
    """
    Represents a single row of the users table.

    Attributes:
        email: Contact address (not enforced unique by this layer).
        first_name: Given name.
        last_name: Family name.
        username: Login handle.
        id: Store-assigned primary key (None for a not yet persisted record).
    """
    email: str
    first_name: str
    last_name: str
    username: str
    id: Optional[int] = None

    # Column order for every statement template and parameter binding.
    FIELDS: ClassVar[tuple[str, ...]] = ("email", "first_name", "last_name", "username")

    @classmethod
    def sql_table_fields(cls) -> str:
        """Comma-separated column list selected back from the table."""
        return ", ".join(("id",) + cls.FIELDS)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "User":
        """
        Build a stored record from a row, looking columns up by name.

        Raises:
            MappingError: If a column is missing or has an incompatible type.
        """
        values = {}
        for name in cls.FIELDS:
            try:
                value = row[name]
            except KeyError as exc:
                raise MappingError(f"row is missing column '{name}'") from exc
            if not isinstance(value, str):
                raise MappingError(
                    f"column '{name}' must be text, got {type(value).__name__}"
                )
            values[name] = value

        try:
            user_id = row["id"]
        except KeyError as exc:
            raise MappingError("row is missing column 'id'") from exc
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise MappingError(f"column 'id' must be an integer, got {type(user_id).__name__}")

        return cls(id=user_id, **values)

    def params(self) -> dict[str, str]:
        """Named statement parameters, keyed by column."""
        return {name: getattr(self, name) for name in self.FIELDS}

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation, identifier first."""
        return {"id": self.id, **self.params()}

    def __str__(self) -> str:
        return f"#{self.id} {self.username} <{self.email}>"
