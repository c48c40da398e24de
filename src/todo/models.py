from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(slots=True)
class TodoItem:
    """In-memory todo record."""

    id: int
    title: str
    completed: bool
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire representation (camelCase keys)."""
        data = asdict(self)
        data["createdAt"] = data.pop("created_at")
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TodoItem":
        """Build a record from its wire representation."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            completed=bool(data.get("completed", False)),
            created_at=data.get("createdAt") or data.get("created_at") or "",
        )
