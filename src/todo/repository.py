from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, Iterable, Iterator

from .exceptions import InvalidTodoError, TodoNotFoundError
from .models import TodoItem

UNSET = object()

TITLE_REQUIRED = "Title is required"

logger = logging.getLogger(__name__)


class TodoRepository:
    """Process-local todo store.

    Records live in a dict keyed by id, which keeps insertion order for
    listing and gives constant-time lookup. Ids come from a counter owned by
    the instance and are never reused, even after a delete.
    """

    def __init__(self, strict_titles: bool = False):
        """
        Args:
            strict_titles: validate and trim titles on update as well as on create
        """
        self.strict_titles = strict_titles
        self._items: Dict[int, TodoItem] = {}
        self._next_id: Iterator[int] = count(1)
        self._lock = threading.Lock()

    @staticmethod
    def _now() -> str:
        # Same shape as JavaScript's Date.toISOString()
        now = datetime.now(timezone.utc)
        return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @staticmethod
    def _clean_title(title: Any) -> str:
        if not isinstance(title, str) or not title.strip():
            raise InvalidTodoError(TITLE_REQUIRED)
        return title.strip()

    def _require(self, todo_id: int) -> TodoItem:
        item = self._items.get(todo_id)
        if item is None:
            raise TodoNotFoundError(todo_id)
        return item

    def __len__(self) -> int:
        return len(self._items)

    def list(self) -> list[TodoItem]:
        with self._lock:
            return [replace(item) for item in self._items.values()]

    def get(self, todo_id: int) -> TodoItem:
        with self._lock:
            return replace(self._require(todo_id))

    def create(self, title: Any) -> TodoItem:
        clean = self._clean_title(title)
        with self._lock:
            item = TodoItem(
                id=next(self._next_id),
                title=clean,
                completed=False,
                created_at=self._now(),
            )
            self._items[item.id] = item
        logger.info("Created todo %d", item.id)
        return replace(item)

    def update(self, todo_id: int, *, title: Any = UNSET) -> TodoItem:
        """Replace the title of an existing record.

        ``UNSET`` and ``None`` both leave the title untouched. Without
        ``strict_titles`` the new title is stored as given.
        """
        if title is not UNSET and title is not None and self.strict_titles:
            title = self._clean_title(title)
        with self._lock:
            item = self._require(todo_id)
            if title is not UNSET and title is not None:
                item.title = title
                logger.info("Updated todo %d", todo_id)
            return replace(item)

    def toggle(self, todo_id: int) -> TodoItem:
        with self._lock:
            item = self._require(todo_id)
            item.completed = not item.completed
        logger.info("Toggled todo %d (completed=%s)", todo_id, item.completed)
        return replace(item)

    def delete(self, todo_id: int) -> TodoItem:
        with self._lock:
            item = self._require(todo_id)
            del self._items[todo_id]
        logger.info("Deleted todo %d", todo_id)
        return item

    def clear(self) -> None:
        """Drop every record and restart the id counter."""
        with self._lock:
            self._items.clear()
            self._next_id = count(1)
        logger.debug("Todo store cleared")

    def bulk_create(self, titles: Iterable[str]) -> list[TodoItem]:
        """Seeding helper for tests and demos."""
        return [self.create(title) for title in titles]

