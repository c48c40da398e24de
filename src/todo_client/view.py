"""Client-side todo view.

``TodoView`` keeps a cached projection of the server's collection and a
small fetch state machine::

    IDLE -> LOADING -> SUCCESS
                    -> ERROR

Every mutation is followed by a refetch so the projection converges on the
server state. Blocking HTTP calls run in worker threads, so awaiting a view
operation never blocks the event loop and concurrent operations are not
cancelled by each other.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, List, Optional

from src.todo import TodoItem

from .client import TodoApiError, TodoClient

logger = logging.getLogger(__name__)

HEADING = "TODO App"
EMPTY_MESSAGE = "No todos yet! Add one above."
LOADING_MESSAGE = "Loading..."


class ViewStatus(str, Enum):
    """Fetch state of the view."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class TodoView:
    """Renders the todo list and issues mutations through a TodoClient."""

    def __init__(self, client: TodoClient):
        self.client = client
        self.status = ViewStatus.IDLE
        self.todos: List[TodoItem] = []
        self.error: Optional[str] = None
        self._loaded = False
        # Sequence numbers of the last fetch started and the last one applied
        self._fetch_seq = 0
        self._applied_seq = 0

    @property
    def items_left(self) -> int:
        return sum(1 for todo in self.todos if not todo.completed)

    @property
    def completed_count(self) -> int:
        return sum(1 for todo in self.todos if todo.completed)

    async def load(self) -> bool:
        """Fetch the collection. Returns False on failure.

        A failed fetch keeps the previous projection. When fetches overlap,
        a result that arrives after a newer one has been applied is dropped.
        """
        self._fetch_seq += 1
        seq = self._fetch_seq
        self.status = ViewStatus.LOADING
        try:
            todos = await asyncio.to_thread(self.client.list_todos)
        except TodoApiError as exc:
            if seq < self._applied_seq:
                return True
            self._fail(exc)
            return False
        if seq < self._applied_seq:
            logger.debug("Dropping stale fetch %d", seq)
            return True
        self._applied_seq = seq
        self.todos = todos
        self.error = None
        self._loaded = True
        self.status = ViewStatus.SUCCESS
        return True

    async def _mutate(self, action: Callable[..., Any], *args: Any) -> bool:
        self.status = ViewStatus.LOADING
        try:
            await asyncio.to_thread(action, *args)
        except TodoApiError as exc:
            self._fail(exc)
            return False
        return await self.load()

    def _fail(self, exc: TodoApiError) -> None:
        logger.warning("Todo request failed: %s", exc.message)
        self.error = exc.message
        self.status = ViewStatus.ERROR

    async def add(self, title: str) -> bool:
        return await self._mutate(self.client.create_todo, title)

    async def rename(self, todo_id: int, title: Optional[str]) -> bool:
        return await self._mutate(self.client.update_todo, todo_id, title)

    async def toggle(self, todo_id: int) -> bool:
        return await self._mutate(self.client.toggle_todo, todo_id)

    async def remove(self, todo_id: int) -> bool:
        return await self._mutate(self.client.delete_todo, todo_id)

    def render(self, include_error: bool = True) -> str:
        """Plain-text rendering of the current state.

        ``include_error=False`` leaves out the trailing error line.
        """
        lines = [HEADING, ""]
        if self.status is ViewStatus.LOADING and not self._loaded:
            lines.append(LOADING_MESSAGE)
        elif not self.todos:
            if self._loaded:
                lines.append(EMPTY_MESSAGE)
        else:
            for todo in self.todos:
                mark = "x" if todo.completed else " "
                lines.append(f"[{mark}] {todo.id}. {todo.title}")

        if self._loaded:
            left = self.items_left
            noun = "item" if left == 1 else "items"
            lines.append("")
            lines.append(f"{left} {noun} left | {self.completed_count} completed")

        if include_error and self.status is ViewStatus.ERROR and self.error:
            lines.append(f"Error: {self.error}")
        return "\n".join(lines)
