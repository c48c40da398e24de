"""In-memory todo store shared by the HTTP server and the client view."""

from .exceptions import InvalidTodoError, TodoError, TodoNotFoundError
from .models import TodoItem
from .repository import TITLE_REQUIRED, TodoRepository, UNSET

__all__ = [
    "InvalidTodoError",
    "TITLE_REQUIRED",
    "TodoError",
    "TodoItem",
    "TodoNotFoundError",
    "TodoRepository",
    "UNSET",
]
