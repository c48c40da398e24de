"""Client view for the todo API.

``TodoClient`` wraps the HTTP endpoints, ``TodoView`` keeps the cached
projection and renders it, ``cli`` drives both from a terminal.
"""

from .client import TodoApiError, TodoClient
from .view import TodoView, ViewStatus

__all__ = [
    "TodoApiError",
    "TodoClient",
    "TodoView",
    "ViewStatus",
]
