"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from functools import lru_cache

from src.todo import TodoItem, TodoRepository
from src.todo_app.config import Config, load_config
from src.todo_app.logger import setup_logger

from .schemas import TodoResponse

config = load_config()
setup_logger(log_level=config.log_level, log_file=config.log_file)


def get_config() -> Config:
    """Configuration loaded at import time."""
    return config


@lru_cache(maxsize=1)
def get_todo_repository() -> TodoRepository:
    """Singleton TodoRepository."""
    return TodoRepository(strict_titles=config.todo.strict_titles)


def serialize_todo(item: TodoItem) -> TodoResponse:
    """Convert domain TodoItem to API response."""
    return TodoResponse(
        id=item.id,
        title=item.title,
        completed=item.completed,
        created_at=item.created_at,
    )
