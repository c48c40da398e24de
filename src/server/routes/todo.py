"""Todo endpoints."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException

from src.todo import InvalidTodoError, TodoNotFoundError, TodoRepository, UNSET

from ..dependencies import get_todo_repository, serialize_todo
from ..schemas import (
    ErrorResponse,
    MessageResponse,
    TodoCreateRequest,
    TodoResponse,
    TodoUpdateRequest,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def parse_todo_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment ("12abc" -> 12).

    Returns None when the segment does not start with a number or the number
    is too long to convert.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        return None


def _resolve_id(raw: str) -> int:
    todo_id = parse_todo_id(raw)
    if todo_id is None:
        logger.warning("Unusable todo id: %.40r", raw)
        raise HTTPException(status_code=404, detail="Todo not found")
    return todo_id


def register_todo_routes(app: FastAPI) -> None:
    """Register todo CRUD endpoints."""

    not_found = {404: {"model": ErrorResponse}}

    @app.get("/api/todos", response_model=List[TodoResponse])
    async def list_todos(
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> List[TodoResponse]:
        """List todos in insertion order."""
        return [serialize_todo(todo) for todo in repo.list()]

    @app.post(
        "/api/todos",
        response_model=TodoResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse}},
    )
    async def create_todo(
        request: Optional[TodoCreateRequest] = None,
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> TodoResponse:
        """Create a new todo."""
        title = request.title if request else None
        try:
            todo = repo.create(title)
        except InvalidTodoError as exc:
            logger.warning("Rejected todo: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return serialize_todo(todo)

    @app.put(
        "/api/todos/{todo_id}",
        response_model=TodoResponse,
        responses={**not_found, 400: {"model": ErrorResponse}},
    )
    async def update_todo(
        todo_id: str,
        request: Optional[TodoUpdateRequest] = None,
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> TodoResponse:
        """Update an existing todo."""
        title = request.title if request and request.title is not None else UNSET
        try:
            todo = repo.update(_resolve_id(todo_id), title=title)
        except TodoNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except InvalidTodoError as exc:
            logger.warning("Rejected update of todo %s: %s", todo_id, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return serialize_todo(todo)

    @app.patch("/api/todos/{todo_id}/toggle", response_model=TodoResponse, responses=not_found)
    async def toggle_todo(
        todo_id: str,
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> TodoResponse:
        """Flip the completed flag of a todo."""
        try:
            todo = repo.toggle(_resolve_id(todo_id))
        except TodoNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return serialize_todo(todo)

    @app.delete("/api/todos/{todo_id}", response_model=MessageResponse, responses=not_found)
    async def delete_todo(
        todo_id: str,
        repo: TodoRepository = Depends(get_todo_repository),
    ) -> MessageResponse:
        """Delete a todo."""
        try:
            repo.delete(_resolve_id(todo_id))
        except TodoNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return MessageResponse(message="Todo deleted")
