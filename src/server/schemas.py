"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TodoResponse(BaseModel):
    """Serialized todo item."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    completed: bool
    created_at: str = Field(..., alias="createdAt", description="ISO-8601 UTC timestamp")


class TodoCreateRequest(BaseModel):
    """Request body for creating todo.

    ``title`` is optional here so that a missing title is reported with the
    same message as a blank one.
    """

    title: Optional[str] = Field(default=None, description="Todo title (required, non-blank)")


class TodoUpdateRequest(BaseModel):
    """Request body for updating todo."""

    title: Optional[str] = Field(default=None, description="New title; omitted keeps the current one")


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    details: Optional[List[Dict[str, Any]]] = None
