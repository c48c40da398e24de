"""HTTP client for the todo API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from src.todo import TodoItem

logger = logging.getLogger(__name__)


class TodoApiError(Exception):
    """A request to the todo API failed.

    ``status_code`` is None when no HTTP response was received.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TodoClient:
    """
    Thin wrapper around the todo REST endpoints

    Any object with a ``requests``-style ``request(method, url, json=, timeout=)``
    method can be passed as ``session`` (FastAPI's TestClient works too).
    """

    def __init__(
        self,
        api_url: str = "http://localhost:3001",
        timeout: float = 5.0,
        session: Any = None,
    ):
        """
        Args:
            api_url: base URL of the server
            timeout: per-request timeout in seconds
            session: HTTP session; a new requests.Session when omitted
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.api_url}{path}"
        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TodoApiError(str(e)) from e

        try:
            body = response.json()
        except ValueError:
            body = None
            if response.status_code < 400:
                logger.warning(f"{method} {url} returned a non-JSON body")
                raise TodoApiError("Invalid response from server", status_code=response.status_code)

        if response.status_code >= 400:
            message = body.get("error") if isinstance(body, dict) else None
            message = message or f"HTTP {response.status_code}"
            logger.warning(f"{method} {url} -> {response.status_code}: {message}")
            raise TodoApiError(message, status_code=response.status_code)
        return body

    @staticmethod
    def _to_item(data: Any) -> TodoItem:
        try:
            return TodoItem.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise TodoApiError(f"Malformed todo in response: {data!r:.80}") from e

    def health(self) -> bool:
        """Return True if the server reports ``status: ok``."""
        body = self._request("GET", "/health")
        return isinstance(body, dict) and body.get("status") == "ok"

    def list_todos(self) -> List[TodoItem]:
        body = self._request("GET", "/api/todos")
        if not isinstance(body, list):
            raise TodoApiError("Malformed todo list in response")
        return [self._to_item(item) for item in body]

    def create_todo(self, title: str) -> TodoItem:
        return self._to_item(self._request("POST", "/api/todos", {"title": title}))

    def update_todo(self, todo_id: int, title: Optional[str] = None) -> TodoItem:
        payload: Dict[str, Any] = {}
        if title is not None:
            payload["title"] = title
        return self._to_item(self._request("PUT", f"/api/todos/{todo_id}", payload))

    def toggle_todo(self, todo_id: int) -> TodoItem:
        return self._to_item(self._request("PATCH", f"/api/todos/{todo_id}/toggle"))

    def delete_todo(self, todo_id: int) -> str:
        """Delete a todo and return the server's confirmation message."""
        body = self._request("DELETE", f"/api/todos/{todo_id}")
        return body.get("message", "") if isinstance(body, dict) else ""
