"""TodoClient tests against a mocked session and the real app."""

from unittest.mock import MagicMock

import pytest
import requests

from src.todo import TodoItem
from src.todo_client import TodoApiError, TodoClient


def make_response(status_code, body):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock()


class TestTodoClientMocked:
    """Request building and error mapping"""

    def test_list_todos_decodes_records(self, session):
        session.request.return_value = make_response(
            200,
            [{"id": 1, "title": "Buy milk", "completed": False, "createdAt": "2026-01-01T00:00:00.000Z"}],
        )
        client = TodoClient(api_url="http://api.local/", timeout=2.5, session=session)

        todos = client.list_todos()

        assert todos == [TodoItem(1, "Buy milk", False, "2026-01-01T00:00:00.000Z")]
        session.request.assert_called_once_with(
            "GET", "http://api.local/api/todos", json=None, timeout=2.5
        )

    def test_update_without_title_sends_empty_body(self, session):
        session.request.return_value = make_response(
            200, {"id": 3, "title": "Same", "completed": True, "createdAt": "t"}
        )
        client = TodoClient(session=session)

        client.update_todo(3)

        args, kwargs = session.request.call_args
        assert args == ("PUT", "http://localhost:3001/api/todos/3")
        assert kwargs["json"] == {}

    def test_delete_returns_message(self, session):
        session.request.return_value = make_response(200, {"message": "Todo deleted"})
        client = TodoClient(session=session)

        assert client.delete_todo(1) == "Todo deleted"
        assert session.request.call_args[0][0] == "DELETE"

    def test_error_response_raises_with_server_message(self, session):
        session.request.return_value = make_response(404, {"error": "Todo not found"})
        client = TodoClient(session=session)

        with pytest.raises(TodoApiError) as excinfo:
            client.toggle_todo(999)

        assert excinfo.value.status_code == 404
        assert excinfo.value.message == "Todo not found"

    def test_error_without_json_body(self, session):
        response = make_response(502, None)
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response
        client = TodoClient(session=session)

        with pytest.raises(TodoApiError, match="HTTP 502"):
            client.list_todos()

    def test_non_json_success_body_raises(self, session):
        response = make_response(200, None)
        response.json.side_effect = ValueError("no json")
        session.request.return_value = response
        client = TodoClient(session=session)

        with pytest.raises(TodoApiError) as excinfo:
            client.list_todos()

        assert excinfo.value.status_code == 200
        assert excinfo.value.message == "Invalid response from server"

    @pytest.mark.parametrize(
        "method, body",
        [
            ("create_todo", {"id": 1}),
            ("list_todos", ["not", "a", "todo"]),
            ("list_todos", "text"),
        ],
    )
    def test_unexpected_body_shape_raises(self, session, method, body):
        session.request.return_value = make_response(200, body)
        client = TodoClient(session=session)
        args = ("x",) if method == "create_todo" else ()

        with pytest.raises(TodoApiError, match="Malformed"):
            getattr(client, method)(*args)

    def test_transport_error_has_no_status(self, session):
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        client = TodoClient(session=session)

        with pytest.raises(TodoApiError) as excinfo:
            client.health()

        assert excinfo.value.status_code is None


class TestTodoClientAgainstApp:
    """End-to-end through FastAPI's TestClient"""

    def test_round_trip(self, todo_client):
        assert todo_client.health() is True

        created = todo_client.create_todo("Buy milk")
        assert created.id == 1
        assert created.completed is False

        assert todo_client.toggle_todo(created.id).completed is True
        assert todo_client.update_todo(created.id, "Buy bread").title == "Buy bread"
        assert [todo.title for todo in todo_client.list_todos()] == ["Buy bread"]
        assert todo_client.delete_todo(created.id) == "Todo deleted"
        assert todo_client.list_todos() == []

    def test_blank_title_is_rejected(self, todo_client):
        with pytest.raises(TodoApiError) as excinfo:
            todo_client.create_todo("   ")

        assert excinfo.value.status_code == 400
        assert excinfo.value.message == "Title is required"
