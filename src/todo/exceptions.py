"""Exceptions raised by the todo store.

The HTTP layer maps ``InvalidTodoError`` to 400 and
``TodoNotFoundError`` to 404.
"""


class TodoError(Exception):
    """Base class for todo store errors."""

    pass


class InvalidTodoError(TodoError):
    """A required field is missing or blank."""

    pass


class TodoNotFoundError(TodoError):
    """No record matches the requested id."""

    def __init__(self, todo_id: object, message: str = "Todo not found"):
        super().__init__(message)
        self.todo_id = todo_id
