"""Entry point for ``python -m src.todo_client``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
