#!/usr/bin/env python3
"""
Todo CLI - terminal front end for the todo API

Usage:
    python -m src.todo_client list [--format json|text]
    python -m src.todo_client add --title "Title" [--format json|text]
    python -m src.todo_client update --id ID [--title "New title"] [--format json|text]
    python -m src.todo_client toggle --id ID [--format json|text]
    python -m src.todo_client delete --id ID [--format json|text]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from src.todo_app.config import load_config

from .client import TodoClient
from .view import TodoView


def print_result(view: TodoView, output_format: str) -> int:
    """Print the view (or its records as JSON) and return the exit code."""
    if output_format == "json":
        print(json.dumps([todo.to_dict() for todo in view.todos], ensure_ascii=False))
    else:
        print(view.render(include_error=False))
    if view.error:
        print(f"Error: {view.error}", file=sys.stderr)
        return 1
    return 0


async def run_command(view: TodoView, args: argparse.Namespace) -> None:
    if args.command == "add":
        await view.add(args.title)
    elif args.command == "update":
        await view.rename(args.id, args.title)
    elif args.command == "toggle":
        await view.toggle(args.id)
    elif args.command == "delete":
        await view.remove(args.id)
    else:
        await view.load()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Todo CLI - talks to the todo API over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="Base URL of the todo API (default: client.api_url from config)",
    )

    format_parent = argparse.ArgumentParser(add_help=False)
    format_parent.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run", required=True)

    subparsers.add_parser("list", parents=[format_parent], help="Show all todos")

    parser_add = subparsers.add_parser("add", parents=[format_parent], help="Add a todo")
    parser_add.add_argument("--title", required=True, help="Todo title")

    parser_update = subparsers.add_parser("update", parents=[format_parent], help="Rename a todo")
    parser_update.add_argument("--id", type=int, required=True, help="Todo ID")
    parser_update.add_argument("--title", help="New title")

    parser_toggle = subparsers.add_parser(
        "toggle", parents=[format_parent], help="Flip a todo's completed flag"
    )
    parser_toggle.add_argument("--id", type=int, required=True, help="Todo ID")

    parser_delete = subparsers.add_parser("delete", parents=[format_parent], help="Delete a todo")
    parser_delete.add_argument("--id", type=int, required=True, help="Todo ID")

    return parser


def main(argv: Optional[Sequence[str]] = None, client: Optional[TodoClient] = None) -> int:
    """CLI entry point"""
    args = build_parser().parse_args(argv)

    if client is None:
        config = load_config()
        client = TodoClient(
            api_url=args.api_url or config.client.api_url,
            timeout=config.client.timeout,
        )

    view = TodoView(client)
    asyncio.run(run_command(view, args))
    return print_result(view, args.format)


if __name__ == "__main__":
    sys.exit(main())
