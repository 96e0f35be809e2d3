import os
from typing import Any, Dict, List

from storage import new_id, read_collection, write_collection

DEFAULT_TODOS_FILE = os.path.join(os.path.dirname(__file__), "data", "todos.json")


def todos_file() -> str:
    return os.getenv("TODOS_FILE") or DEFAULT_TODOS_FILE


def read_todos() -> List[Dict[str, Any]]:
    return read_collection(todos_file(), "todos")


def write_todos(items: List[Dict[str, Any]]) -> None:
    write_collection(todos_file(), items)


def add_todo(text: str) -> Dict[str, Any]:
    items = read_todos()
    todo = {"id": new_id(), "text": text, "completed": False}
    items.append(todo)
    write_todos(items)
    return todo


def delete_todo(todo_id: str) -> bool:
    """Remove the todo with this id. Returns False (file untouched) if none matched."""
    items = read_todos()
    remaining = [t for t in items if t.get("id") != todo_id]
    if len(remaining) == len(items):
        return False
    write_todos(remaining)
    return True
