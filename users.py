import os
from typing import Any, Dict, List, Optional

from storage import new_id, read_collection, write_collection

DEFAULT_USERS_FILE = os.path.join(os.path.dirname(__file__), "data", "users.json")


def users_file() -> str:
    return os.getenv("USERS_FILE") or DEFAULT_USERS_FILE


def read_users() -> List[Dict[str, Any]]:
    return read_collection(users_file(), "users")


def write_users(items: List[Dict[str, Any]]) -> None:
    write_collection(users_file(), items)


def find_user(username: str) -> Optional[Dict[str, Any]]:
    for user in read_users():
        if user.get("username") == username:
            return user
    return None


def create_user(username: str, password: str) -> Optional[Dict[str, Any]]:
    """
    Append a new user record and persist it.
    Returns None if the username is already taken.
    Passwords are stored as given.
    """
    if find_user(username) is not None:
        return None
    items = read_users()
    user = {"id": new_id(), "username": username, "password": password}
    items.append(user)
    write_users(items)
    return user


def check_credentials(username: str, password: str) -> Optional[Dict[str, Any]]:
    for user in read_users():
        if user.get("username") == username and user.get("password") == password:
            return user
    return None
