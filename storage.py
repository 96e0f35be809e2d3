import json
import os
import random
import string
from typing import Any, Dict, List

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_id(length: int = 7) -> str:
    return "".join(random.choices(_ID_ALPHABET, k=length))


def _ensure_file(path: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            f.write("[]")


def read_collection(path: str, label: str = "collection") -> List[Dict[str, Any]]:
    """
    Load a JSON array of objects from disk.
    A missing file is created as "[]", a blank file reads as empty.
    Anything unparseable, not an array, or holding non-object entries
    is overwritten with "[]".
    """
    if not os.path.exists(path):
        _ensure_file(path)
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
        if data.strip() == "":
            return []
        items = json.loads(data)
        if not isinstance(items, list):
            raise ValueError(f"expected a JSON array, got {type(items).__name__}")
        for item in items:
            if not isinstance(item, dict):
                raise ValueError(f"expected JSON objects in the array, got {type(item).__name__}")
    except (OSError, ValueError) as e:
        print(f"Error reading {label} file {path}, resetting to empty: {e}")
        write_collection(path, [])
        return []
    return items


def write_collection(path: str, items: List[Dict[str, Any]]) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(items, indent=2))
