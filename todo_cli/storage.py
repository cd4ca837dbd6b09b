"""
JSON persistence helpers.

Every collection is read whole and written whole. There is no locking:
two processes writing the same file race and the last writer wins.
"""

import json
from pathlib import Path
from typing import Any, Callable, TypeVar

from .errors import StorageError

T = TypeVar("T")


def home_dir() -> Path:
    """User's home directory, or the current directory if it can't be found"""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return Path(".")


def load_json(path: Path, default: Callable[[], T], convert: Callable[[Any], T]) -> T:
    """
    Load a collection from a JSON file.

    A missing file yields default(). Anything that goes wrong after the
    file is found (I/O, bad JSON, or a shape convert() rejects) raises
    StorageError.
    """
    if not path.exists():
        return default()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(path, "reading", e) from e

    try:
        return convert(json.loads(raw))
    except (json.JSONDecodeError, ValueError) as e:
        raise StorageError(path, "parsing", e) from e


def save_json(path: Path, data: Any) -> None:
    """Overwrite path with data as pretty-printed JSON"""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise StorageError(path, "writing", e) from e
