"""Exceptions raised by the todo stores and reported by the CLI."""

from pathlib import Path


class TodoError(Exception):
    """Base class for every failure the CLI reports and exits on"""


class UnknownCategoryError(TodoError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown category: {name}")


class CategoryExistsError(TodoError):
    def __init__(self, name: str, builtin: bool = False):
        self.name = name
        self.builtin = builtin
        if builtin:
            message = f"'{name}' is a built-in category."
        else:
            message = f"Category '{name}' already exists."
        super().__init__(message)


class TodoNotFoundError(TodoError):
    def __init__(self, todo_id: int):
        self.todo_id = todo_id
        super().__init__(f"Todo #{todo_id} not found.")


class StorageError(TodoError):
    """A data file could not be read, parsed or written"""

    def __init__(self, path: Path, operation: str, cause: Exception):
        self.path = path
        self.operation = operation
        self.cause = cause
        super().__init__(f"Error {operation} {path}: {cause}")
