"""
TODO store for the command-line todo list.

The whole collection is loaded when the manager is created. Each
mutating call changes it in memory and writes the full list back.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.markup import escape

from .categories import Category
from .errors import TodoNotFoundError
from .models import Todo
from .output import debug
from .storage import load_json, save_json

__all__ = ['TodoManager', 'next_id']


def _todos_from_json(data: Any) -> List[Todo]:
    if not isinstance(data, list):
        raise ValueError(f"expected a list of todos, got {type(data).__name__}")
    return [Todo.from_dict(item) for item in data]


def next_id(todos: List[Todo]) -> int:
    """One more than the highest id in use, 1 for an empty list"""
    return max((todo.id for todo in todos), default=0) + 1


class TodoManager:
    def __init__(self, todo_file: Path, verbose: bool = False):
        self.todo_file = todo_file
        self.verbose = verbose
        self.todos = self._load_todos()

    def _load_todos(self) -> List[Todo]:
        """Load todos from file"""
        todos = load_json(self.todo_file, list, _todos_from_json)
        debug(f"Loaded {len(todos)} todo(s) from {escape(str(self.todo_file))}", self.verbose)
        return todos

    def _save_todos(self):
        """Save todos to file"""
        save_json(self.todo_file, [todo.to_dict() for todo in self.todos])
        debug(f"Saved {len(self.todos)} todo(s) to {escape(str(self.todo_file))}", self.verbose)

    def add_todo(self, text: str, category: Optional[Category] = None) -> Todo:
        """Append a new, not yet done todo with the next free id"""
        todo = Todo(id=next_id(self.todos), text=text, done=False, category=category)
        self.todos.append(todo)
        self._save_todos()
        return todo

    def list_todos(self, done: Optional[bool] = None) -> List[Todo]:
        """List todos in insertion order, optionally filtered by completion"""
        if done is None:
            return list(self.todos)
        return [todo for todo in self.todos if todo.done == done]

    def get_todo(self, todo_id: int) -> Optional[Todo]:
        """Get a copy of a specific todo by ID"""
        for todo in self.todos:
            if todo.id == todo_id:
                return replace(todo)
        return None

    def mark_done(self, todo_id: int) -> Todo:
        for todo in self.todos:
            if todo.id == todo_id:
                todo.done = True
                self._save_todos()
                return todo
        raise TodoNotFoundError(todo_id)

    def remove_todo(self, todo_id: int) -> None:
        """Remove every todo with this id; nothing is written if none matched"""
        remaining = [todo for todo in self.todos if todo.id != todo_id]
        if len(remaining) == len(self.todos):
            raise TodoNotFoundError(todo_id)
        self.todos = remaining
        self._save_todos()

    def clear_completed(self) -> int:
        """Remove all completed todos and return count removed"""
        initial_count = len(self.todos)
        self.todos = [todo for todo in self.todos if not todo.done]
        removed_count = initial_count - len(self.todos)

        if removed_count > 0:
            self._save_todos()

        return removed_count

    def get_summary(self) -> Dict[str, Any]:
        """Get counts by completion state and by category"""
        done = sum(1 for todo in self.todos if todo.done)
        by_category: Dict[str, int] = {}
        uncategorized = 0
        for todo in self.todos:
            if todo.category is None:
                uncategorized += 1
            else:
                name = str(todo.category)
                by_category[name] = by_category.get(name, 0) + 1
        return {
            "total": len(self.todos),
            "done": done,
            "pending": len(self.todos) - done,
            "categories": by_category,
            "uncategorized": uncategorized,
        }
