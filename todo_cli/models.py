"""
Todo record and its JSON mapping.

On disk a todo is {"id": int, "text": str, "done": bool} with an optional
"category" string. The key is left out entirely when there is no category.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .categories import Category, category_from_json, category_to_json


@dataclass
class Todo:
    id: int
    text: str
    done: bool = False
    category: Optional[Category] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "text": self.text, "done": self.done}
        if self.category is not None:
            data["category"] = category_to_json(self.category)
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Todo":
        """Build a todo from decoded JSON, raising ValueError on a bad shape"""
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        todo_id = data.get("id")
        # bool is an int subclass, reject it explicitly
        if not isinstance(todo_id, int) or isinstance(todo_id, bool) or todo_id < 0:
            raise ValueError(f"invalid id: {todo_id!r}")
        text = data.get("text")
        if not isinstance(text, str):
            raise ValueError(f"invalid text for todo #{todo_id}: {text!r}")
        done = data.get("done")
        if not isinstance(done, bool):
            raise ValueError(f"invalid done flag for todo #{todo_id}: {done!r}")
        category = data.get("category")
        if category is not None and not isinstance(category, str):
            raise ValueError(f"invalid category for todo #{todo_id}: {category!r}")
        return cls(
            id=todo_id,
            text=text,
            done=done,
            category=category_from_json(category) if category is not None else None,
        )

    def label(self) -> str:
        """One-line listing form: [x] #3 [work]: text"""
        mark = "x" if self.done else " "
        tag = f" [{self.category}]" if self.category is not None else ""
        return f"[{mark}] #{self.id}{tag}: {self.text}"
