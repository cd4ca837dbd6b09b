"""
Registry of user-defined categories.

Names keep the casing they were registered with and are compared
case-insensitively. The registry only grows; there is no removal.
"""

from pathlib import Path
from typing import Any, List

from rich.markup import escape

from .categories import Category, find_custom, is_builtin, parse_category
from .errors import CategoryExistsError
from .output import debug
from .storage import load_json, save_json

__all__ = ['CategoryManager']


def _categories_from_json(data: Any) -> List[str]:
    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        raise ValueError("expected a list of category names")
    return data


class CategoryManager:
    def __init__(self, categories_file: Path, verbose: bool = False):
        self.categories_file = categories_file
        self.verbose = verbose
        self.categories = self._load_categories()

    def _load_categories(self) -> List[str]:
        categories = load_json(self.categories_file, list, _categories_from_json)
        debug(f"Loaded {len(categories)} custom categories from {escape(str(self.categories_file))}", self.verbose)
        return categories

    def _save_categories(self):
        save_json(self.categories_file, self.categories)
        debug(f"Saved {len(self.categories)} custom categories to {escape(str(self.categories_file))}", self.verbose)

    def add_category(self, name: str) -> None:
        """Register a custom category, rejecting built-in names and duplicates"""
        if is_builtin(name):
            raise CategoryExistsError(name, builtin=True)
        if find_custom(name, self.categories) is not None:
            raise CategoryExistsError(name)
        self.categories.append(name)
        self._save_categories()

    def list_categories(self) -> List[str]:
        return list(self.categories)

    def parse(self, name: str) -> Category:
        return parse_category(name, self.categories)
