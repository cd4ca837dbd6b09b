"""
Category model for todo items.

Four built-in categories are always available. Anything else has to be
registered first and is stored with the casing it was registered with.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .errors import UnknownCategoryError

__all__ = [
    'BuiltinCategory', 'CustomCategory', 'Category', 'BUILTIN_CATEGORIES',
    'is_builtin', 'find_custom', 'parse_category', 'category_from_json', 'category_to_json',
]


class BuiltinCategory(Enum):
    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    HEALTH = "health"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def lookup(cls, name: str) -> Optional["BuiltinCategory"]:
        """Case-insensitive lookup, None when the name is not built in"""
        lower = name.lower()
        for category in cls:
            if category.value == lower:
                return category
        return None


@dataclass(frozen=True)
class CustomCategory:
    name: str

    def __str__(self) -> str:
        return self.name


Category = Union[BuiltinCategory, CustomCategory]

BUILTIN_CATEGORIES = tuple(category.value for category in BuiltinCategory)


def is_builtin(name: str) -> bool:
    return BuiltinCategory.lookup(name) is not None


def find_custom(name: str, custom_categories: Sequence[str]) -> Optional[str]:
    """Return the registered spelling of a custom category, if any"""
    lower = name.lower()
    for stored in custom_categories:
        if stored.lower() == lower:
            return stored
    return None


def parse_category(name: str, custom_categories: Sequence[str]) -> Category:
    """
    Resolve user input to a category.

    Matching is case-insensitive. A custom match carries the registry's
    casing, not the casing typed by the user.
    """
    builtin = BuiltinCategory.lookup(name)
    if builtin is not None:
        return builtin
    stored = find_custom(name, custom_categories)
    if stored is None:
        raise UnknownCategoryError(name)
    return CustomCategory(stored)


def category_to_json(category: Category) -> str:
    return str(category)


def category_from_json(value: str) -> Category:
    """Rebuild a stored category without checking it against the registry"""
    builtin = BuiltinCategory.lookup(value)
    if builtin is not None:
        return builtin
    return CustomCategory(value)

