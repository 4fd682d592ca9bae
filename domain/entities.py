# domain/entities.py
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List

from core.config import DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON


def new_id() -> str:
    return str(uuid.uuid4()).upper()


@dataclass
class Category:
    name: str
    icon: str = DEFAULT_CATEGORY_ICON
    color: str = DEFAULT_CATEGORY_COLOR
    is_locked: bool = False  # stored only, nothing enforces it
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.now)

    def validate(self) -> List[str]:
        errors = []
        if not self.name or not self.name.strip():
            errors.append("Category name cannot be empty.")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'color': self.color,
            'isLocked': self.is_locked,
            'createdAt': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Category:
        # Every key is required; a missing one raises KeyError
        return cls(
            id=_require_str(data['id'], 'id'),
            name=_require_str(data['name'], 'name'),
            icon=_require_str(data['icon'], 'icon'),
            color=_require_str(data['color'], 'color'),
            is_locked=_require_bool(data['isLocked'], 'isLocked'),
            created_at=datetime.fromisoformat(data['createdAt']),
        )


@dataclass
class Tip:
    title: str
    content: str
    category_id: str
    tags: str = ""
    favorite_count: int = 0
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_favorite(self) -> bool:
        return self.favorite_count > 0

    def tag_list(self) -> List[str]:
        return [t.strip() for t in self.tags.split(',') if t.strip()]

    def matches(self, text: str) -> bool:
        """Case-insensitive substring match on title, content or tags."""
        if not text:
            return True
        needle = text.casefold()
        return (needle in self.title.casefold()
                or needle in self.content.casefold()
                or needle in self.tags.casefold())

    def validate(self) -> List[str]:
        errors = []
        if not self.title or not self.title.strip():
            errors.append("Tip title cannot be empty.")
        if not self.content or not self.content.strip():
            errors.append("Tip content cannot be empty.")
        if self.favorite_count < 0:
            errors.append("Favorite count cannot be negative.")
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'categoryId': self.category_id,
            'tags': self.tags,
            'favoriteCount': self.favorite_count,
            'createdAt': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Tip:
        favorite_count = data['favoriteCount']
        if isinstance(favorite_count, bool) or not isinstance(favorite_count, int):
            raise TypeError(f"favoriteCount must be an int, got {favorite_count!r}")
        return cls(
            id=_require_str(data['id'], 'id'),
            title=_require_str(data['title'], 'title'),
            content=_require_str(data['content'], 'content'),
            category_id=_require_str(data['categoryId'], 'categoryId'),
            tags=_require_str(data['tags'], 'tags'),
            favorite_count=favorite_count,
            created_at=datetime.fromisoformat(data['createdAt']),
        )


class SortOption(Enum):
    NEWEST = 'newest'
    MOST_USED = 'mostUsed'
    CATEGORY = 'category'

    @property
    def display_name(self) -> str:
        return {
            SortOption.NEWEST: 'Newest',
            SortOption.MOST_USED: 'Most Used',
            SortOption.CATEGORY: 'Category',
        }[self]

    @property
    def icon(self) -> str:
        return {
            SortOption.NEWEST: 'clock',
            SortOption.MOST_USED: 'heart.fill',
            SortOption.CATEGORY: 'folder',
        }[self]


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {value!r}")
    return value


def _require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be a bool, got {value!r}")
    return value
