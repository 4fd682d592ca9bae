# application/services/category_service.py
import dataclasses
from typing import List, Optional

from core.config import CATEGORY_ICONS, CATEGORY_PALETTE, DEFAULT_CATEGORY_COLOR, DEFAULT_CATEGORY_ICON
from domain.entities import Category
from .tip_manager import TipManager


class CategoryService:
    def __init__(self, manager: TipManager):
        self._manager = manager

    def get_all_categories(self) -> List[Category]:
        return self._manager.categories

    def create_category(self, name: str, icon: Optional[str] = None, color: Optional[str] = None) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValueError("Category name cannot be empty.")
        category = Category(
            name=name,
            icon=_check_icon(icon) if icon else DEFAULT_CATEGORY_ICON,
            color=_check_color(color) if color else DEFAULT_CATEGORY_COLOR,
        )
        self._manager.add_category(category)
        return category

    def edit_category(self, category_id: str, name: str, icon: Optional[str] = None, color: Optional[str] = None) -> Category:
        name = (name or "").strip()
        if not name:
            raise ValueError("Category name cannot be empty.")
        current = self._require(category_id)
        updated = dataclasses.replace(
            current,
            name=name,
            icon=_check_icon(icon) if icon else current.icon,
            color=_check_color(color) if color else current.color,
        )
        self._manager.update_category(updated)
        return updated

    def rename_category(self, category_id: str, new_name: str) -> Category:
        return self.edit_category(category_id, new_name)

    def delete_category(self, category_id: str) -> int:
        """Deletes the category and every tip in it. Returns how many tips went with it."""
        category = self._require(category_id)
        removed = len(self._manager.tips_in_category(category_id))
        self._manager.delete_category(category)
        return removed

    def _require(self, category_id: str) -> Category:
        category = self._manager.get_category(category_id)
        if category is None:
            raise ValueError(f"Unknown category: {category_id}")
        return category


def _check_icon(icon: str) -> str:
    if icon not in CATEGORY_ICONS:
        raise ValueError(f"Unsupported category icon: {icon}")
    return icon


def _check_color(color: str) -> str:
    # Palette entries are upper-case hex
    normalized = color.strip().upper()
    if normalized not in CATEGORY_PALETTE:
        raise ValueError(f"Unsupported category color: {color}")
    return normalized
