# application/services/tip_service.py
import dataclasses
from typing import Optional

from domain.entities import Tip
from .tip_manager import TipManager


class TipService:
    def __init__(self, manager: TipManager):
        self._manager = manager

    def create_tip(self, title: str, content: str, category_id: str, tags: str = "") -> Tip:
        if self._manager.get_category(category_id) is None:
            raise ValueError(f"Unknown category: {category_id}")

        new_tip = Tip(
            title=(title or "").strip(),
            content=(content or "").strip(),
            category_id=category_id,
            tags=(tags or "").strip(),
        )

        errors = new_tip.validate()
        if errors:
            raise ValueError(", ".join(errors))

        self._manager.add_tip(new_tip)
        return new_tip

    def edit_tip(self, tip_id: str, title: Optional[str] = None, content: Optional[str] = None,
                 category_id: Optional[str] = None, tags: Optional[str] = None) -> Tip:
        current = self._require(tip_id)
        changes = {}
        if title is not None:
            changes['title'] = title.strip()
        if content is not None:
            changes['content'] = content.strip()
        if tags is not None:
            changes['tags'] = tags.strip()
        if category_id is not None:
            if self._manager.get_category(category_id) is None:
                raise ValueError(f"Unknown category: {category_id}")
            changes['category_id'] = category_id

        updated = dataclasses.replace(current, **changes)
        errors = updated.validate()
        if errors:
            raise ValueError(", ".join(errors))

        self._manager.update_tip(updated)
        return updated

    def toggle_favorite(self, tip_id: str) -> Tip:
        return self._manager.toggle_favorite(self._require(tip_id))

    def delete_tip(self, tip_id: str) -> None:
        self._manager.delete_tip(self._require(tip_id))

    def _require(self, tip_id: str) -> Tip:
        tip = self._manager.get_tip(tip_id)
        if tip is None:
            raise ValueError(f"Unknown tip: {tip_id}")
        return tip
