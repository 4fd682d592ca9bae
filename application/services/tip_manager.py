# application/services/tip_manager.py
import dataclasses
import logging
from typing import Callable, List, Optional

from core.signals import StoreSignals
from domain.entities import Category, Tip
from infrastructure.local_store import LocalStore
from .seed_service import generate_default_categories, generate_default_tips


class TipManager:
    """
    In-memory owner of the tip and category collections.

    All mutations go through this class. Each one rewrites the affected
    collection(s) in the local store and then emits on ``signals`` so views
    can refresh. Failed writes are logged, never raised.
    """

    def __init__(self, store: LocalStore):
        self._store = store
        self._tips: List[Tip] = []
        self._categories: List[Category] = []
        self.signals = StoreSignals()

    # --- Observers ---
    def subscribe(self, callback: Callable[[], None]) -> None:
        self.signals.data_changed.connect(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        try:
            self.signals.data_changed.disconnect(callback)
        except TypeError as e:
            logging.debug(f"unsubscribe: callback was not connected ({e})")

    # --- Read access ---
    @property
    def tips(self) -> List[Tip]:
        return list(self._tips)

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    def get_tip(self, tip_id: str) -> Optional[Tip]:
        return next((t for t in self._tips if t.id == tip_id), None)

    def get_category(self, category_id: str) -> Optional[Category]:
        return next((c for c in self._categories if c.id == category_id), None)

    def tips_in_category(self, category_id: str) -> List[Tip]:
        return [t for t in self._tips if t.category_id == category_id]

    # --- Lifecycle ---
    def initialize(self) -> None:
        logging.info("Initializing tip data...")
        self._tips, self._categories = self._store.load()

        if not self._categories:
            logging.info("No categories found, creating defaults")
            self._categories = generate_default_categories()
            self._persist_categories()

        if not self._tips:
            logging.info("No tips found, creating defaults")
            self._tips = generate_default_tips(self._categories)
            self._persist_tips()

        logging.info(f"Initialization complete - {len(self._tips)} tips, {len(self._categories)} categories")
        self._notify(tips=True, categories=True)

    def reset_data(self) -> None:
        logging.info("Resetting all data...")
        self._categories = generate_default_categories()
        self._tips = generate_default_tips(self._categories)
        self._persist_categories()
        self._persist_tips()
        logging.info(f"Data reset complete - {len(self._tips)} tips, {len(self._categories)} categories")
        self._notify(tips=True, categories=True)

    # --- Tip operations ---
    def add_tip(self, tip: Tip) -> None:
        self._tips.append(tip)
        self._persist_tips()
        self._notify(tips=True)

    def update_tip(self, tip: Tip) -> None:
        index = self._index_of(self._tips, tip.id)
        if index is None:
            logging.debug(f"update_tip: no tip with id {tip.id}")
            return
        self._tips[index] = tip
        self._persist_tips()
        self._notify(tips=True)

    def delete_tip(self, tip: Tip) -> None:
        remaining = [t for t in self._tips if t.id != tip.id]
        if len(remaining) == len(self._tips):
            logging.debug(f"delete_tip: no tip with id {tip.id}")
            return
        self._tips = remaining
        self._persist_tips()
        self._notify(tips=True)

    def toggle_favorite(self, tip: Tip) -> Optional[Tip]:
        current = self.get_tip(tip.id)
        if current is None:
            return None
        updated = dataclasses.replace(current, favorite_count=0 if current.is_favorite else 1)
        self.update_tip(updated)
        return updated

    # --- Category operations ---
    def add_category(self, category: Category) -> None:
        self._categories.append(category)
        self._persist_categories()
        self._notify(categories=True)

    def update_category(self, category: Category) -> None:
        index = self._index_of(self._categories, category.id)
        if index is None:
            logging.debug(f"update_category: no category with id {category.id}")
            return
        self._categories[index] = category
        self._persist_categories()
        self._notify(categories=True)

    def delete_category(self, category: Category) -> None:
        # Tips pointing at the category go with it
        self._categories = [c for c in self._categories if c.id != category.id]
        before = len(self._tips)
        self._tips = [t for t in self._tips if t.category_id != category.id]
        logging.info(f"Deleted category {category.id} and {before - len(self._tips)} of its tips")
        self._persist_categories()
        self._persist_tips()
        self._notify(tips=True, categories=True)

    # --- Internals ---
    @staticmethod
    def _index_of(items, item_id) -> Optional[int]:
        for i, item in enumerate(items):
            if item.id == item_id:
                return i
        return None

    def _persist_tips(self) -> None:
        try:
            self._store.save_tips(self._tips)
        except Exception as e:
            logging.error(f"Failed to save tips: {e}", exc_info=True)

    def _persist_categories(self) -> None:
        try:
            self._store.save_categories(self._categories)
        except Exception as e:
            logging.error(f"Failed to save categories: {e}", exc_info=True)

    def _notify(self, tips: bool = False, categories: bool = False) -> None:
        if tips:
            self.signals.tips_changed.emit(self.tips)
        if categories:
            self.signals.categories_changed.emit(self.categories)
        self.signals.data_changed.emit()
