# infrastructure/local_store.py
import json
import logging
from typing import Callable, List, Tuple, TypeVar

from core.config import TIPS_KEY, CATEGORIES_KEY
from domain.entities import Category, Tip
from .key_value_store import KeyValueStore

T = TypeVar('T')


class LocalStore:
    """
    Mirrors the two collections into a key-value store, one JSON array per key.
    Each save rewrites the whole collection. There is no schema version, so
    records written with a different shape decode as "no data".
    """

    def __init__(self, kv_store: KeyValueStore, tips_key: str = TIPS_KEY, categories_key: str = CATEGORIES_KEY):
        self._kv = kv_store
        self.tips_key = tips_key
        self.categories_key = categories_key

    @property
    def kv_store(self) -> KeyValueStore:
        return self._kv

    def load(self) -> Tuple[List[Tip], List[Category]]:
        tips = self._load_list(self.tips_key, Tip.from_dict)
        categories = self._load_list(self.categories_key, Category.from_dict)
        return tips, categories

    def save_tips(self, tips: List[Tip]) -> None:
        self._save_list(self.tips_key, [t.to_dict() for t in tips])

    def save_categories(self, categories: List[Category]) -> None:
        self._save_list(self.categories_key, [c.to_dict() for c in categories])

    def _save_list(self, key: str, items: list) -> None:
        payload = json.dumps(items, ensure_ascii=False).encode('utf-8')
        self._kv.set(key, payload)
        logging.debug(f"Saved {len(items)} records under '{key}'")

    def _load_list(self, key: str, decode: Callable[[dict], T]) -> List[T]:
        raw = self._kv.get(key)
        if raw is None:
            return []
        try:
            items = json.loads(raw.decode('utf-8'))
            if not isinstance(items, list):
                raise TypeError(f"expected a JSON array, got {type(items).__name__}")
            records = [decode(item) for item in items]
        except (UnicodeDecodeError, ValueError, TypeError, KeyError, AttributeError, RecursionError) as e:
            logging.warning(f"Discarding unreadable data under '{key}': {e}")
            return []
        logging.debug(f"Loaded {len(records)} records from '{key}'")
        return records
