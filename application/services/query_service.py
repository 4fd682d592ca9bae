# application/services/query_service.py
from typing import Dict, List

from domain.entities import SortOption, Tip
from .tip_manager import TipManager


class QueryService:
    def __init__(self, manager: TipManager):
        self._manager = manager

    def search_tips(self, text: str = "", sort: SortOption = SortOption.NEWEST) -> List[Tip]:
        tips = [t for t in self._manager.tips if t.matches(text)]
        return sort_tips(tips, sort)

    def favorite_tips(self, text: str = "") -> List[Tip]:
        favorites = [t for t in self._manager.tips if t.is_favorite]
        favorites.sort(key=lambda t: t.favorite_count, reverse=True)
        return [t for t in favorites if t.matches(text)]

    def category_counts(self) -> Dict[str, int]:
        counts = {c.id: 0 for c in self._manager.categories}
        for tip in self._manager.tips:
            if tip.category_id in counts:
                counts[tip.category_id] += 1
        return counts

    def summary(self) -> Dict[str, int]:
        tips = self._manager.tips
        return {
            'tips': len(tips),
            'categories': len(self._manager.categories),
            'favorites': sum(1 for t in tips if t.is_favorite),
        }


def sort_tips(tips: List[Tip], sort: SortOption) -> List[Tip]:
    # sorted() is stable, ties keep collection order
    if sort is SortOption.NEWEST:
        return sorted(tips, key=lambda t: t.created_at, reverse=True)
    if sort is SortOption.MOST_USED:
        return sorted(tips, key=lambda t: t.favorite_count, reverse=True)
    return sorted(tips, key=lambda t: t.title)
