# application/services/seed_service.py
import logging
from typing import List

from domain.entities import Category, Tip
from .seed_catalog import DEFAULT_CATEGORIES, DEFAULT_TIPS


def generate_default_categories() -> List[Category]:
    categories = [Category(name=name, icon=icon, color=color) for name, icon, color in DEFAULT_CATEGORIES]
    logging.info(f"Generated {len(categories)} default categories")
    return categories


def generate_default_tips(categories: List[Category]) -> List[Tip]:
    """
    Builds the built-in tip catalog against the given categories, matching by name.
    Every call returns a fresh batch; callers decide whether seeding is needed.
    """
    by_name = {}
    for category in categories:
        by_name.setdefault(category.name, category)

    tips = []
    for name, _icon, _color in DEFAULT_CATEGORIES:
        category = by_name.get(name)
        if category is None:
            logging.warning(f"No '{name}' category available, skipping its default tips")
            continue
        for title, content, tags in DEFAULT_TIPS[name]:
            tips.append(Tip(title=title, content=content, category_id=category.id, tags=tags))

    logging.info(f"Generated {len(tips)} default tips")
    return tips
