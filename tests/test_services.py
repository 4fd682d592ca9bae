"""Form services and queries on top of the manager"""

from datetime import datetime, timedelta

import pytest

from application.services.category_service import CategoryService
from application.services.query_service import QueryService, sort_tips
from application.services.tip_service import TipService
from domain.entities import Category, SortOption, Tip


@pytest.fixture
def tip_service(manager):
    return TipService(manager)


@pytest.fixture
def category_service(manager):
    return CategoryService(manager)


@pytest.fixture
def query_service(manager):
    return QueryService(manager)


class TestTipService:
    def test_create_tip_trims_input(self, tip_service, manager):
        category = manager.categories[0]
        tip = tip_service.create_tip("  Title ", "\nBody\n", category.id, tags=" a, b ")
        assert (tip.title, tip.content, tip.tags) == ("Title", "Body", "a, b")
        assert manager.tips[-1] == tip

    @pytest.mark.parametrize('title, content', [("", "Body"), ("Title", "   "), (None, None)])
    def test_create_tip_requires_text(self, tip_service, manager, title, content):
        with pytest.raises(ValueError):
            tip_service.create_tip(title, content, manager.categories[0].id)
        assert len(manager.tips) == 100

    def test_create_tip_requires_known_category(self, tip_service):
        with pytest.raises(ValueError, match="Unknown category"):
            tip_service.create_tip("Title", "Body", "missing")

    def test_edit_tip(self, tip_service, manager):
        tip = manager.tips[0]
        target = manager.categories[1]
        updated = tip_service.edit_tip(tip.id, title=" New ", category_id=target.id)
        assert updated.title == "New"
        assert updated.content == tip.content
        assert manager.get_tip(tip.id).category_id == target.id

    def test_edit_tip_rejects_empty_title(self, tip_service, manager):
        tip = manager.tips[0]
        with pytest.raises(ValueError):
            tip_service.edit_tip(tip.id, title="  ")
        assert manager.get_tip(tip.id) == tip

    def test_toggle_and_delete(self, tip_service, manager):
        tip = manager.tips[3]
        assert tip_service.toggle_favorite(tip.id).is_favorite
        tip_service.delete_tip(tip.id)
        assert manager.get_tip(tip.id) is None

    def test_unknown_tip(self, tip_service):
        with pytest.raises(ValueError):
            tip_service.toggle_favorite("missing")


class TestCategoryService:
    def test_create_category_defaults(self, category_service, manager):
        category = category_service.create_category("  Garden ")
        assert category.name == "Garden"
        assert category.icon == "folder"
        assert category.color == "#F4C430"
        assert manager.categories[-1] == category

    def test_create_category_requires_name(self, category_service):
        with pytest.raises(ValueError):
            category_service.create_category("   ")

    def test_edit_category_keeps_unset_fields(self, category_service, manager):
        cooking = manager.categories[0]
        updated = category_service.edit_category(cooking.id, "Kitchen", color="#FF6B6B")
        assert updated.name == "Kitchen"
        assert updated.icon == cooking.icon
        assert updated.color == "#FF6B6B"
        assert updated.created_at == cooking.created_at

    def test_create_category_from_palette(self, category_service):
        category = category_service.create_category("Garden", icon="leaf", color="#2ecc71")
        assert category.icon == "leaf"
        assert category.color == "#2ECC71"

    @pytest.mark.parametrize('icon, color', [("rocket", None), (None, "#123456"), (None, "red")])
    def test_create_category_rejects_values_outside_palette(self, category_service, manager, icon, color):
        with pytest.raises(ValueError, match="Unsupported category"):
            category_service.create_category("Garden", icon=icon, color=color)
        assert len(manager.categories) == 5

    def test_edit_category_rejects_values_outside_palette(self, category_service, manager):
        cooking = manager.categories[0]
        with pytest.raises(ValueError):
            category_service.edit_category(cooking.id, "Kitchen", icon="rocket")
        assert manager.get_category(cooking.id) == cooking

    def test_rename_category(self, category_service, manager):
        money = manager.categories[4]
        category_service.rename_category(money.id, "Finance")
        assert manager.get_category(money.id).name == "Finance"

    def test_delete_category_reports_removed_tips(self, category_service, manager):
        health = manager.categories[3]
        assert category_service.delete_category(health.id) == 20
        assert len(manager.tips) == 80
        assert all(t.category_id != health.id for t in manager.tips)

    def test_delete_unknown_category(self, category_service):
        with pytest.raises(ValueError):
            category_service.delete_category("missing")


class TestQueryService:
    def test_search_across_fields(self, query_service):
        titles = {t.title for t in query_service.search_tips("ONION")}
        assert titles == {"Onion Tears", "Potato Storage"}

    def test_search_by_tag(self, query_service):
        results = query_service.search_tips("compound interest")
        assert [t.title for t in results] == ["Invest Early"]

    def test_empty_search_returns_all(self, query_service):
        assert len(query_service.search_tips("")) == 100

    def test_sort_options(self):
        base = datetime(2024, 1, 1)
        tips = [
            Tip(title="b", content="x", category_id="c", favorite_count=0, created_at=base),
            Tip(title="c", content="x", category_id="c", favorite_count=2, created_at=base + timedelta(days=2)),
            Tip(title="a", content="x", category_id="c", favorite_count=1, created_at=base + timedelta(days=1)),
        ]
        assert [t.title for t in sort_tips(tips, SortOption.NEWEST)] == ["c", "a", "b"]
        assert [t.title for t in sort_tips(tips, SortOption.MOST_USED)] == ["c", "a", "b"]
        assert [t.title for t in sort_tips(tips, SortOption.CATEGORY)] == ["a", "b", "c"]

    def test_favorites(self, query_service, manager):
        tips = manager.tips
        manager.add_tip(Tip(title="Loved", content="x", category_id=manager.categories[0].id, favorite_count=5))
        manager.toggle_favorite(tips[0])
        manager.toggle_favorite(tips[50])

        favorites = query_service.favorite_tips()
        assert favorites[0].title == "Loved"
        assert {t.id for t in favorites[1:]} == {tips[0].id, tips[50].id}
        assert [t.title for t in query_service.favorite_tips("pasta")] == ["Perfect Pasta Water"]

    def test_category_counts(self, query_service, manager):
        manager.add_category(Category(name="Garden"))
        counts = query_service.category_counts()
        assert counts[manager.categories[-1].id] == 0
        assert sum(counts.values()) == 100

    def test_summary(self, query_service, manager):
        manager.toggle_favorite(manager.tips[0])
        assert query_service.summary() == {'tips': 100, 'categories': 5, 'favorites': 1}
