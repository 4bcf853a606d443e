from __future__ import annotations

from collections.abc import Iterable

from classifieds.catalog.data import CATEGORIES, LOCATIONS
from classifieds.config import settings
from classifieds.schemas import Category, Subcategory


class CatalogIndex:
    """
    Read-only lookup over the category tree and one country's locations.
    Every lookup is total: unknown keys give an empty list or None.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        locations: dict[str, list[str]] | None = None,
        country: str = "",
    ) -> None:
        self.country = country
        self._categories: list[Category] = list(categories)
        self._categories_by_id: dict[str, Category] = {}
        self._subcategories_by_id: dict[str, Subcategory] = {}
        self._parent_by_sub_id: dict[str, str] = {}
        for category in self._categories:
            self._categories_by_id[category.id] = category
            for sub in category.subcategories:
                if sub.id in self._parent_by_sub_id:
                    raise ValueError(f"Duplicate subcategory id: {sub.id}")
                self._subcategories_by_id[sub.id] = sub
                self._parent_by_sub_id[sub.id] = category.id
        self._cities_by_state: dict[str, tuple[str, ...]] = {
            state: tuple(dict.fromkeys(cities)) for state, cities in (locations or {}).items()
        }

    @classmethod
    def for_country(cls, country: str | None = None) -> CatalogIndex:
        name = country or settings.default_country
        categories = [Category.model_validate(raw) for raw in CATEGORIES]
        return cls(categories, LOCATIONS.get(name, {}), country=name)

    @staticmethod
    def countries() -> list[str]:
        return sorted(LOCATIONS)

    def categories(self) -> list[Category]:
        return list(self._categories)

    def category(self, category_id: str | None) -> Category | None:
        if not category_id:
            return None
        return self._categories_by_id.get(category_id)

    def subcategory(self, subcategory_id: str | None) -> Subcategory | None:
        if not subcategory_id:
            return None
        return self._subcategories_by_id.get(subcategory_id)

    def subcategories_of(self, main_category_id: str | None) -> list[Subcategory]:
        category = self.category(main_category_id)
        return list(category.subcategories) if category else []

    def parent_of(self, subcategory_id: str | None) -> str | None:
        if not subcategory_id:
            return None
        return self._parent_by_sub_id.get(subcategory_id)

    def is_in_category(self, category_id: str, main_category_id: str) -> bool:
        return self._parent_by_sub_id.get(category_id) == main_category_id

    def category_name(self, main_category_id: str | None, subcategory_id: str | None) -> str:
        """Subcategory display name if set, else the main category's, else ""."""
        sub = self.subcategory(subcategory_id)
        if sub:
            return sub.name
        category = self.category(main_category_id)
        return category.name if category else ""

    def states(self) -> list[str]:
        return list(self._cities_by_state)

    def has_state(self, state: str | None) -> bool:
        return bool(state) and state in self._cities_by_state

    def cities_of(self, state: str | None) -> list[str]:
        if not state:
            return []
        return list(self._cities_by_state.get(state, ()))
