"""Named snapshots of a filter state and their JSON storage form.

``capture`` takes everything that affects matching (term, category pair,
state/city, active facets) and nothing transient: suggestion lists are
refetched after ``restore``. Restoring replays the fields through a
``FilterStateMachine`` so the usual derivation rules hold (state before
city, main category derived from the subcategory).
"""

from __future__ import annotations

import uuid

from classifieds.catalog.index import CatalogIndex
from classifieds.schemas import FilterState, SavedSearch, SavedSearchCategory, SavedSearchLocation
from classifieds.search.filters import FilterStateMachine


class InvalidSearchNameError(ValueError):
    """Raised when a saved search is captured without a usable name."""


def new_search_id() -> str:
    return f"search-{uuid.uuid4().hex}"


def capture(state: FilterState, name: str, *, search_id: str | None = None) -> SavedSearch:
    display_name = (name or "").strip()
    if not display_name:
        raise InvalidSearchNameError("saved search name must be a non-empty string")
    return SavedSearch(
        id=search_id or new_search_id(),
        name=display_name,
        search_term=state.search_term,
        location=SavedSearchLocation(state=state.state or "", city=state.city or ""),
        category=SavedSearchCategory(main=state.main_category, sub=state.sub_category),
        filters=list(state.active_facets),
    )


def restore(saved: SavedSearch, catalog: CatalogIndex) -> FilterState:
    machine = FilterStateMachine(catalog)
    machine.load(
        FilterState(
            search_term=saved.search_term,
            main_category=saved.category.main or None,
            sub_category=saved.category.sub or None,
            state=saved.location.state or None,
            city=saved.location.city or None,
            active_facets=list(saved.filters),
        )
    )
    return machine.state


def encode(saved: SavedSearch) -> str:
    return saved.model_dump_json(by_alias=True)


def decode(raw: str | bytes) -> SavedSearch:
    return SavedSearch.model_validate_json(raw)
