"""Filter state machine and the listing matching predicate.

``FilterStateMachine`` holds the current query and enforces its invariants:
a subcategory always implies its parent main category, a city is only
selectable under its selected state, and any change to the (term, category)
pair clears the active facets. Listeners registered with ``add_listener`` are
told about every such change with the new ``QueryKey``; the suggestion
coordinator subscribes this way.

Matching is exposed as pure functions (``listing_matches``,
``filter_listings``) so callers can re-run them over any listing sequence,
e.g. a page of results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from classifieds.catalog.index import CatalogIndex
from classifieds.schemas import FilterState, Listing

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryKey:
    """The (term, effective category name) pair suggestions are fetched for."""

    search_term: str = ""
    category_name: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.search_term and not self.category_name


QueryListener = Callable[[QueryKey], None]


# -----------------------------
# Matching
# -----------------------------


def _text_contains(listing: Listing, needle: str) -> bool:
    folded = needle.casefold()
    return folded in listing.title.casefold() or folded in listing.description.casefold()


def _matches_category(listing: Listing, state: FilterState, catalog: CatalogIndex) -> bool:
    if state.sub_category:
        return listing.category_id == state.sub_category
    if state.main_category:
        return catalog.is_in_category(listing.category_id, state.main_category)
    return True


def listing_matches(listing: Listing, state: FilterState, catalog: CatalogIndex) -> bool:
    """Return True when the listing satisfies every clause of the filter.

    - search_term: case-insensitive substring of title or description
    - state / city: exact match on the listing location
    - sub_category: equals listing.category_id; else main_category contains it
    - active_facets: every facet is a case-insensitive substring of title or description
    """

    matches_term = state.search_term == "" or _text_contains(listing, state.search_term)
    matches_state = not state.state or listing.location.state == state.state
    matches_city = not state.city or listing.location.city == state.city
    matches_category = _matches_category(listing, state, catalog)
    matches_facets = not state.active_facets or all(
        _text_contains(listing, facet) for facet in state.active_facets
    )
    return matches_term and matches_state and matches_city and matches_category and matches_facets


def filter_listings(
    listings: Iterable[Listing], state: FilterState, catalog: CatalogIndex
) -> list[Listing]:
    """Filter listings, preserving the input order."""

    return [listing for listing in listings if listing_matches(listing, state, catalog)]


# -----------------------------
# State machine
# -----------------------------


class FilterStateMachine:
    def __init__(self, catalog: CatalogIndex, state: FilterState | None = None) -> None:
        self.catalog = catalog
        self._state = FilterState()
        self._listeners: list[QueryListener] = []
        self._muted = False
        if state is not None:
            self.load(state)

    @property
    def state(self) -> FilterState:
        return self._state.model_copy(deep=True)

    @property
    def active_facets(self) -> list[str]:
        return list(self._state.active_facets)

    def add_listener(self, listener: QueryListener) -> None:
        self._listeners.append(listener)

    def query_key(self) -> QueryKey:
        return QueryKey(
            search_term=self._state.search_term,
            category_name=self.catalog.category_name(
                self._state.main_category, self._state.sub_category
            ),
        )

    def is_search_active(self) -> bool:
        s = self._state
        return bool(
            s.search_term or s.state or s.city or s.main_category or s.sub_category or s.active_facets
        )

    def cities(self) -> list[str]:
        return self.catalog.cities_of(self._state.state)

    # Query fields: term and category

    def set_term(self, term: str | None) -> None:
        self._change_query(search_term=term or "")

    def select_main_category(self, category_id: str | None) -> None:
        if category_id is not None and self.catalog.category(category_id) is None:
            LOGGER.warning("ignored unknown main category %r", category_id)
            return
        self._change_query(main_category=category_id, sub_category=None)

    def select_sub_category(self, subcategory_id: str | None) -> None:
        if subcategory_id is None:
            # "All" inside a main category keeps that main category selected.
            self._change_query(sub_category=None)
            return
        main_category = self.derive_main_category(subcategory_id)
        if main_category is None:
            LOGGER.warning("ignored unknown subcategory %r", subcategory_id)
            return
        self._change_query(main_category=main_category, sub_category=subcategory_id)

    def derive_main_category(self, subcategory_id: str | None) -> str | None:
        return self.catalog.parent_of(subcategory_id)

    # Location fields

    def select_state(self, state: str | None) -> None:
        if not state:
            self._state = self._state.model_copy(update={"state": None, "city": None})
            return
        if not self.catalog.has_state(state):
            LOGGER.warning("ignored unknown state %r for %s", state, self.catalog.country)
            return
        self._state = self._state.model_copy(update={"state": state, "city": None})

    def select_city(self, city: str | None) -> None:
        if not city:
            self._state = self._state.model_copy(update={"city": None})
            return
        if not self._state.state:
            LOGGER.warning("ignored city %r without a selected state", city)
            return
        if city not in self.catalog.cities_of(self._state.state):
            LOGGER.warning("ignored city %r outside state %r", city, self._state.state)
            return
        self._state = self._state.model_copy(update={"city": city})

    # Facets

    def toggle_facet(self, facet: str) -> None:
        if not facet:
            return
        facets = list(self._state.active_facets)
        if facet in facets:
            facets.remove(facet)
        else:
            facets.append(facet)
        self._state = self._state.model_copy(update={"active_facets": facets})

    # Whole-state operations

    def reset(self) -> None:
        self._change_query(search_term="", main_category=None, sub_category=None)
        self._state = FilterState()

    def load(self, state: FilterState) -> None:
        """Install a complete state, applying state before city.

        The given active facets are kept even though the query changes; the
        listeners are notified once with the resulting key.
        """

        with self._quiet():
            self.reset()
            self.set_term(state.search_term)
            # Main first: an unknown subcategory then leaves the main category in place.
            if state.main_category:
                self.select_main_category(state.main_category)
            if state.sub_category:
                self.select_sub_category(state.sub_category)
            self.select_state(state.state)
            self.select_city(state.city)
        facets = [facet for facet in dict.fromkeys(state.active_facets) if facet]
        self._state = self._state.model_copy(update={"active_facets": facets})
        self._emit()

    def matches(self, listing: Listing) -> bool:
        return listing_matches(listing, self._state, self.catalog)

    def filter(self, listings: Iterable[Listing]) -> list[Listing]:
        return filter_listings(listings, self._state, self.catalog)

    # -----------------------------
    # Internals
    # -----------------------------

    def _change_query(self, **changes: object) -> None:
        current = self._state
        if all(getattr(current, name) == value for name, value in changes.items()):
            return
        changes["active_facets"] = []
        self._state = current.model_copy(update=changes)
        self._emit()

    def _emit(self) -> None:
        if self._muted:
            return
        key = self.query_key()
        for listener in list(self._listeners):
            listener(key)

    @contextmanager
    def _quiet(self) -> Iterator[None]:
        self._muted = True
        try:
            yield
        finally:
            self._muted = False
