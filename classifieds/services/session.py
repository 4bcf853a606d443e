from __future__ import annotations

import logging
from collections.abc import Iterable

from classifieds.catalog.data import sample_listings
from classifieds.catalog.index import CatalogIndex
from classifieds.llm.client import SuggestionClient
from classifieds.schemas import FilterState, Listing, SavedSearch
from classifieds.search import saved_search
from classifieds.search.filters import FilterStateMachine
from classifieds.search.suggestions import FacetProvider, SuggestionCoordinator
from classifieds.store.listing_store import ListingStore

LOGGER = logging.getLogger(__name__)


class Session:
    """One user's browsing session: listings, the current query and its suggestions.

    Query mutations are synchronous and recompute matches immediately. Changes to
    the term or category also notify the suggestion coordinator, so they must run
    on the event loop that owns the session.
    """

    def __init__(
        self,
        *,
        catalog: CatalogIndex | None = None,
        store: ListingStore | None = None,
        provider: FacetProvider | None = None,
        coordinator: SuggestionCoordinator | None = None,
        listings: Iterable[Listing] | None = None,
    ) -> None:
        self.catalog = catalog or CatalogIndex.for_country()
        if store is None:
            seed = listings if listings is not None else [Listing.model_validate(x) for x in sample_listings()]
            store = ListingStore(seed)
        self.store = store
        self.provider = provider if provider is not None else SuggestionClient()
        self.coordinator = coordinator or SuggestionCoordinator(self.provider)
        self.filters = FilterStateMachine(self.catalog)
        self.filters.add_listener(self.coordinator.notify)

    # Query

    @property
    def state(self) -> FilterState:
        return self.filters.state

    def set_term(self, term: str | None) -> None:
        self.filters.set_term(term)

    def select_main_category(self, category_id: str | None) -> None:
        self.filters.select_main_category(category_id)

    def select_sub_category(self, subcategory_id: str | None) -> None:
        self.filters.select_sub_category(subcategory_id)

    def select_state(self, state: str | None) -> None:
        self.filters.select_state(state)

    def select_city(self, city: str | None) -> None:
        self.filters.select_city(city)

    def toggle_facet(self, facet: str) -> bool:
        """Toggle a visible chip; returns False when the facet is not on offer."""
        if facet not in self.visible_chips():
            LOGGER.debug("ignored toggle of facet %r not in current suggestions", facet)
            return False
        self.filters.toggle_facet(facet)
        return True

    def reset(self) -> None:
        self.filters.reset()

    def cities(self) -> list[str]:
        return self.filters.cities()

    def is_search_active(self) -> bool:
        return self.filters.is_search_active()

    def visible_listings(self) -> list[Listing]:
        return self.filters.filter(self.store.all())

    # Suggestions

    @property
    def busy(self) -> bool:
        return self.coordinator.busy

    @property
    def suggestions(self) -> list[str]:
        return self.coordinator.suggestions

    def visible_chips(self) -> list[str]:
        """Suggested facets, preceded by active facets the suggestions no longer offer."""
        suggested = self.coordinator.suggestions
        pinned = [facet for facet in self.filters.active_facets if facet not in suggested]
        return pinned + suggested

    async def wait_for_suggestions(self, timeout: float | None = None) -> list[str]:
        return await self.coordinator.wait_settled(timeout)

    # Saved searches

    def save_search(self, name: str) -> SavedSearch | None:
        try:
            return saved_search.capture(self.filters.state, name)
        except saved_search.InvalidSearchNameError:
            LOGGER.info("search not saved: empty name")
            return None

    def open_saved_search(self, saved: SavedSearch) -> FilterState:
        state = saved_search.restore(saved, self.catalog)
        self.filters.load(state)
        return self.filters.state

    # Listings

    def post_listing(self, listing: Listing) -> None:
        self.store.add(listing)

    def delete_listing(self, listing_id: str, requester_id: str) -> bool:
        return self.store.remove(listing_id, requester_id)

    async def aclose(self) -> None:
        await self.coordinator.aclose()
        close = getattr(self.provider, "aclose", None)
        if close is not None:
            await close()
