from __future__ import annotations

import logging
from collections.abc import Iterable

from classifieds.schemas import Listing

LOGGER = logging.getLogger(__name__)


class ListingStore:
    """
    Session-local listing collection.
    New listings are prepended; order is insertion order, never re-sorted.
    """

    def __init__(self, listings: Iterable[Listing] | None = None) -> None:
        self._listings: list[Listing] = list(listings or [])

    def __len__(self) -> int:
        return len(self._listings)

    def all(self) -> list[Listing]:
        return list(self._listings)

    def get(self, listing_id: str) -> Listing | None:
        for listing in self._listings:
            if listing.id == listing_id:
                return listing
        return None

    def add(self, listing: Listing) -> None:
        self._listings.insert(0, listing)
        LOGGER.debug("listing added id=%s total=%d", listing.id, len(self._listings))

    def remove(self, listing_id: str, requester_id: str) -> bool:
        """Delete a listing owned by requester_id. Anything else is a no-op."""
        listing = self.get(listing_id)
        if listing is None:
            return False
        if listing.seller.id != requester_id:
            LOGGER.info("ignored delete of listing id=%s by non-owner", listing_id)
            return False
        self._listings = [item for item in self._listings if item.id != listing_id]
        return True

    def newest_first(self) -> list[Listing]:
        return sorted(self._listings, key=lambda x: x.post_date, reverse=True)

    def by_seller(self, seller_id: str) -> list[Listing]:
        return [listing for listing in self._listings if listing.seller.id == seller_id]

    def featured(self) -> list[Listing]:
        return [listing for listing in self._listings if listing.featured]
