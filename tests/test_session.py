"""Session wiring: filters drive suggestions, chips drive facets."""

from __future__ import annotations

import pytest

from classifieds.llm.client import SuggestionClient
from classifieds.search import saved_search
from classifieds.search.suggestions import SuggestionCoordinator, SuggestionStatus
from classifieds.services.session import Session


def _session(provider, **kwargs) -> Session:
    coordinator = SuggestionCoordinator(provider, debounce_seconds=0.02, timeout_seconds=1.0)
    return Session(provider=provider, coordinator=coordinator, **kwargs)


def _ids(listings) -> list[str]:
    return [x.id for x in listings]


def test_default_store_is_seeded_with_samples(static_provider) -> None:
    session = _session(static_provider([]))
    assert len(session.store) > 0
    assert _ids(session.visible_listings()) == _ids(session.store.all())
    assert not session.is_search_active()


@pytest.mark.asyncio
async def test_term_change_refreshes_chips_and_clears_facets(catalog, listings, static_provider) -> None:
    session = _session(static_provider(["Brand New", "Sealed"]), catalog=catalog, listings=listings)
    session.set_term("iphone")
    assert session.busy
    assert await session.wait_for_suggestions(1.0) == ["Brand New", "Sealed"]
    assert session.visible_chips() == ["Brand New", "Sealed"]

    assert session.toggle_facet("Brand New")
    assert session.state.active_facets == ["Brand New"]
    assert _ids(session.visible_listings()) == ["iphone"]

    session.set_term("iphone 14")
    assert session.state.active_facets == []
    assert session.suggestions == []
    assert session.busy
    await session.wait_for_suggestions(1.0)
    await session.aclose()


@pytest.mark.asyncio
async def test_toggle_rejects_facets_not_on_offer(catalog, listings, static_provider) -> None:
    session = _session(static_provider(["Brand New"]), catalog=catalog, listings=listings)
    session.set_term("tv")
    await session.wait_for_suggestions(1.0)

    assert not session.toggle_facet("Refurbished")
    assert session.state.active_facets == []
    await session.aclose()


@pytest.mark.asyncio
async def test_location_cascade_filters_listings(catalog, listings, static_provider) -> None:
    session = _session(static_provider([]), catalog=catalog, listings=listings)
    session.select_main_category("for-sale")
    session.select_state("Lagos")
    assert "Ikeja" in session.cities()
    assert _ids(session.visible_listings()) == ["iphone"]

    session.select_state("FCT")
    session.select_city("Wuse")
    assert _ids(session.visible_listings()) == ["tv"]

    session.reset()
    assert _ids(session.visible_listings()) == ["iphone", "flat", "tv", "sofa"]
    await session.aclose()


@pytest.mark.asyncio
async def test_open_saved_search_pins_facets_and_refetches(catalog, listings, static_provider) -> None:
    provider = static_provider(["Fabric"])
    session = _session(provider, catalog=catalog, listings=listings)
    saved = saved_search.decode(
        '{"id": "search-1", "name": "Sofas", "searchTerm": "sofa",'
        ' "location": {"state": "Oyo", "city": "Ibadan North"},'
        ' "category": {"main": "for-sale", "sub": "for-sale-furniture"},'
        ' "filters": ["Leather"]}'
    )

    state = session.open_saved_search(saved)
    assert state.active_facets == ["Leather"]
    assert session.busy
    assert session.visible_chips() == ["Leather"]
    assert _ids(session.visible_listings()) == ["sofa"]

    assert await session.wait_for_suggestions(1.0) == ["Fabric"]
    assert session.visible_chips() == ["Leather", "Fabric"]
    assert provider.calls == [("sofa", "Furniture")]

    assert session.toggle_facet("Leather")
    assert session.state.active_facets == []
    await session.aclose()


@pytest.mark.asyncio
async def test_save_search_round_trip(catalog, listings, static_provider) -> None:
    session = _session(static_provider([]), catalog=catalog, listings=listings)
    session.set_term("brand")
    session.select_state("FCT")
    assert session.save_search("   ") is None

    saved = session.save_search("New in Abuja")
    assert saved is not None
    expected = _ids(session.visible_listings())

    session.reset()
    session.open_saved_search(saved)
    assert _ids(session.visible_listings()) == expected == ["tv"]
    await session.aclose()


def test_only_the_seller_can_delete(catalog, listings, listing_factory, static_provider) -> None:
    session = _session(static_provider([]), catalog=catalog, listings=listings)
    session.post_listing(listing_factory("bike", "Mountain Bike", seller_id="ada@example.com"))
    assert _ids(session.store.all())[0] == "bike"

    assert not session.delete_listing("bike", "someone@example.com")
    assert session.store.get("bike") is not None

    assert session.delete_listing("bike", "ada@example.com")
    assert session.store.get("bike") is None


@pytest.mark.asyncio
async def test_unconfigured_client_settles_as_failure(catalog, listings) -> None:
    client = SuggestionClient(api_key="")
    assert not client.configured
    session = _session(client, catalog=catalog, listings=listings)

    session.set_term("iphone")
    assert await session.wait_for_suggestions(1.0) == []
    assert session.coordinator.status is SuggestionStatus.FAILED
    assert not session.busy
    assert _ids(session.visible_listings()) == ["iphone"]
    await session.aclose()
