"""Capture, restore and JSON storage form of saved searches."""

from __future__ import annotations

import json

import pytest

from classifieds.schemas import FilterState, SavedSearch
from classifieds.search import saved_search
from classifieds.search.filters import filter_listings


@pytest.mark.parametrize("name", ["", "   ", None])
def test_capture_rejects_blank_names(name) -> None:
    with pytest.raises(saved_search.InvalidSearchNameError):
        saved_search.capture(FilterState(search_term="iphone"), name)


def test_capture_copies_matching_fields() -> None:
    state = FilterState(
        search_term="iphone",
        main_category="for-sale",
        sub_category="for-sale-electronics",
        state="Lagos",
        city="Ikeja",
        active_facets=["Brand New"],
    )
    saved = saved_search.capture(state, "  Phones in Ikeja ", search_id="search-1")
    assert saved.id == "search-1"
    assert saved.name == "Phones in Ikeja"
    assert saved.search_term == "iphone"
    assert saved.location.state == "Lagos"
    assert saved.location.city == "Ikeja"
    assert saved.category.main == "for-sale"
    assert saved.category.sub == "for-sale-electronics"
    assert saved.filters == ["Brand New"]


def test_generated_ids_are_unique() -> None:
    first = saved_search.capture(FilterState(), "a")
    second = saved_search.capture(FilterState(), "a")
    assert first.id.startswith("search-")
    assert first.id != second.id


def test_restore_filters_the_same_listings(catalog, listings) -> None:
    state = FilterState(
        search_term="brand",
        main_category="for-sale",
        sub_category="for-sale-electronics",
        state="Lagos",
        city="Ikeja",
        active_facets=["Under ₦100,000"],
    )
    restored = saved_search.restore(saved_search.capture(state, "deal"), catalog)
    assert restored == state
    assert filter_listings(listings, restored, catalog) == filter_listings(listings, state, catalog)
    assert [x.id for x in filter_listings(listings, restored, catalog)] == ["iphone"]


def test_restore_derives_main_category_from_subcategory(catalog) -> None:
    saved = SavedSearch(
        id="search-2",
        name="rooms",
        category={"main": "for-sale", "sub": "housing-rooms"},
    )
    restored = saved_search.restore(saved, catalog)
    assert restored.main_category == "housing"
    assert restored.sub_category == "housing-rooms"


def test_restore_keeps_main_category_when_subcategory_is_unknown(catalog, listings) -> None:
    saved = SavedSearch(
        id="search-5",
        name="housing",
        category={"main": "housing", "sub": "housing-retired"},
    )
    restored = saved_search.restore(saved, catalog)
    assert restored.main_category == "housing"
    assert restored.sub_category is None
    assert [x.id for x in filter_listings(listings, restored, catalog)] == ["flat"]


def test_restore_drops_city_without_matching_state(catalog) -> None:
    orphan = SavedSearch(id="s", name="x", location={"state": "", "city": "Ikeja"})
    assert saved_search.restore(orphan, catalog).city is None

    mismatched = SavedSearch(id="s", name="x", location={"state": "FCT", "city": "Ikeja"})
    restored = saved_search.restore(mismatched, catalog)
    assert restored.state == "FCT"
    assert restored.city is None


def test_encode_uses_camel_case_and_decodes_back() -> None:
    saved = saved_search.capture(
        FilterState(search_term="sofa", state="Oyo", city="Ibadan North", active_facets=["Leather"]),
        "Sofas",
        search_id="search-3",
    )
    raw = saved_search.encode(saved)
    payload = json.loads(raw)
    assert payload["searchTerm"] == "sofa"
    assert "search_term" not in payload
    assert payload["location"] == {"state": "Oyo", "city": "Ibadan North"}
    assert payload["category"] == {"main": None, "sub": None}
    assert saved_search.decode(raw) == saved


def test_decode_accepts_stored_form() -> None:
    raw = json.dumps(
        {
            "id": "search-4",
            "name": "Cars",
            "searchTerm": "toyota",
            "location": {"state": "Lagos", "city": ""},
            "category": {"main": "for-sale", "sub": "for-sale-cars-trucks"},
            "filters": [],
        }
    )
    saved = saved_search.decode(raw)
    assert saved.search_term == "toyota"
    assert saved.category.sub == "for-sale-cars-trucks"
