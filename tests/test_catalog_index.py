import pytest

from classifieds.catalog.index import CatalogIndex
from classifieds.schemas import Category


def test_subcategories_and_parent_lookup(catalog):
    subs = [sub.id for sub in catalog.subcategories_of("housing")]
    assert subs[0] == "housing-apartments"
    assert "housing-rooms" in subs
    assert catalog.parent_of("for-sale-electronics") == "for-sale"
    assert catalog.parent_of("housing-apartments") == "housing"


def test_unknown_keys_are_empty_or_none(catalog):
    assert catalog.subcategories_of("does-not-exist") == []
    assert catalog.subcategories_of(None) == []
    assert catalog.parent_of("for-sale-cell-phones") is None
    assert catalog.parent_of(None) is None
    assert catalog.cities_of("Atlantis") == []
    assert catalog.cities_of(None) == []


def test_cities_are_scoped_to_state(catalog):
    assert catalog.country == "Nigeria"
    assert "Ikeja" in catalog.cities_of("Lagos")
    assert "Eti Osa" in catalog.cities_of("Lagos")
    assert "Ikeja" not in catalog.cities_of("FCT")
    assert "Lagos" in catalog.states()


def test_category_name_prefers_subcategory(catalog):
    assert catalog.category_name("for-sale", "for-sale-electronics") == "Electronics"
    assert catalog.category_name("for-sale", None) == "For Sale"
    assert catalog.category_name(None, None) == ""


def test_other_country_scope():
    kenya = CatalogIndex.for_country("Kenya")
    assert kenya.cities_of("Nairobi")[0] == "Kilimani"
    assert kenya.cities_of("Lagos") == []
    assert "Nigeria" in CatalogIndex.countries()


def test_duplicate_subcategory_ids_rejected():
    categories = [
        Category.model_validate({"id": "a", "name": "A", "subcategories": [{"id": "x", "name": "X"}]}),
        Category.model_validate({"id": "b", "name": "B", "subcategories": [{"id": "x", "name": "X"}]}),
    ]
    with pytest.raises(ValueError):
        CatalogIndex(categories)
