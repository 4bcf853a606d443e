from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from classifieds.catalog.index import CatalogIndex
from classifieds.schemas import Listing


class ScriptedProvider:
    """Facet provider whose responses are released by the test."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self._futures: list[asyncio.Future] = []

    async def suggest_facets(self, search_term: str, category_name: str) -> list[str]:
        future = asyncio.get_running_loop().create_future()
        self.calls.append((search_term, category_name))
        self._futures.append(future)
        return await future

    def resolve(self, index: int, facets: list[str]) -> None:
        self._futures[index].set_result(facets)

    def fail(self, index: int, exc: Exception) -> None:
        self._futures[index].set_exception(exc)


class StaticProvider:
    def __init__(self, facets: list[str]) -> None:
        self.facets = facets
        self.calls: list[tuple[str, str]] = []

    async def suggest_facets(self, search_term: str, category_name: str) -> list[str]:
        self.calls.append((search_term, category_name))
        return list(self.facets)


def make_listing(
    listing_id: str,
    title: str,
    *,
    description: str = "",
    category_id: str = "for-sale-electronics",
    state: str = "Lagos",
    city: str = "Ikeja",
    seller_id: str = "seller@example.com",
    days_ago: int = 0,
    featured: bool = False,
) -> Listing:
    return Listing(
        id=listing_id,
        title=title,
        description=description,
        price="₦100,000",
        category_id=category_id,
        location={"country": "Nigeria", "state": state, "city": city},
        seller={"id": seller_id, "name": seller_id.split("@")[0]},
        post_date=datetime.now(tz=timezone.utc) - timedelta(days=days_ago),
        featured=featured,
    )


@pytest.fixture
def catalog() -> CatalogIndex:
    return CatalogIndex.for_country("Nigeria")


@pytest.fixture
def listings() -> list[Listing]:
    return [
        make_listing(
            "iphone",
            "iPhone 14 Pro Max",
            description="Brand New, sealed. Under ₦100,000 deal",
            state="Lagos",
            city="Ikeja",
        ),
        make_listing(
            "flat",
            "3 Bedroom Flat for Rent",
            description="Spacious flat in Lekki Phase 1",
            category_id="housing-apartments",
            state="Lagos",
            city="Eti Osa",
        ),
        make_listing(
            "tv",
            "Hisense 55 inch Smart TV",
            description="Brand new in box",
            state="FCT",
            city="Wuse",
        ),
        make_listing(
            "sofa",
            "Leather Sofa Set",
            description="Barely used, relocating",
            category_id="for-sale-furniture",
            state="Oyo",
            city="Ibadan North",
        ),
    ]


@pytest.fixture
def scripted_provider() -> ScriptedProvider:
    return ScriptedProvider()


@pytest.fixture
def wait_until():
    async def _wait(predicate, timeout: float = 1.0) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while not predicate():
            if loop.time() > deadline:
                raise AssertionError("condition not reached in time")
            await asyncio.sleep(0.002)

    return _wait


@pytest.fixture
def listing_factory():
    return make_listing


@pytest.fixture
def static_provider():
    return StaticProvider
