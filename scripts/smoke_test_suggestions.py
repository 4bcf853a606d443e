import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from classifieds.catalog.index import CatalogIndex
from classifieds.llm.client import SuggestionClient, SuggestionProviderError


async def main() -> None:
    client = SuggestionClient()
    catalog = CatalogIndex.for_country()
    try:
        for term, category in [("iphone", "Electronics"), ("", "Apartments/Housing"), ("toyota", "")]:
            try:
                facets = await client.suggest_facets(term, category)
            except SuggestionProviderError as exc:
                print(f"term={term!r} category={category!r} error={exc}")
                continue
            print(f"term={term!r} category={category!r} facets={facets}")
            print(f"last_source={client.last_source}")
            print("---")
        suggested = await client.suggest_category("Brand New iPhone 14 Pro Max", catalog)
        print(f"suggested_category={suggested!r}")
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
