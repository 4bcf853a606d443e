from __future__ import annotations

import logging
import os
from urllib.parse import urlparse

import httpx
from openai import AsyncOpenAI, OpenAIError

from classifieds.catalog.index import CatalogIndex
from classifieds.config import settings
from classifieds.llm.parser import (
    MalformedSuggestionError,
    parse_category_output,
    parse_facet_output,
    parse_text_output,
)
from classifieds.llm.prompts import (
    CATEGORY_SUGGESTION_SYSTEM_PROMPT,
    DESCRIPTION_SYSTEM_PROMPT,
    FACET_SUGGESTION_SYSTEM_PROMPT,
    PRICE_SUGGESTION_SYSTEM_PROMPT,
)

LOGGER = logging.getLogger(__name__)


class SuggestionProviderError(RuntimeError):
    """Raised when the model cannot produce a usable suggestion."""


class SuggestionClient:
    """LLM-backed suggestion provider for search filters and ad drafting."""

    def __init__(
        self,
        api_key: str | None = None,
        *,
        model: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        max_suggestions: int | None = None,
        client: object | None = None,
    ) -> None:
        self.model = model or settings.openai_model
        self.timeout = settings.suggestion_timeout_seconds if timeout_seconds is None else timeout_seconds
        self.max_suggestions = settings.max_suggestions if max_suggestions is None else max_suggestions
        self.client = client
        self.last_source = "fallback"
        self.last_error = ""

        key = settings.openai_api_key if api_key is None else api_key
        if self.client is None and key:
            url = settings.openai_base_url if base_url is None else base_url
            kwargs = {
                "api_key": key,
                "max_retries": 0,
                "http_client": httpx.AsyncClient(
                    timeout=httpx.Timeout(connect=5.0, read=float(self.timeout), write=5.0, pool=5.0)
                ),
            }
            if self._is_valid_http_url(url):
                kwargs["base_url"] = url
            else:
                # Let the SDK use its default URL when direct API is intended.
                os.environ.pop("OPENAI_BASE_URL", None)
            self.client = AsyncOpenAI(**kwargs)

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def suggest_facets(self, search_term: str, category_name: str) -> list[str]:
        user_text = (
            f'Search term: "{search_term.strip() or "(none)"}"\n'
            f'Category: "{category_name.strip() or "(any)"}"\n'
            f"Suggest up to {self.max_suggestions} filters."
        )
        raw = await self._complete(FACET_SUGGESTION_SYSTEM_PROMPT, user_text, max_tokens=400)
        try:
            return parse_facet_output(raw, limit=self.max_suggestions)
        except MalformedSuggestionError as exc:
            self.last_source = "fallback"
            self.last_error = f"MalformedOutput: {exc}"
            raise SuggestionProviderError(self.last_error) from exc

    async def suggest_category(self, title: str, catalog: CatalogIndex) -> str:
        """Return the best subcategory id for an ad title, or "" if none is usable."""
        if not self.client or not title.strip():
            return ""
        subcategories = [sub for category in catalog.categories() for sub in category.subcategories]
        options = ", ".join(f"{sub.id} ({sub.name})" for sub in subcategories)
        raw = await self._complete(
            CATEGORY_SUGGESTION_SYSTEM_PROMPT,
            f'Ad title: "{title.strip()}"\nCategories: [{options}]',
            max_tokens=200,
        )
        category_id = parse_category_output(raw, {sub.id for sub in subcategories})
        if not category_id:
            LOGGER.warning("model returned an invalid category id: %r", raw[:80])
        return category_id

    async def suggest_price(self, title: str, description: str) -> str:
        raw = await self._complete(
            PRICE_SUGGESTION_SYSTEM_PROMPT,
            f'Ad title: "{title.strip()}"\nDescription: "{description.strip()}"',
            max_tokens=200,
        )
        return parse_text_output(raw)

    async def generate_description(self, title: str, keywords: str) -> str:
        raw = await self._complete(
            DESCRIPTION_SYSTEM_PROMPT,
            f'Write the description for "{title.strip()}" with these key features: "{keywords.strip()}".',
            max_tokens=600,
        )
        return parse_text_output(raw)

    async def aclose(self) -> None:
        close = getattr(self.client, "close", None)
        if close is not None:
            await close()

    async def _complete(self, system_prompt: str, user_text: str, max_tokens: int) -> str:
        self.last_error = ""
        if not self.client:
            self.last_source = "fallback"
            self.last_error = "OPENAI_API_KEY is not configured."
            raise SuggestionProviderError(self.last_error)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_completion_tokens=max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_text},
                ],
            )
        except OpenAIError as exc:
            self.last_source = "fallback"
            self.last_error = f"{exc.__class__.__name__}: {exc}"
            raise SuggestionProviderError(self.last_error) from exc

        text = (response.choices[0].message.content or "").strip()
        if not text:
            self.last_source = "fallback"
            self.last_error = "EmptyResponse: model returned no text."
            raise SuggestionProviderError(self.last_error)
        self.last_source = "llm"
        return text

    @staticmethod
    def _is_valid_http_url(value: str) -> bool:
        if not value:
            return False
        parsed = urlparse(value)
        return parsed.scheme in {"http", "https"} and bool(parsed.netloc)
