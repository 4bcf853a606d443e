"""Debounced, single-flight facet suggestions for the current query.

Lifecycle per query key: idle -> debouncing -> fetching -> settled | failed.
Every query change restarts the debounce timer and bumps a generation
counter. A request is issued only once the timer elapses, and its response
is applied only if neither the key nor the generation moved in the meantime;
otherwise it is reported as ``Stale`` and dropped without touching state.
In-flight requests are not cancelled on new input, only by ``aclose`` or by
the request timeout.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Union

from classifieds.config import settings
from classifieds.search.filters import QueryKey

LOGGER = logging.getLogger(__name__)


class FacetProvider(Protocol):
    async def suggest_facets(self, search_term: str, category_name: str) -> list[str]: ...


class SuggestionStatus(str, Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    FETCHING = "fetching"
    SETTLED = "settled"
    FAILED = "failed"


@dataclass(frozen=True)
class Stale:
    key: QueryKey


@dataclass(frozen=True)
class Success:
    facets: tuple[str, ...]


@dataclass(frozen=True)
class Failure:
    reason: str


SuggestionOutcome = Union[Stale, Success, Failure]


def clean_facets(facets: object, limit: int) -> tuple[str, ...]:
    if not isinstance(facets, (list, tuple)):
        raise TypeError(f"expected a list of facets, got {type(facets).__name__}")
    cleaned: list[str] = []
    for facet in facets:
        if not isinstance(facet, str):
            continue
        text = " ".join(facet.split())
        if text and text not in cleaned:
            cleaned.append(text)
    return tuple(cleaned[:limit])


class SuggestionCoordinator:
    def __init__(
        self,
        provider: FacetProvider,
        *,
        debounce_seconds: float | None = None,
        timeout_seconds: float | None = None,
        max_suggestions: int | None = None,
    ) -> None:
        self.provider = provider
        self.debounce_seconds = (
            settings.suggestion_debounce_ms / 1000.0 if debounce_seconds is None else debounce_seconds
        )
        self.timeout_seconds = (
            settings.suggestion_timeout_seconds if timeout_seconds is None else timeout_seconds
        )
        self.max_suggestions = settings.max_suggestions if max_suggestions is None else max_suggestions
        self.request_count = 0
        self._key = QueryKey()
        self._generation = 0
        self._status = SuggestionStatus.IDLE
        self._suggestions: tuple[str, ...] = ()
        self._debounce_task: asyncio.Task | None = None
        self._inflight: set[asyncio.Task] = set()
        self._idle = asyncio.Event()
        self._idle.set()
        self._listeners: list[Callable[[], None]] = []

    @property
    def status(self) -> SuggestionStatus:
        return self._status

    @property
    def suggestions(self) -> list[str]:
        return list(self._suggestions)

    @property
    def busy(self) -> bool:
        return self._status in {SuggestionStatus.DEBOUNCING, SuggestionStatus.FETCHING}

    @property
    def query_key(self) -> QueryKey:
        return self._key

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def notify(self, key: QueryKey) -> None:
        """Record a query change and (re)start the debounce timer.

        Must be called with a running event loop.
        """

        loop = asyncio.get_running_loop()
        self._generation += 1
        self._key = key
        self._suggestions = ()
        self._cancel_debounce()
        self._status = SuggestionStatus.DEBOUNCING
        self._idle.clear()
        self._debounce_task = loop.create_task(self._debounce(self._generation))
        LOGGER.debug("debounce restarted key=%r generation=%d", key, self._generation)
        self._changed()

    async def wait_settled(self, timeout: float | None = None) -> list[str]:
        """Wait until the current key leaves the busy states."""
        await asyncio.wait_for(self._idle.wait(), timeout)
        return self.suggestions

    def deliver(self, key: QueryKey, generation: int, outcome: SuggestionOutcome) -> SuggestionOutcome:
        """Apply a response if it still belongs to the current query."""
        if key != self._key or generation != self._generation:
            LOGGER.debug("discarded stale suggestions key=%r current=%r", key, self._key)
            return Stale(key)
        if isinstance(outcome, Success):
            self._status = SuggestionStatus.SETTLED
            self._suggestions = outcome.facets
        else:
            LOGGER.warning("facet suggestions failed for key=%r: %s", key, outcome)
            self._status = SuggestionStatus.FAILED
            self._suggestions = ()
        self._idle.set()
        self._changed()
        return outcome

    async def aclose(self) -> None:
        self._cancel_debounce()
        tasks = list(self._inflight)
        if self._debounce_task is not None:
            tasks.append(self._debounce_task)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._inflight.clear()
        self._debounce_task = None
        if self.busy:
            self._status = SuggestionStatus.IDLE
        self._idle.set()

    # -----------------------------
    # Internals
    # -----------------------------

    async def _debounce(self, generation: int) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if generation != self._generation:
            return
        key = self._key
        if key.is_empty:
            self._status = SuggestionStatus.IDLE
            self._suggestions = ()
            self._idle.set()
            self._changed()
            return
        self._status = SuggestionStatus.FETCHING
        self.request_count += 1
        LOGGER.debug("requesting facet suggestions key=%r", key)
        task = asyncio.create_task(self._fetch(key, generation))
        self._inflight.add(task)
        task.add_done_callback(self._inflight.discard)
        self._changed()

    async def _fetch(self, key: QueryKey, generation: int) -> SuggestionOutcome:
        try:
            facets = await asyncio.wait_for(
                self.provider.suggest_facets(key.search_term, key.category_name),
                timeout=self.timeout_seconds,
            )
            outcome: SuggestionOutcome = Success(clean_facets(facets, self.max_suggestions))
        except asyncio.TimeoutError:
            outcome = Failure(f"timed out after {self.timeout_seconds}s")
        except Exception as exc:
            # Suggestions are optional; any provider error degrades to no chips.
            outcome = Failure(f"{exc.__class__.__name__}: {exc}")
        return self.deliver(key, generation, outcome)

    def _cancel_debounce(self) -> None:
        task = self._debounce_task
        if task is not None and not task.done():
            task.cancel()

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()
