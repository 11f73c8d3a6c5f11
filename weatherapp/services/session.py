from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, replace
from typing import Literal

from weatherapp.core.errors import UNEXPECTED_ERROR_PREFIX
from weatherapp.models.weather import WeatherDisplayData, WeatherOutcome

logger = logging.getLogger(__name__)

SessionStatus = Literal["idle", "loading", "success", "error"]
Fetcher = Callable[[str], Awaitable[WeatherOutcome]]


@dataclass(frozen=True)
class SessionState:
    status: SessionStatus = "idle"
    city: str = ""
    generation: int = 0
    data: WeatherDisplayData | None = None
    error: str | None = None


class WeatherSearchSession:
    """Holds the result of the latest city search.

    Every search gets a new generation number. A result is applied only if its
    generation is still the newest when it resolves; older in-flight searches
    are cancelled and their results dropped.
    """

    def __init__(self) -> None:
        self._state = SessionState()
        self._generation = 0
        self._task: asyncio.Task[WeatherOutcome] | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    async def search(self, city: str, fetch: Fetcher) -> SessionState | None:
        """Run ``fetch`` for ``city`` and apply its outcome.

        Returns the new state, or ``None`` when the city is blank or the
        search was superseded by a newer one.
        """
        if not city or not city.strip():
            return None

        self._generation += 1
        generation = self._generation
        if self._task is not None and not self._task.done():
            self._task.cancel()

        previous = self._state
        self._state = SessionState(status="loading", city=city.strip(), generation=generation)
        task = asyncio.ensure_future(fetch(city))
        self._task = task

        try:
            outcome = await task
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug("Search %d for %r cancelled by a newer search", generation, city)
                return None
            self._state = previous
            raise
        except Exception as e:  # noqa: BLE001 - surfaced as an error state
            return self._apply_error(generation, f"{UNEXPECTED_ERROR_PREFIX}{e}")

        if generation != self._generation:
            logger.debug("Discarding stale result of search %d for %r", generation, city)
            return None
        return self._apply(generation, outcome)

    def _apply(self, generation: int, outcome: WeatherOutcome) -> SessionState:
        if outcome.error is not None:
            return self._apply_error(generation, outcome.error.message)
        self._state = replace(self._state, status="success", data=outcome.data, error=None)
        return self._state

    def _apply_error(self, generation: int, message: str) -> SessionState | None:
        if generation != self._generation:
            return None
        self._state = replace(self._state, status="error", data=None, error=message)
        return self._state
