"""Run the fixed SWAPI fetch sequence and emit the rendered report."""
from __future__ import annotations

from typing import Any, Callable, List, Optional

from swapi_digest import formatting, swapi_client
from swapi_digest.app_types import FetchContext, RunResult
from swapi_digest.config import Settings
from swapi_digest.errors import FetchError
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="orchestrator")

STARSHIP_LIMIT = 3
VEHICLE_LIMIT = 4

STARSHIPS_PATH = "starships/?page=1"
PLANETS_PATH = "planets/?page=1"
FILMS_PATH = "films/"


class Orchestrator:
    """
    Owns the fetch context and runs one sequential fetch/render pass per call.

    The only state carried between runs is the cache, the counters and
    `last_id`, which selects the person and vehicle to fetch. After vehicle
    VEHICLE_LIMIT has been shown no further vehicle is fetched.
    """

    def __init__(
        self,
        context: FetchContext,
        *,
        omit_falsy_fields: bool = True,
        emit: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.context = context
        self.omit_falsy_fields = omit_falsy_fields
        self._emit = emit or print

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "Orchestrator":
        return cls(
            FetchContext.from_settings(settings),
            omit_falsy_fields=settings.omit_falsy_fields,
            **kwargs,
        )

    def _fetch(self, path: str) -> Any:
        payload = swapi_client.fetch(path, self.context)
        self.context.metrics.add_bytes(formatting.payload_size(payload))
        return payload

    def _out(self, lines: List[str], collected: List[str]) -> None:
        for line in lines:
            collected.append(line)
            self._emit(line)

    def run(self) -> RunResult:
        """Fetch and print person, starships, planets, films and maybe a vehicle."""
        ctx = self.context
        metrics = ctx.metrics
        lines: List[str] = []
        vehicle_id: Optional[int] = None

        try:
            if ctx.debug:
                logger.info("Starting data fetch...")
            metrics.record_request()

            person = self._fetch(f"people/{metrics.last_id}")
            self._out(formatting.render_character(person), lines)

            starships = self._fetch(STARSHIPS_PATH)
            self._out(
                formatting.render_starships(
                    starships, STARSHIP_LIMIT, omit_falsy=self.omit_falsy_fields
                ),
                lines,
            )

            planets = self._fetch(PLANETS_PATH)
            self._out(formatting.render_planets(planets), lines)

            films = self._fetch(FILMS_PATH)
            self._out(formatting.render_films(films["results"]), lines)

            if metrics.last_id <= VEHICLE_LIMIT:
                vehicle = self._fetch(f"vehicles/{metrics.last_id}")
                vehicle_id = metrics.last_id
                self._out(
                    formatting.render_detail_block(
                        vehicle, "Vehicle", omit_falsy=self.omit_falsy_fields
                    ),
                    lines,
                )
                metrics.advance_last_id()

            if ctx.debug:
                self._out(formatting.render_stats(ctx.snapshot()), lines)

        except FetchError as exc:
            logger.error("Error: %s", exc.message)
            metrics.record_error()
            return RunResult(ok=False, lines=lines, error=exc.message, vehicle_id=vehicle_id)
        except (KeyError, TypeError, AttributeError) as exc:
            message = f"Unexpected payload shape: {exc!r}"
            logger.error("Error: %s", message)
            metrics.record_error()
            return RunResult(ok=False, lines=lines, error=message, vehicle_id=vehicle_id)

        return RunResult(ok=True, lines=lines, vehicle_id=vehicle_id)
