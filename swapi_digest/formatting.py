"""Render SWAPI payloads as console text lines."""
from __future__ import annotations

import datetime as dt
import json
import re
from typing import Any, Iterable, List, Mapping, Optional

from swapi_digest.metrics import StatsSnapshot

POPULATION_THRESHOLD = 1_000_000_000
DIAMETER_THRESHOLD_KM = 10_000
UNKNOWN = "unknown"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def payload_size(payload: Any) -> int:
    """Length of the compact JSON serialization of a payload."""
    return len(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))


def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the integer prefix of a SWAPI numeric string.

    "1000000000" -> 1000000000, "118000 km" -> 118000, "unknown" -> None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else None


def _count(value: Any) -> int:
    return len(value) if isinstance(value, (list, tuple)) else 0


def render_field(label: str, value: Any, *, omit_falsy: bool = True) -> List[str]:
    """Return ['<label>: <value>'] or nothing when the value should be hidden."""
    if value is None:
        return []
    if omit_falsy and not value:
        return []
    return [f"{label}: {value}"]


def render_character(person: Mapping[str, Any]) -> List[str]:
    lines = [
        f"Character: {person['name']}",
        f"Height: {person.get('height')}",
        f"Mass: {person.get('mass')}",
        f"Birthday: {person.get('birth_year')}",
    ]
    films = _count(person.get("films"))
    if films:
        lines.append(f"Appears in {films} films")
    return lines


def _format_cost(cost: Any) -> Optional[str]:
    if cost == UNKNOWN:
        return UNKNOWN
    if cost is None:
        return None
    return f"{cost} credits"


def render_detail_block(
    item: Mapping[str, Any],
    kind: str,
    index: Optional[int] = None,
    *,
    omit_falsy: bool = True,
) -> List[str]:
    """
    Render the shared starship/vehicle block.

    With an index the title is '<kind> <index + 1>', otherwise 'Featured <kind>'.
    """
    title = f"{kind} {index + 1}" if index is not None else f"Featured {kind}"
    pilots = item.get("pilots")
    fields = [
        ("Name", item.get("name")),
        ("Model", item.get("model")),
        ("Manufacturer", item.get("manufacturer")),
        ("Cost", _format_cost(item.get("cost_in_credits"))),
        ("Length", item.get("length")),
        ("Crew Required", item.get("crew")),
        ("Passengers", item.get("passengers")),
        ("Speed", item.get("max_atmosphering_speed")),
        ("Hyperdrive Rating", item.get("hyperdrive_rating")),
        ("Pilots", len(pilots) if isinstance(pilots, list) else None),
    ]
    lines = ["", f"{title}:"]
    for label, value in fields:
        lines.extend(render_field(label, value, omit_falsy=omit_falsy))
    return lines


def render_starships(page: Mapping[str, Any], limit: int, *, omit_falsy: bool = True) -> List[str]:
    lines = ["", f"Total Starships: {page['count']}"]
    for i, ship in enumerate(page["results"][:limit]):
        lines.extend(render_detail_block(ship, "Starship", i, omit_falsy=omit_falsy))
    return lines


def is_large_populated(planet: Mapping[str, Any]) -> bool:
    """True when both population and diameter are known and strictly above the thresholds."""
    population = planet.get("population")
    diameter = planet.get("diameter")
    if population == UNKNOWN or diameter == UNKNOWN:
        return False
    pop = parse_leading_int(population)
    dia = parse_leading_int(diameter)
    if pop is None or dia is None:
        return False
    return pop > POPULATION_THRESHOLD and dia > DIAMETER_THRESHOLD_KM


def render_planet(planet: Mapping[str, Any]) -> List[str]:
    lines = [
        f"{planet.get('name')} - Pop: {planet.get('population')}",
        f"   Diameter: {planet.get('diameter')} - Climate: {planet.get('climate')}",
    ]
    films = _count(planet.get("films"))
    if films:
        lines.append(f"   Appears in {films} films")
    return lines


def render_planets(page: Mapping[str, Any]) -> List[str]:
    lines = ["", "Large populated planets:"]
    for planet in page["results"]:
        if is_large_populated(planet):
            lines.extend(render_planet(planet))
    return lines


def _release_key(film: Mapping[str, Any]) -> tuple:
    try:
        return (0, dt.date.fromisoformat(str(film.get("release_date"))))
    except ValueError:
        # unparseable dates keep their relative order after the dated films
        return (1, dt.date.max)


def sort_films_by_release(films: Iterable[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """Stable ascending sort on the parsed release date."""
    return sorted(films, key=_release_key)


def render_films(films: Iterable[Mapping[str, Any]]) -> List[str]:
    lines = ["", "Star Wars Films in chronological order:"]
    for rank, film in enumerate(sort_films_by_release(films), start=1):
        lines.extend([
            f"{rank}. {film['title']} ({film['release_date']})",
            f"   Director: {film.get('director')}",
            f"   Producer: {film.get('producer')}",
            f"   Characters: {_count(film.get('characters'))}",
            f"   Planets: {_count(film.get('planets'))}",
        ])
    return lines


def render_stats(snapshot: StatsSnapshot) -> List[str]:
    return [
        "",
        "Stats:",
        f"API Calls: {snapshot.api_calls}",
        f"Cache Size: {snapshot.cache_size}",
        f"Total Data Size: {snapshot.data_size} bytes",
        f"Error Count: {snapshot.errors}",
    ]
