"""
Station selection helpers for basket filtering, exclusion, lookup and line ordering.

These pure functions take the stations to work on explicitly, so they can be
tested without loading the packaged catalogue. StationCatalogue binds them to
the process-wide catalogue.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from functools import lru_cache
from typing import TypeVar

from pyuca import Collator

from station_basket.models.station import TFL_LINES, Mode, RiverBank, Station

E = TypeVar("E", bound=enum.Enum)


def identity_of(station: Station) -> str:
    """
    Get the identity string of a station.

    The identity is the station name, followed by the disambiguation in
    parentheses when one is present. It is the only key used to compare
    stations.

    Examples:
        >>> identity_of(Station(name="Euston", disambiguation=None, ...))
        'Euston'
        >>> identity_of(Station(name="Euston", disambiguation="Underground", ...))
        'Euston (Underground)'
    """
    return str(station)


def _match(wanted: Iterable[object] | None, values: Sequence[object]) -> bool:
    """True if no constraint is given, or any wanted value is in values."""
    return wanted is None or any(element in values for element in wanted)


def _coerce(values: Iterable[E | str] | None, enum_cls: type[E]) -> list[E] | None:
    """Convert enum values or their string values into enum members."""
    if values is None:
        return None
    return [enum_cls(value) for value in values]


def filter_basket(
    stations: Iterable[Station],
    zones: Iterable[int] | None = None,
    modes: Iterable[Mode | str] | None = None,
    river_banks: Iterable[RiverBank | str] | None = None,
    lines: Iterable[str] | None = None,
) -> list[Station]:
    """
    Get all stations within the given zones and modes, on the given sides of
    the Thames, serving the given lines.

    Each criterion left as None is not applied. Otherwise a station passes the
    criterion when it shares at least one value with it, so an empty criterion
    matches nothing. A station must pass every criterion to be included.

    Args:
        stations: Stations to filter, in the order to keep
        zones: Acceptable fare zones (CPAY and SFA are plain zone numbers here)
        modes: Acceptable modes, as Mode members or their values
        river_banks: Acceptable river banks, as RiverBank members or their values
        lines: Acceptable line names

    Returns:
        Matching stations in their original order

    Raises:
        TypeError: If a criterion is a single string rather than a collection
        ValueError: If a mode or river bank value is not recognised
    """
    for name, criterion in (("modes", modes), ("river_banks", river_banks), ("lines", lines)):
        if isinstance(criterion, str):
            msg = f"{name} must be a collection of values, not the string '{criterion}'"
            raise TypeError(msg)

    # One-shot iterables are tested against every station
    wanted_zones = None if zones is None else list(zones)
    wanted_modes = _coerce(modes, Mode)
    wanted_banks = _coerce(river_banks, RiverBank)
    wanted_lines = None if lines is None else list(lines)

    return [
        station
        for station in stations
        if _match(wanted_zones, station.zones)
        and _match(wanted_modes, station.modes)
        and _match(wanted_banks, station.river_banks)
        and _match(wanted_lines, station.lines)
    ]


def exclude(basket: Iterable[Station], to_exclude: Iterable[Station]) -> list[Station]:
    """
    Get stations from the basket which are not in to_exclude.

    Stations are compared by identity string. The order of the basket is kept.
    """
    excluded = {identity_of(station) for station in to_exclude}
    return [station for station in basket if identity_of(station) not in excluded]


def find_by_identity(stations: Iterable[Station], identity: str) -> Station | None:
    """
    Get the first station whose identity string is the given identity.

    Returns:
        The matching station, or None if there is none
    """
    return next((station for station in stations if identity_of(station) == identity), None)


def distinct_lines(stations: Iterable[Station]) -> list[str]:
    """Get the distinct lines served by the stations, in display order."""
    return sort_lines({line for station in stations for line in station.lines})


@lru_cache(maxsize=1)
def _get_collator() -> Collator:
    # Builds from the full DUCET table
    return Collator()


def line_sort_key(line: str) -> tuple[int, tuple[int, ...]]:
    """
    Get the display sort key of a line.

    Lines in TFL_LINES sort by their position in it. Every other line sorts
    after them. Ties are broken by Unicode collation, which matches en-GB
    alphabetical order.

    Examples:
        >>> line_sort_key("Circle") < line_sort_key("Victoria")
        True
        >>> line_sort_key("Tram") < line_sort_key("Avanti West Coast")
        True
    """
    index = TFL_LINES.index(line) if line in TFL_LINES else len(TFL_LINES)
    return index, _get_collator().sort_key(line)


def sort_lines(lines: Iterable[str]) -> list[str]:
    """Sort line names into display order."""
    return sorted(lines, key=line_sort_key)
