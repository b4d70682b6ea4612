"""
Random draw of stations from a basket.

The shuffle is passed in as a plain callable so tests can substitute a
deterministic permutation. Any shuffle must return every element of its input
exactly once.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

import structlog

from station_basket.helpers.station_selection import identity_of
from station_basket.models.station import Station

logger = structlog.get_logger(__name__)

Shuffle = Callable[[Sequence[Station]], list[Station]]


class StationDrawError(ValueError):
    """Base exception for station draw errors."""

    pass


class InsufficientStationsError(StationDrawError):
    """Raised when more stations are requested than the basket holds."""

    def __init__(self, count: int, available: int) -> None:
        self.count = count
        self.available = available
        super().__init__(
            f"There are not enough stations to be drawn: requested {count}, but the basket has {available}."
        )


class StartingStationNotFoundError(StationDrawError):
    """Raised when the starting station is not a member of the basket."""

    def __init__(self, station: Station) -> None:
        self.station = station
        super().__init__(f"The starting station '{station}' cannot be found in the basket.")


def random_shuffle(stations: Sequence[Station]) -> list[Station]:
    """Return a uniformly random permutation of the stations."""
    return random.sample(stations, len(stations))


def make_shuffle(seed: int | None = None) -> Shuffle:
    """
    Build a shuffle backed by its own random generator.

    Args:
        seed: Seed for reproducible permutations, or None for an unseeded generator

    Returns:
        A shuffle callable suitable for generate()
    """
    rng = random.Random(seed)

    def shuffle(stations: Sequence[Station]) -> list[Station]:
        return rng.sample(stations, len(stations))

    return shuffle


def generate(
    count: int,
    basket: Sequence[Station],
    starting_station: Station | None = None,
    shuffle: Shuffle = random_shuffle,
) -> list[Station]:
    """
    Get a random ordered set of stations from the basket, optionally starting
    at a given station.

    Without a starting station, the whole basket is shuffled and the first
    count stations are returned. With one, the result starts with the starting
    station and continues with the rest of the basket in shuffled order.

    Args:
        count: Number of stations to draw
        basket: Stations to draw from
        starting_station: Station to place first, which must be in the basket
        shuffle: Produces a uniformly random permutation of a sequence

    Returns:
        List of count distinct stations from the basket

    Raises:
        StationDrawError: If count is negative
        InsufficientStationsError: If the basket has fewer than count stations
        StartingStationNotFoundError: If starting_station is not in the basket

    Examples:
        >>> generate(2, [euston, kings_cross, angel], starting_station=angel)
        [angel, kings_cross]  # second station varies
    """
    if count < 0:
        msg = f"Cannot draw a negative number of stations: {count}"
        raise StationDrawError(msg)
    if len(basket) < count:
        raise InsufficientStationsError(count, len(basket))

    if starting_station is None:
        results = shuffle(basket)
    else:
        start_id = identity_of(starting_station)
        if not any(identity_of(station) == start_id for station in basket):
            raise StartingStationNotFoundError(starting_station)
        rest = [station for station in basket if identity_of(station) != start_id]
        results = [starting_station, *shuffle(rest)]

    if len(results) != len(basket):
        if starting_station is not None:
            raise StartingStationNotFoundError(starting_station)
        msg = f"Shuffle returned {len(results)} stations for a basket of {len(basket)}"
        raise StationDrawError(msg)

    logger.debug(
        "stations_generated",
        count=count,
        basket_size=len(basket),
        starting_station=None if starting_station is None else str(starting_station),
    )
    return results[:count]
