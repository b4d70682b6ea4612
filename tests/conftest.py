"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so fix the environment BEFORE any package imports
os.environ.pop("STATIONS_DATA_PATH", None)
os.environ.pop("RANDOM_SEED", None)
os.environ.pop("PACKAGE_LOG_LEVEL", None)

from collections.abc import Generator

import pytest
from station_basket.core.logging import configure_logging
from station_basket.models.station import CPAY, SFA, Mode, RiverBank, Station
from station_basket.services.catalogue_service import StationCatalogue, get_catalogue

from tests.helpers.station_factory import create_test_station

configure_logging(log_level="WARNING")


@pytest.fixture
def sample_stations() -> list[Station]:
    """
    Small abstract catalogue covering every filter dimension.

    - "Alpha" appears twice, told apart by disambiguation
    - "Bravo" straddles the river
    - "Echo" is contactless-only (CPAY), "Foxtrot" uses the SFA pseudo-zone
    """
    return [
        create_test_station("Alpha", "Underground", lines=["Victoria", "Circle"], zones=[1]),
        create_test_station(
            "Alpha",
            "NR",
            lines=["Thameslink"],
            zones=[1],
            modes=[Mode.NR],
        ),
        create_test_station(
            "Bravo",
            lines=["Thameslink"],
            zones=[1, 2],
            modes=[Mode.NR],
            river_banks=[RiverBank.NORTH, RiverBank.SOUTH],
        ),
        create_test_station(
            "Charlie",
            lines=["DLR", "Jubilee"],
            zones=[2, 3],
            modes=[Mode.LU, Mode.DLR],
        ),
        create_test_station(
            "Delta",
            lines=["Northern"],
            zones=[3],
            river_banks=[RiverBank.SOUTH],
        ),
        create_test_station(
            "Echo",
            lines=["Zigzag Line"],
            zones=[CPAY],
            modes=[Mode.NR],
            river_banks=[RiverBank.SOUTH],
        ),
        create_test_station(
            "Foxtrot",
            "NR",
            lines=["Southeastern"],
            zones=[SFA],
            modes=[Mode.NR],
        ),
    ]


@pytest.fixture
def sample_catalogue(sample_stations: list[Station]) -> StationCatalogue:
    """Catalogue built from sample_stations."""
    return StationCatalogue(sample_stations)


@pytest.fixture
def clear_catalogue_cache() -> Generator[None]:
    """Reset the cached default catalogue before and after the test."""
    get_catalogue.cache_clear()
    yield
    get_catalogue.cache_clear()
