"""Station catalogue service: loads the dataset and binds the selection helpers to it."""

from collections.abc import Iterable
from functools import cached_property, lru_cache
from importlib import resources
from pathlib import Path

import structlog
from pydantic import ValidationError

from station_basket.core.config import settings
from station_basket.helpers.station_selection import distinct_lines, filter_basket, find_by_identity
from station_basket.helpers.station_selection import exclude as exclude_stations
from station_basket.models.station import Mode, RiverBank, Station
from station_basket.schemas.station import StationRecordList

logger = structlog.get_logger(__name__)

PACKAGED_DATASET = "stations.json"


class CatalogueError(Exception):
    """Raised when the station dataset cannot be loaded."""

    pass


def _read_dataset(path: str | Path | None) -> str:
    if path is None:
        dataset = resources.files("station_basket") / "data" / PACKAGED_DATASET
        return dataset.read_text(encoding="utf-8")
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Cannot read station dataset '{path}': {e}"
        raise CatalogueError(msg) from e


def load_stations(path: str | Path | None = None) -> tuple[Station, ...]:
    """
    Load and validate the station dataset.

    Args:
        path: JSON dataset to read, or None for the packaged dataset

    Returns:
        Stations in dataset order

    Raises:
        CatalogueError: If the dataset cannot be read, fails validation, or
            contains two stations with the same identity
    """
    raw = _read_dataset(path)
    try:
        records = StationRecordList.validate_json(raw)
    except ValidationError as e:
        msg = f"Invalid station dataset '{path or PACKAGED_DATASET}': {e}"
        raise CatalogueError(msg) from e

    stations = tuple(record.to_station() for record in records)

    seen: set[str] = set()
    for station in stations:
        if str(station) in seen:
            msg = f"Duplicate station '{station}' in dataset '{path or PACKAGED_DATASET}'"
            raise CatalogueError(msg)
        seen.add(str(station))

    logger.info("catalogue_loaded", source=str(path or PACKAGED_DATASET), stations_count=len(stations))
    return stations


class StationCatalogue:
    """
    Immutable, ordered catalogue of stations.

    The catalogue is built once and never mutated. Every query returns a new
    list owned by the caller.
    """

    def __init__(self, stations: Iterable[Station]) -> None:
        self._stations = tuple(stations)

    @property
    def stations(self) -> tuple[Station, ...]:
        """All stations in the whole contactless area, in dataset order."""
        return self._stations

    @cached_property
    def lines(self) -> tuple[str, ...]:
        """All lines served by the catalogue, in display order."""
        return tuple(distinct_lines(self._stations))

    def get_basket(
        self,
        zones: Iterable[int] | None = None,
        modes: Iterable[Mode | str] | None = None,
        river_banks: Iterable[RiverBank | str] | None = None,
        lines: Iterable[str] | None = None,
    ) -> list[Station]:
        """Get all catalogue stations matching every given criterion. See filter_basket()."""
        basket = filter_basket(self._stations, zones=zones, modes=modes, river_banks=river_banks, lines=lines)
        logger.debug("basket_filtered", basket_size=len(basket), catalogue_size=len(self._stations))
        return basket

    def from_string(self, identity: str) -> Station | None:
        """Get the catalogue station with the given identity string, or None."""
        return find_by_identity(self._stations, identity)

    def exclude(self, basket: Iterable[Station], to_exclude: Iterable[Station]) -> list[Station]:
        """Get stations from the basket which are not in to_exclude."""
        return exclude_stations(basket, to_exclude)

    def __len__(self) -> int:
        return len(self._stations)

    def __repr__(self) -> str:
        return f"<StationCatalogue(stations={len(self._stations)}, lines={len(self.lines)})>"


@lru_cache(maxsize=1)
def get_catalogue() -> StationCatalogue:
    """
    Get the process-wide station catalogue.

    Built on first use from settings.STATIONS_DATA_PATH, or from the packaged
    dataset when that is not set.
    """
    return StationCatalogue(load_stations(settings.STATIONS_DATA_PATH))


def get_stations() -> tuple[Station, ...]:
    """All catalogue stations, in dataset order."""
    return get_catalogue().stations


def get_lines() -> tuple[str, ...]:
    """All catalogue lines, in display order."""
    return get_catalogue().lines


def get_basket(
    zones: Iterable[int] | None = None,
    modes: Iterable[Mode | str] | None = None,
    river_banks: Iterable[RiverBank | str] | None = None,
    lines: Iterable[str] | None = None,
) -> list[Station]:
    """Get all catalogue stations matching every given criterion."""
    return get_catalogue().get_basket(zones=zones, modes=modes, river_banks=river_banks, lines=lines)


def from_string(identity: str) -> Station | None:
    """Get the catalogue station with the given identity string, or None."""
    return get_catalogue().from_string(identity)
