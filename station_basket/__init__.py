"""Station catalogue with basket filtering and random station draws."""

from station_basket.helpers.station_draw import (
    InsufficientStationsError,
    StartingStationNotFoundError,
    StationDrawError,
    generate,
    make_shuffle,
    random_shuffle,
)
from station_basket.helpers.station_selection import exclude, identity_of, sort_lines
from station_basket.models.station import CPAY, SFA, TFL_LINES, Mode, RiverBank, Station
from station_basket.services.catalogue_service import (
    CatalogueError,
    StationCatalogue,
    from_string,
    get_basket,
    get_catalogue,
    get_lines,
    get_stations,
    load_stations,
)

__all__ = [
    # Constants
    "CPAY",
    "SFA",
    "TFL_LINES",
    # Models
    "Mode",
    "RiverBank",
    "Station",
    # Catalogue
    "CatalogueError",
    "StationCatalogue",
    "from_string",
    "get_basket",
    "get_catalogue",
    "get_lines",
    "get_stations",
    "load_stations",
    # Selection
    "exclude",
    "identity_of",
    "sort_lines",
    # Draw
    "InsufficientStationsError",
    "StartingStationNotFoundError",
    "StationDrawError",
    "generate",
    "make_shuffle",
    "random_shuffle",
]
