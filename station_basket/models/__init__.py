"""Domain models for the station catalogue."""

from station_basket.models.station import CPAY, SFA, TFL_LINES, Mode, RiverBank, Station

__all__ = [
    # Constants
    "CPAY",
    "SFA",
    "TFL_LINES",
    # Enumerations
    "Mode",
    "RiverBank",
    # Models
    "Station",
]
