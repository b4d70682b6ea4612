"""Station data models (e.g., Euston, Blackfriars (National Rail))."""

import enum

from pydantic import BaseModel, ConfigDict, Field

# A pseudo-zone representing contactless-only stations
CPAY = 16

# A pseudo-zone with Stratford International (NR) only
SFA = 0

# All TfL lines in the order to be displayed
TFL_LINES: tuple[str, ...] = (
    "Bakerloo",
    "Central",
    "Circle",
    "District",
    "Hammersmith & City",
    "Jubilee",
    "Metropolitan",
    "Northern",
    "Piccadilly",
    "Victoria",
    "Waterloo & City",
    "DLR",
    "Overground",
    "Elizabeth line",
    "Tram",
)


class Mode(str, enum.Enum):
    """Transport modes a station can serve."""

    LU = "Underground"
    DLR = "DLR"
    NR = "National Rail"


class RiverBank(str, enum.Enum):
    """Side of the Thames a station is located on."""

    NORTH = "North"
    SOUTH = "South"


class Station(BaseModel):
    """
    A single station in the catalogue.

    Stations are immutable. Equality and hashing use the rendered identity
    (name plus optional disambiguation), never the remaining fields, so two
    records describing the same station compare equal even if their other
    attributes differ.

    Examples:
        >>> str(Station(name="Euston", local_authority="Camden", lines=("Northern",),
        ...             zones=(1,), modes=(Mode.LU,), river_banks=(RiverBank.NORTH,)))
        'Euston'
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Station name (e.g., 'Euston')")
    disambiguation: str | None = Field(
        None,
        description="Distinguishes stations sharing a name (e.g., 'Underground')",
    )
    # Only one local authority is recorded, even for stations on a boundary
    local_authority: str = Field(..., description="Local authority (e.g., 'Camden')")
    lines: tuple[str, ...] = Field(..., min_length=1, description="Lines served (e.g., ('Northern', 'Victoria'))")
    zones: tuple[int, ...] = Field(..., min_length=1, description="Fare zones, including CPAY/SFA pseudo-zones")
    modes: tuple[Mode, ...] = Field(..., min_length=1)
    river_banks: tuple[RiverBank, ...] = Field(..., min_length=1)

    def __str__(self) -> str:
        """Identity string of the station."""
        if self.disambiguation is None:
            return self.name
        return f"{self.name} ({self.disambiguation})"

    def __repr__(self) -> str:
        """String representation of the station."""
        return f"<Station({self!s}, zones={list(self.zones)}, lines={list(self.lines)})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
