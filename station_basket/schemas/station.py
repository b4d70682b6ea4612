"""Pydantic schemas for station dataset records."""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from station_basket.models.station import Mode, RiverBank, Station

# ==================== Input Schemas ====================


class StationRecord(BaseModel):
    """Schema for a single record in the stations JSON dataset."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Station name (e.g., 'Euston')")
    disambiguation: str | None = Field(None, description="Disambiguation (e.g., 'Underground')")
    local_authority: str = Field(..., alias="localAuthority", description="Local authority (e.g., 'Camden')")
    lines: list[str] = Field(..., min_length=1, description="Lines served (e.g., ['Northern', 'Victoria'])")
    zones: list[int] = Field(..., min_length=1, description="Fare zones (16 = CPAY, 0 = SFA)")
    modes: list[Mode] = Field(..., min_length=1, description="Modes: 'Underground', 'DLR', 'National Rail'")
    river_banks: list[RiverBank] = Field(..., alias="riverBanks", min_length=1, description="'North' and/or 'South'")

    def to_station(self) -> Station:
        """Convert the validated record into an immutable Station."""
        return Station(
            name=self.name,
            disambiguation=self.disambiguation,
            local_authority=self.local_authority,
            lines=tuple(self.lines),
            zones=tuple(self.zones),
            modes=tuple(self.modes),
            river_banks=tuple(self.river_banks),
        )


StationRecordList = TypeAdapter(list[StationRecord])


# ==================== Response Schemas ====================


class StationResponse(BaseModel):
    """Response schema for station data, serialized with dataset field names."""

    id: str = Field(..., description="Identity string (e.g., 'Euston (Underground)')")
    name: str
    disambiguation: str | None = None
    local_authority: str = Field(..., serialization_alias="localAuthority")
    lines: list[str]
    zones: list[int]
    modes: list[Mode]
    river_banks: list[RiverBank] = Field(..., serialization_alias="riverBanks")

    @classmethod
    def from_station(cls, station: Station) -> "StationResponse":
        """Build a response from a Station."""
        return cls(
            id=str(station),
            name=station.name,
            disambiguation=station.disambiguation,
            local_authority=station.local_authority,
            lines=list(station.lines),
            zones=list(station.zones),
            modes=list(station.modes),
            river_banks=list(station.river_banks),
        )
