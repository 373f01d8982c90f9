"""Public IP geolocation model (ip-api.com)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PublicIPInfo(BaseModel):
    """Where the caller's public IP is, as seen by http://ip-api.com/json/."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    country: str
    region_name: str = Field(alias="regionName")
    # The caller's own public IP.
    query: str
    lat: float
    lon: float

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (lat, lon)."""
        return self.lat, self.lon
