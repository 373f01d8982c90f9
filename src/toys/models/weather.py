"""Current weather model (OpenWeatherMap)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class WeatherCondition(BaseModel):
    """One entry of the ``weather`` array, e.g. Rain / light rain."""

    model_config = ConfigDict(frozen=True, strict=True)

    main: str
    description: str


class Temperature(BaseModel):
    """The ``main`` block. Degrees Celsius with ``units=metric``; humidity in %."""

    model_config = ConfigDict(frozen=True, strict=True)

    temp: float
    temp_min: float
    temp_max: float
    humidity: float


class Wind(BaseModel):
    """The ``wind`` block. Speed in m/s with ``units=metric``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    speed: float
    direction_degrees: int = Field(alias="deg")


class WeatherSnapshot(BaseModel):
    """Current conditions at a coordinate."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    conditions: list[WeatherCondition] = Field(alias="weather")
    temperature: Temperature = Field(alias="main")
    wind: Wind
    observed_at_unix: int = Field(alias="dt", strict=True)

    @property
    def summary(self) -> str | None:
        """Description of the first reported condition, if any."""
        if not self.conditions:
            return None
        return self.conditions[0].description
