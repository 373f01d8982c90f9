"""toys data models."""

from toys.models.address import IPAddress
from toys.models.public_ip import PublicIPInfo
from toys.models.weather import Temperature, WeatherCondition, WeatherSnapshot, Wind

__all__ = [
    "IPAddress",
    "PublicIPInfo",
    "Temperature",
    "WeatherCondition",
    "WeatherSnapshot",
    "Wind",
]
