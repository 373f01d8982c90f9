"""Fixed endpoints and settings for the toys resolvers."""

from __future__ import annotations

import os

from toys.exceptions import ConfigurationError

PUBLIC_IP_URL = "http://ip-api.com/json/"
ADDRESS_URL = "https://whois.pconline.com.cn/ipJson.jsp"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

DEFAULT_TIMEOUT = 3.0

# Only used to let the OS pick an outbound interface; nothing is sent.
LOCAL_PROBE_ADDRESS = ("8.8.8.8", 80)

WEATHER_API_KEY_ENV = "OPENWEATHER_API_KEY"
API_LOG_ENV = "TOYS_API_LOG"


def address_params(ip: str) -> dict[str, str]:
    """Query parameters for the reverse-geocoding endpoint."""
    return {"ip": ip, "json": "true"}


def weather_params(lat: float, lon: float, api_key: str) -> dict[str, str]:
    """Query parameters for the current-weather endpoint."""
    return {
        "lat": str(lat),
        "lon": str(lon),
        "lang": "zh_cn",
        "appid": api_key,
        "units": "metric",
    }


def resolve_weather_api_key(explicit: str | None = None) -> str:
    """Return the weather API key, preferring an explicit value over the environment.

    Raises:
        ConfigurationError: If neither source provides a non-empty key.
    """
    key = explicit or os.getenv(WEATHER_API_KEY_ENV)
    if not key:
        raise ConfigurationError(
            f"No weather API key configured; pass weather_api_key= or set {WEATHER_API_KEY_ENV}"
        )
    return key
