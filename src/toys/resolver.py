"""Public resolver classes: public IP, reverse geocoding and weather lookups."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from toys import config
from toys._http import AsyncTransport, SyncTransport
from toys._logging import log_api_call
from toys.exceptions import DecodeError, ToysError
from toys.local import get_local_network_address
from toys.models.address import IPAddress
from toys.models.public_ip import PublicIPInfo
from toys.models.weather import WeatherSnapshot

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _validate(model_type: type[T], data: Any) -> T:
    """Validate decoded JSON against a Pydantic model."""
    try:
        return model_type.model_validate(data)
    except ValidationError as exc:
        raise DecodeError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


def _validate_json(model_type: type[T], text: str) -> T:
    """Decode a JSON document given as text and validate it against a Pydantic model."""
    try:
        return model_type.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(
            f"Failed to decode {model_type.__name__} response: {exc}"
        ) from exc


class IPResolver:
    """Blocking resolver for public IP, IP location and local weather.

    Every network operation is a single GET. Chaining lookups is up to the
    caller.

    Usage:
        transport = SyncTransport()
        resolver = IPResolver(transport, weather_api_key="...")
        ip = resolver.public_ip()
        if ip:
            print(resolver.address_info(ip).display_name())

        # Or let the resolver own its transport:
        with IPResolver() as resolver:
            coords = resolver.coordinates()
    """

    def __init__(
        self,
        transport: SyncTransport | None = None,
        weather_api_key: str | None = None,
    ) -> None:
        self._owns_transport = transport is None
        self._transport = transport or SyncTransport()
        self._weather_api_key = weather_api_key

    def __enter__(self) -> IPResolver:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this resolver created it."""
        if self._owns_transport:
            self._transport.close()

    # ── Core lookups ───────────────────────────────────────────

    @log_api_call
    def public_ip_info(self) -> PublicIPInfo:
        """Get the caller's public IP and its geolocation."""
        data = self._transport.get_json(config.PUBLIC_IP_URL)
        return _validate(PublicIPInfo, data)

    @log_api_call
    def address_info(self, ip: str) -> IPAddress:
        """Reverse-geocode ``ip``.

        The service sends JSON with a text/plain content type, so the body is
        read as text and decoded from the string.
        """
        text = self._transport.get_text(config.ADDRESS_URL, config.address_params(ip))
        return _validate_json(IPAddress, text)

    @log_api_call
    def weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """Get current weather at a coordinate."""
        api_key = config.resolve_weather_api_key(self._weather_api_key)
        data = self._transport.get_json(
            config.WEATHER_URL, config.weather_params(lat, lon, api_key)
        )
        return _validate(WeatherSnapshot, data)

    # ── Best-effort helpers ────────────────────────────────────

    def public_ip(self) -> str | None:
        """Return the caller's public IP, or None on any failure."""
        try:
            return self.public_ip_info().query
        except ToysError as exc:
            logger.debug("Public IP lookup failed: %s", exc)
            return None

    def coordinates(self) -> tuple[float, float] | None:
        """Return (lat, lon) of the caller's public IP, or None on any failure."""
        try:
            return self.public_ip_info().coordinates
        except ToysError as exc:
            logger.debug("Coordinate lookup failed: %s", exc)
            return None

    def local_network_address(self) -> str | None:
        """Return the local interface address, or None. Sends no traffic."""
        return get_local_network_address()


class AsyncIPResolver:
    """Asynchronous resolver for public IP, IP location and local weather.

    Usage:
        async with AsyncIPResolver(weather_api_key="...") as resolver:
            info = await resolver.public_ip_info()
            snapshot = await resolver.weather(info.lat, info.lon)
    """

    def __init__(
        self,
        transport: AsyncTransport | None = None,
        weather_api_key: str | None = None,
    ) -> None:
        self._owns_transport = transport is None
        self._transport = transport or AsyncTransport()
        self._weather_api_key = weather_api_key

    async def __aenter__(self) -> AsyncIPResolver:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport if this resolver created it."""
        if self._owns_transport:
            await self._transport.close()

    # ── Core lookups ───────────────────────────────────────────

    @log_api_call
    async def public_ip_info(self) -> PublicIPInfo:
        """Get the caller's public IP and its geolocation."""
        data = await self._transport.get_json(config.PUBLIC_IP_URL)
        return _validate(PublicIPInfo, data)

    @log_api_call
    async def address_info(self, ip: str) -> IPAddress:
        """Reverse-geocode ``ip`` (text/plain JSON body, decoded from the string)."""
        text = await self._transport.get_text(config.ADDRESS_URL, config.address_params(ip))
        return _validate_json(IPAddress, text)

    @log_api_call
    async def weather(self, lat: float, lon: float) -> WeatherSnapshot:
        """Get current weather at a coordinate."""
        api_key = config.resolve_weather_api_key(self._weather_api_key)
        data = await self._transport.get_json(
            config.WEATHER_URL, config.weather_params(lat, lon, api_key)
        )
        return _validate(WeatherSnapshot, data)

    # ── Best-effort helpers ────────────────────────────────────

    async def public_ip(self) -> str | None:
        """Return the caller's public IP, or None on any failure."""
        try:
            return (await self.public_ip_info()).query
        except ToysError as exc:
            logger.debug("Public IP lookup failed: %s", exc)
            return None

    async def coordinates(self) -> tuple[float, float] | None:
        """Return (lat, lon) of the caller's public IP, or None on any failure."""
        try:
            return (await self.public_ip_info()).coordinates
        except ToysError as exc:
            logger.debug("Coordinate lookup failed: %s", exc)
            return None

    def local_network_address(self) -> str | None:
        """Return the local interface address, or None. Never awaits."""
        return get_local_network_address()
