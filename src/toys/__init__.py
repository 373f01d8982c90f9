"""toys — small typed helpers for public IP, IP location and weather lookups."""

from toys._http import AsyncTransport, SyncTransport
from toys.exceptions import (
    ConfigurationError,
    DecodeError,
    LocalInterfaceError,
    ToysAPIError,
    ToysConnectionError,
    ToysError,
    ToysTimeoutError,
    TransportError,
)
from toys.local import get_local_network_address, resolve_local_network_address
from toys.models import IPAddress, PublicIPInfo, WeatherSnapshot
from toys.resolver import AsyncIPResolver, IPResolver

__all__ = [
    "AsyncIPResolver",
    "AsyncTransport",
    "ConfigurationError",
    "DecodeError",
    "IPAddress",
    "IPResolver",
    "LocalInterfaceError",
    "PublicIPInfo",
    "SyncTransport",
    "ToysAPIError",
    "ToysConnectionError",
    "ToysError",
    "ToysTimeoutError",
    "TransportError",
    "WeatherSnapshot",
    "get_local_network_address",
    "resolve_local_network_address",
]

__version__ = "0.1.0"
