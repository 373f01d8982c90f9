"""Local network address discovery."""

from __future__ import annotations

import logging
import socket

from toys.config import LOCAL_PROBE_ADDRESS
from toys.exceptions import LocalInterfaceError

logger = logging.getLogger(__name__)


def resolve_local_network_address(
    probe: tuple[str, int] = LOCAL_PROBE_ADDRESS,
) -> str:
    """Return the address of the interface the OS would use to reach ``probe``.

    "Connecting" a UDP socket only fixes its peer and makes the kernel choose a
    route and local address. No datagram is sent.

    Raises:
        LocalInterfaceError: If no socket can be opened or no route exists.
    """
    family = socket.AF_INET6 if ":" in probe[0] else socket.AF_INET
    try:
        with socket.socket(family, socket.SOCK_DGRAM) as sock:
            sock.connect(probe)
            return sock.getsockname()[0]
    except OSError as exc:
        raise LocalInterfaceError(f"No usable interface towards {probe[0]}: {exc}") from exc


def get_local_network_address(
    probe: tuple[str, int] = LOCAL_PROBE_ADDRESS,
) -> str | None:
    """Best-effort variant of resolve_local_network_address(); None on failure."""
    try:
        return resolve_local_network_address(probe)
    except LocalInterfaceError as exc:
        logger.debug("Local address lookup failed: %s", exc)
        return None
