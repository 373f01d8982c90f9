"""Reverse-geocoding model (whois.pconline.com.cn)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN_NAME = "Unknown"

# Values the service puts in ``err``.
ERR_NONE = ""
ERR_NO_PROVINCE = "noprovince"
ERR_NO_CITY = "nocity"


class IPAddress(BaseModel):
    """Approximate location of an IP address.

    ``err`` classifies the record: empty for a domestic address with both
    province and city, ``noprovince`` for overseas addresses (only ``addr`` is
    meaningful) and ``nocity`` for municipality-level regions.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    province: str = Field(alias="pro")
    city: str
    addr: str
    err: str

    def display_name(self) -> str:
        """Human-readable region name derived from ``err``."""
        if self.err == ERR_NONE:
            return self.province + self.city
        if self.err == ERR_NO_PROVINCE:
            return self.addr
        if self.err == ERR_NO_CITY:
            return self.province
        return UNKNOWN_NAME
