"""Art-Net port address."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from artpacker._constants import MAX_ADDRESS, MIN_ADDRESS
from artpacker.exceptions import AddressOutOfRangeError
from artpacker.models._base import ArtPackerBaseModel


class Address(ArtPackerBaseModel):
    """A 15-bit Art-Net port address (Net, Sub-Net and Universe combined).

    Parameters
    ----------
    value : int
        Port address in ``0..32767``.  Universe ``0`` is valid but
        discouraged by the Art-Net specification.

    Raises
    ------
    AddressOutOfRangeError
        If *value* is outside ``0..32767``.
    """

    value: int

    @field_validator("value", mode="before")
    @classmethod
    def _reject_non_integers(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("port address must be an integer, not bool")
        if isinstance(value, (str, bytes, bytearray)):
            raise ValueError(f"port address must be an integer, not {type(value).__name__}")
        return value

    @field_validator("value")
    @classmethod
    def _check_range(cls, value: int) -> int:
        if not MIN_ADDRESS <= value <= MAX_ADDRESS:
            raise AddressOutOfRangeError(value)
        return value

    @classmethod
    def of(cls, value: int) -> Address:
        """Build an address from a plain integer."""
        return cls(value=value)

    def to_le_bytes(self) -> bytes:
        """Two-byte little-endian encoding (SubUni, Net)."""
        return self.value.to_bytes(2, "little")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
