"""DMX channel data for a single universe."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import field_validator

from artpacker._constants import MAX_CHANNELS, MIN_CHANNELS
from artpacker.exceptions import InvalidPayloadLengthError
from artpacker.models._base import ArtPackerBaseModel


class Payload(ArtPackerBaseModel):
    """One frame of DMX channel values, 1 to 512 bytes long.

    Equality is a full byte-for-byte comparison, which is what the
    suppressor uses for change detection.

    Raises
    ------
    InvalidPayloadLengthError
        If the data is empty or longer than 512 bytes.
    """

    data: bytes

    @field_validator("data", mode="before")
    @classmethod
    def _coerce_sequence(cls, value: Any) -> Any:
        if isinstance(value, str):
            raise ValueError("DMX payload must be bytes or channel values, not str")
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        if isinstance(value, (list, tuple)):
            # bytes() rejects values outside 0..255 with ValueError and non-integers with TypeError.
            try:
                return bytes(value)
            except TypeError as exc:
                raise ValueError(f"DMX channel values must be integers: {exc}") from exc
        return value

    @field_validator("data")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if not MIN_CHANNELS <= len(value) <= MAX_CHANNELS:
            raise InvalidPayloadLengthError(len(value))
        return value

    @classmethod
    def of(cls, data: bytes | bytearray | Iterable[int]) -> Payload:
        """Build a payload from bytes or an iterable of channel values."""
        if not isinstance(data, (str, bytes, bytearray, memoryview, list, tuple)):
            data = list(data)
        return cls(data=data)

    def to_bytes(self) -> bytes:
        return self.data

    def __len__(self) -> int:
        return len(self.data)
