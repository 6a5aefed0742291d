"""Custom exception hierarchy for artpacker."""

from __future__ import annotations


class ArtPackerError(Exception):
    """Base exception for all artpacker errors."""


class ArtPackerConfigError(ArtPackerError):
    """Invalid or missing configuration."""


class AddressOutOfRangeError(ArtPackerError):
    """Port address outside ``0..32767``."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"port address must be between 0 and 32767, got {value}")


class InvalidPayloadLengthError(ArtPackerError):
    """DMX payload empty or longer than 512 channels."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"DMX payload length must be from 1 to 512, got {length}")


class MalformedPacketError(ArtPackerError):
    """Bytes could not be decoded as an ArtDmx packet.

    ``reason`` is a short machine-friendly tag such as ``"bad_id"`` or
    ``"truncated_data"``.
    """

    def __init__(self, reason: str, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason)


class ArtPackerTransportError(ArtPackerError):
    """UDP-level failure while sending packets."""

    def __init__(
        self,
        message: str,
        *,
        address: int | None = None,
    ) -> None:
        self.address = address
        super().__init__(message)
