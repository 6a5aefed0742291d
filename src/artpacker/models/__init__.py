"""Value types for artpacker."""

from artpacker.models.address import Address
from artpacker.models.payload import Payload

__all__ = [
    "Address",
    "Payload",
]
