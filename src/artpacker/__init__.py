"""artpacker - ArtDmx packet packing with suppression and keepalive."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("artpacker")
except PackageNotFoundError:
    __version__ = "0+local"
from artpacker._constants import ARTNET_PORT, KEEPALIVE_INTERVAL
from artpacker._transport import Transport, UdpTransport
from artpacker.config import PackerConfig
from artpacker.exceptions import (
    AddressOutOfRangeError,
    ArtPackerConfigError,
    ArtPackerError,
    ArtPackerTransportError,
    InvalidPayloadLengthError,
    MalformedPacketError,
)
from artpacker.models import Address, Payload
from artpacker.packer import ArtPacker
from artpacker.packet import ArtDmxPacket, decode_art_dmx, encode_art_dmx
from artpacker.suppressor import Suppressor

__all__ = [
    "__version__",
    "ARTNET_PORT",
    "KEEPALIVE_INTERVAL",
    "Address",
    "AddressOutOfRangeError",
    "ArtDmxPacket",
    "ArtPacker",
    "ArtPackerConfigError",
    "ArtPackerError",
    "ArtPackerTransportError",
    "InvalidPayloadLengthError",
    "MalformedPacketError",
    "PackerConfig",
    "Payload",
    "Suppressor",
    "Transport",
    "UdpTransport",
    "decode_art_dmx",
    "encode_art_dmx",
]
