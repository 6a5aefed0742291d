"""ArtDmx packet encoding and decoding.

Only the ArtDmx packet (OpDmx/OpOutput ``0x5000``) of Art-Net 4 is
supported.  Layout::

    0..7   "Art-Net\\0"
    8..9   OpCode, little-endian (0x5000)
    10..11 ProtVer, big-endian (14)
    12     Sequence (0x00, disabled)
    13     Physical (0x00)
    14..15 Port address, little-endian (SubUni, Net)
    16..17 Data length, big-endian, even, 2..512
    18..   DMX data
"""

from __future__ import annotations

import struct

from pydantic import Field

from artpacker._constants import ARTNET_ID, HEADER_SIZE, MAX_CHANNELS, OP_DMX, PROTOCOL_VERSION
from artpacker.exceptions import MalformedPacketError
from artpacker.models import Address, Payload
from artpacker.models._base import ArtPackerBaseModel

# ID(8s) OpCode(<H) ProtVer(>H) Sequence(B) Physical(B) Address(<H) Length(>H)
_HEADER = struct.Struct("<8sH")
_TAIL = struct.Struct(">HBB")


def encode_art_dmx(address: Address, payload: Payload) -> bytes:
    """Serialize *payload* for *address* as an ArtDmx packet.

    Odd-length data is padded with a single zero byte because the
    length field must be even.  The sequence and physical fields are
    always zero.
    """
    data = payload.to_bytes()
    if len(data) % 2:
        data += b"\x00"

    return b"".join(
        (
            _HEADER.pack(ARTNET_ID, OP_DMX),
            _TAIL.pack(PROTOCOL_VERSION, 0, 0),
            address.to_le_bytes(),
            len(data).to_bytes(2, "big"),
            data,
        )
    )


class ArtDmxPacket(ArtPackerBaseModel):
    """A decoded ArtDmx packet."""

    address: Address
    payload: Payload
    sequence: int = Field(default=0, ge=0, le=255)
    physical: int = Field(default=0, ge=0, le=255)
    protocol_version: int = PROTOCOL_VERSION

    def encode(self) -> bytes:
        return encode_art_dmx(self.address, self.payload)


def decode_art_dmx(packet: bytes) -> ArtDmxPacket:
    """Parse an ArtDmx packet.

    Raises
    ------
    MalformedPacketError
        If *packet* is not a well-formed ArtDmx packet.
    """
    if len(packet) < HEADER_SIZE:
        raise MalformedPacketError("too_short", f"packet is {len(packet)} bytes, need at least {HEADER_SIZE}")

    packet_id, opcode = _HEADER.unpack_from(packet, 0)
    if packet_id != ARTNET_ID:
        raise MalformedPacketError("bad_id", f"unexpected packet id {packet_id!r}")
    if opcode != OP_DMX:
        raise MalformedPacketError("bad_opcode", f"unexpected opcode 0x{opcode:04x}")

    version, sequence, physical = _TAIL.unpack_from(packet, _HEADER.size)
    address = int.from_bytes(packet[14:16], "little")
    length = int.from_bytes(packet[16:18], "big")

    if length == 0 or length > MAX_CHANNELS or length % 2:
        raise MalformedPacketError("bad_length", f"invalid data length {length}")
    if len(packet) < HEADER_SIZE + length:
        raise MalformedPacketError(
            "truncated_data",
            f"length field says {length} bytes, packet carries {len(packet) - HEADER_SIZE}",
        )
    # The top bit of the port address is reserved and must be zero.
    if address > 0x7FFF:
        raise MalformedPacketError("bad_address", f"port address 0x{address:04x} has the reserved bit set")

    return ArtDmxPacket(
        address=Address.of(address),
        payload=Payload.of(packet[HEADER_SIZE : HEADER_SIZE + length]),
        sequence=sequence,
        physical=physical,
        protocol_version=version,
    )
