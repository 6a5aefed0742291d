"""Art-Net constants shared across the library."""

ARTNET_PORT = 6454

# Packet ID, "Art-Net" followed by a null terminator.
ARTNET_ID = b"Art-Net\x00"
OP_DMX = 0x5000
PROTOCOL_VERSION = 14
HEADER_SIZE = 18

MIN_ADDRESS = 0
MAX_ADDRESS = 32_767

MIN_CHANNELS = 1
MAX_CHANNELS = 512

# ------------------------------------------------------------------
# Suppression timing (seconds)
# ------------------------------------------------------------------

#: Unchanged data is re-sent after this interval.
KEEPALIVE_INTERVAL: float = 0.8
#: Receivers may consider a source stale after this long without data.
REFRESH_DEADLINE: float = 4.0
