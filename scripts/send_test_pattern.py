#!/usr/bin/env python3
"""Send a chase test pattern over Art-Net.

Drives a render loop at a fixed frame rate, hands every frame to
``ArtPacker`` and sends only the packets it returns.  Useful to check a
node's wiring and to watch suppression at work: with ``--hold`` the
pattern stops moving and only keepalive refreshes go out.

Target host, port and keepalive come from ``ARTPACKER_*`` environment
variables unless given on the command line.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from artpacker import Address, ArtPacker, PackerConfig, Payload, Transport, UdpTransport  # noqa: E402
from artpacker.exceptions import ArtPackerError  # noqa: E402

_LOG = logging.getLogger("send_test_pattern")


@dataclass
class SendStats:
    ticks: int = 0
    packets: int = 0


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Send an Art-Net chase pattern with suppression")
    parser.add_argument("--host", default=None, help="Target host (default: ARTPACKER_TARGET_HOST or broadcast)")
    parser.add_argument("--port", type=int, default=None, help="Target UDP port (default: 6454)")
    parser.add_argument(
        "--universe",
        type=int,
        action="append",
        dest="universes",
        help="Port address to drive; repeat for several (default: 1)",
    )
    parser.add_argument("--channels", type=int, default=512, help="Channels per universe (1-512)")
    parser.add_argument("--fps", type=float, default=40.0, help="Render loop frequency")
    parser.add_argument("--duration", type=float, default=10.0, help="Seconds to run, 0 for forever")
    parser.add_argument("--hold", action="store_true", help="Freeze the pattern to exercise keepalive")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def _chase_frame(tick: int, channels: int, hold: bool) -> Payload:
    position = 0 if hold else tick % channels
    data = bytearray(channels)
    data[position] = 255
    return Payload.of(data)


def _send_tick(packer: ArtPacker, transport: Transport, frames: dict[Address, Payload]) -> int:
    """Pack one tick and send whatever the packer lets through."""
    return transport.send(packer.pack(frames))


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.host is not None:
        overrides["target_host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port

    try:
        config = PackerConfig.from_env(**overrides)
        universes = [Address.of(u) for u in (args.universes or [1])]
    except ArtPackerError as exc:
        print(f"[pattern] {exc}", file=sys.stderr)
        return 2
    if not 1 <= args.channels <= 512:
        print(f"[pattern] --channels must be between 1 and 512, got {args.channels}", file=sys.stderr)
        return 2

    packer = ArtPacker.from_config(config)
    transport = UdpTransport(config)
    await transport.open()

    stats = SendStats()
    interval = 1.0 / max(1e-3, args.fps)
    started = time.monotonic()
    try:
        while args.duration <= 0 or time.monotonic() - started < args.duration:
            frame = _chase_frame(stats.ticks, args.channels, args.hold)
            stats.packets += _send_tick(packer, transport, {address: frame for address in universes})
            stats.ticks += 1
            await asyncio.sleep(interval)
    finally:
        transport.close()

    _LOG.info("Sent %d packets over %d ticks to %s:%d", stats.packets, stats.ticks, config.target_host, config.port)
    return 0


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return asyncio.run(_run(args))
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    raise SystemExit(_main())
