"""Tick-by-tick ArtDmx packing with suppression.

:class:`ArtPacker` is the only stateful component: it owns one
:class:`~artpacker.suppressor.Suppressor` per port address that the
render loop is currently driving.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping

from artpacker._constants import KEEPALIVE_INTERVAL
from artpacker.config import PackerConfig, check_keepalive_interval
from artpacker.models import Address, Payload
from artpacker.packet import encode_art_dmx
from artpacker.suppressor import Suppressor

_logger = logging.getLogger(__name__)


def _check_frames(frames: Mapping[Address, Payload]) -> None:
    for address, payload in frames.items():
        if not isinstance(address, Address):
            raise TypeError(f"frame keys must be Address, got {type(address).__name__}")
        if not isinstance(payload, Payload):
            raise TypeError(f"frame for address {address} must be Payload, got {type(payload).__name__}")


class ArtPacker:
    """Turn per-universe DMX frames into the ArtDmx packets to send this tick.

    Call :meth:`pack` once per tick of the render loop with the full set of
    universes being driven and send every returned packet to the
    subscribers of its port address.  ``pack`` must be called at least
    every 4 seconds to comply with the Art-Net specification.

    Parameters
    ----------
    keepalive_interval : float
        Seconds after which unchanged data is sent again.
    clock : callable
        Monotonic time source, used when :meth:`pack` is called without
        an explicit ``now``.

    Raises
    ------
    ArtPackerConfigError
        If *keepalive_interval* is not between 0 and 4 seconds.
    """

    def __init__(
        self,
        *,
        keepalive_interval: float = KEEPALIVE_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._keepalive_interval = check_keepalive_interval(keepalive_interval)
        self._clock = clock
        self._suppressors: dict[Address, Suppressor] = {}

    @classmethod
    def from_config(cls, config: PackerConfig, *, clock: Callable[[], float] = time.monotonic) -> ArtPacker:
        return cls(keepalive_interval=config.keepalive_interval, clock=clock)

    @property
    def addresses(self) -> frozenset[Address]:
        """Port addresses currently tracked."""
        return frozenset(self._suppressors)

    def __len__(self) -> int:
        return len(self._suppressors)

    def __contains__(self, address: object) -> bool:
        return address in self._suppressors

    def reset(self) -> None:
        """Forget all suppression state; the next tick sends every universe."""
        self._suppressors.clear()

    def pack(self, frames: Mapping[Address, Payload], now: float | None = None) -> dict[Address, bytes]:
        """Pack the frames that must be sent at *now*.

        Parameters
        ----------
        frames : Mapping[Address, Payload]
            Current DMX data of every universe being driven.  Universes
            missing from *frames* are forgotten.
        now : float or None
            Monotonic timestamp in seconds.  Defaults to the packer's clock.

        Returns
        -------
        dict[Address, bytes]
            Encoded ArtDmx packets, only for universes that changed or are
            due for a keepalive refresh.
        """
        _check_frames(frames)
        if now is None:
            now = self._clock()

        output: dict[Address, bytes] = {}
        for address, payload in frames.items():
            suppressor = self._suppressors.get(address)
            if suppressor is None:
                _logger.debug("Tracking new port address %s", address)
                suppressor = Suppressor(payload, keepalive_interval=self._keepalive_interval)
                self._suppressors[address] = suppressor

            refresh = suppressor.last_emitted is not None and payload == suppressor.previous
            if suppressor.should_emit(payload, now):
                if refresh:
                    _logger.debug("Keepalive refresh for port address %s", address)
                output[address] = encode_art_dmx(address, payload)

        stale = [address for address in self._suppressors if address not in frames]
        for address in stale:
            _logger.debug("Dropping port address %s", address)
            del self._suppressors[address]

        return output
