"""UDP transport for packed ArtDmx packets."""

from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Mapping
from typing import Protocol

from artpacker.config import PackerConfig
from artpacker.exceptions import ArtPackerTransportError
from artpacker.models import Address

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface for sending packer output.

    Lets callers and tests swap in doubles while keeping the production
    implementation (`UdpTransport`) concrete.
    """

    def send(self, packets: Mapping[Address, bytes]) -> int:
        ...


class UdpTransport:
    """Send ArtDmx packets over an asyncio UDP endpoint.

    Parameters
    ----------
    config : PackerConfig
        Supplies the default target host, port and broadcast flag.
    routes : Mapping[Address, str] or None
        Per-universe destination hosts; universes without a route go to
        ``config.target_host``.
    """

    def __init__(
        self,
        config: PackerConfig,
        *,
        routes: Mapping[Address, str] | None = None,
    ) -> None:
        self._config = config
        self._routes: dict[Address, str] = dict(routes or {})
        self._transport: asyncio.DatagramTransport | None = None

    @property
    def is_open(self) -> bool:
        return self._transport is not None and not self._transport.is_closing()

    def host_for(self, address: Address) -> str:
        return self._routes.get(address, self._config.target_host)

    async def open(self) -> None:
        if self.is_open:
            return
        loop = asyncio.get_running_loop()
        try:
            transport, _ = await loop.create_datagram_endpoint(
                asyncio.DatagramProtocol,
                family=socket.AF_INET,
                allow_broadcast=self._config.broadcast,
            )
        except OSError as exc:
            raise ArtPackerTransportError(f"Could not open UDP endpoint: {exc}") from exc
        self._transport = transport
        _logger.debug(
            "UDP transport open (default target %s:%d, broadcast=%s)",
            self._config.target_host,
            self._config.port,
            self._config.broadcast,
        )

    def attach(self, transport: asyncio.DatagramTransport) -> None:
        """Use an already-created datagram transport instead of calling :meth:`open`.

        Injection point for callers that own their event-loop endpoint (for
        example one shared with an Art-Net receiver) and for test doubles.
        The transport is closed by :meth:`close`.
        """
        self._transport = transport

    def send(self, packets: Mapping[Address, bytes]) -> int:
        """Send every packet to the host routed for its port address.

        Returns the number of datagrams handed to the socket.
        """
        if self._transport is None or self._transport.is_closing():
            raise ArtPackerTransportError("UDP transport is not open")

        sent = 0
        for address, packet in packets.items():
            target = (self.host_for(address), self._config.port)
            try:
                self._transport.sendto(packet, target)
            except OSError as exc:
                raise ArtPackerTransportError(
                    f"Sending to {target[0]}:{target[1]} failed: {exc}",
                    address=address.value,
                ) from exc
            sent += 1
        return sent

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None
