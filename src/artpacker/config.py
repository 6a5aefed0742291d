"""Packer and transport configuration for artpacker."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from artpacker._constants import ARTNET_PORT, KEEPALIVE_INTERVAL, REFRESH_DEADLINE
from artpacker.exceptions import ArtPackerConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def check_keepalive_interval(interval: float) -> float:
    """Raise :class:`ArtPackerConfigError` unless *interval* is within the refresh deadline."""
    if not 0 < interval < REFRESH_DEADLINE:
        raise ArtPackerConfigError(
            f"keepalive_interval must be between 0 and {REFRESH_DEADLINE} seconds, got {interval}"
        )
    return interval


@dataclasses.dataclass(frozen=True)
class PackerConfig:
    """Packer configuration.

    Parameters
    ----------
    keepalive_interval : float
        Seconds after which unchanged data is sent again.  Must be
        positive and shorter than the 4 second Art-Net refresh deadline.
    target_host : str
        Default destination for the UDP transport.  Defaults to the
        limited broadcast address.
    port : int
        Destination UDP port.
    broadcast : bool
        Enable ``SO_BROADCAST`` on the UDP socket.
    """

    keepalive_interval: float = KEEPALIVE_INTERVAL
    target_host: str = "255.255.255.255"
    port: int = ARTNET_PORT
    broadcast: bool = True

    def __post_init__(self) -> None:
        check_keepalive_interval(self.keepalive_interval)
        if not 0 < self.port <= 0xFFFF:
            raise ArtPackerConfigError(f"port must be between 1 and 65535, got {self.port}")
        if not self.target_host.strip():
            raise ArtPackerConfigError("target_host must be non-empty")

    @classmethod
    def from_env(cls, **overrides: Any) -> PackerConfig:
        """Create configuration from environment variables.

        Reads ``ARTPACKER_KEEPALIVE_MS``, ``ARTPACKER_TARGET_HOST``,
        ``ARTPACKER_PORT`` and ``ARTPACKER_BROADCAST``.  Explicit keyword
        arguments override environment values.

        Raises
        ------
        ArtPackerConfigError
            If a variable cannot be parsed or the result is invalid.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        keepalive_env = env.get("ARTPACKER_KEEPALIVE_MS")
        if keepalive_env is not None and "keepalive_interval" not in overrides:
            try:
                config_kwargs["keepalive_interval"] = float(keepalive_env) / 1000.0
            except ValueError as exc:
                raise ArtPackerConfigError(f"ARTPACKER_KEEPALIVE_MS is not a number: {keepalive_env!r}") from exc

        host_env = env.get("ARTPACKER_TARGET_HOST")
        if host_env is not None:
            config_kwargs["target_host"] = host_env

        port_env = env.get("ARTPACKER_PORT")
        if port_env is not None and "port" not in overrides:
            try:
                config_kwargs["port"] = int(port_env)
            except ValueError as exc:
                raise ArtPackerConfigError(f"ARTPACKER_PORT is not an integer: {port_env!r}") from exc

        if "broadcast" not in overrides:
            config_kwargs["broadcast"] = _env_bool(env.get("ARTPACKER_BROADCAST"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
