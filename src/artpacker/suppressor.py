"""Per-address suppression of redundant ArtDmx packets.

Unchanged data is only re-sent once the keepalive interval has elapsed,
which is what the Art-Net and sACN standards call suppression.
"""

from __future__ import annotations

from artpacker._constants import KEEPALIVE_INTERVAL
from artpacker.models import Payload


class Suppressor:
    """Decide whether a frame for one port address should be sent.

    Parameters
    ----------
    initial : Payload
        The first frame seen for the address.
    keepalive_interval : float
        Seconds after which unchanged data is sent again.

    The suppressor starts out in the *never emitted* state
    (``last_emitted is None``): the first :meth:`should_emit` call always
    returns ``True`` regardless of timing.
    """

    def __init__(self, initial: Payload, *, keepalive_interval: float = KEEPALIVE_INTERVAL) -> None:
        self._previous = initial
        self._last_emitted: float | None = None
        self._keepalive_interval = keepalive_interval

    @property
    def previous(self) -> Payload:
        """The most recently accepted frame."""
        return self._previous

    @property
    def last_emitted(self) -> float | None:
        """Monotonic time of the last emission, ``None`` if never emitted."""
        return self._last_emitted

    @property
    def keepalive_interval(self) -> float:
        return self._keepalive_interval

    def should_emit(self, new: Payload, now: float) -> bool:
        """Return ``True`` if *new* must be sent at time *now*.

        Any change is sent immediately; unchanged data is sent only when
        more than ``keepalive_interval`` seconds passed since the last
        emission.
        """
        if self._last_emitted is None or new != self._previous:
            self._previous = new
            self._last_emitted = now
            return True

        if now > self._last_emitted + self._keepalive_interval:
            self._last_emitted = now
            return True
        return False

