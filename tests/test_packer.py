from __future__ import annotations

import logging

import pytest

from artpacker.config import PackerConfig
from artpacker.exceptions import ArtPackerConfigError
from artpacker.models import Address, Payload
from artpacker.packer import ArtPacker
from artpacker.packet import encode_art_dmx

_A0 = Address.of(0)


def _packet(value: int) -> bytes:
    return bytes([65, 114, 116, 45, 78, 101, 116, 0, 0, 80, 0, 14, 0, 0, 0, 0, 0, 2, value, 0])


def test_suppression_keepalive_change_and_removal_sequence() -> None:
    packer = ArtPacker()
    frames = {_A0: Payload.of([255])}

    assert packer.pack(frames, now=0.0) == {_A0: _packet(255)}
    # does not pack again if the same
    assert packer.pack(frames, now=0.01) == {}
    # keepalive
    assert packer.pack(frames, now=0.9) == {_A0: _packet(255)}

    # change of data breaks suppression
    frames = {_A0: Payload.of([254])}
    assert packer.pack(frames, now=0.91) == {_A0: _packet(254)}

    # removing the universe drops its suppressor
    assert packer.pack({}, now=0.92) == {}
    assert _A0 not in packer

    # no suppression survives removal
    assert packer.pack(frames, now=0.93) == {_A0: _packet(254)}


def test_state_tracks_exactly_the_last_input() -> None:
    packer = ArtPacker()
    a, b, c = Address.of(1), Address.of(2), Address.of(3)
    data = Payload.of([1])

    packer.pack({a: data, b: data}, now=0.0)
    assert packer.addresses == {a, b}
    packer.pack({b: data, c: data}, now=0.1)
    assert packer.addresses == {b, c}
    assert len(packer) == 2
    packer.pack({}, now=0.2)
    assert packer.addresses == frozenset()


def test_universes_are_decided_independently() -> None:
    packer = ArtPacker()
    a, b = Address.of(1), Address.of(2)
    packer.pack({a: Payload.of([1]), b: Payload.of([1])}, now=0.0)

    out = packer.pack({a: Payload.of([2]), b: Payload.of([1])}, now=0.1)
    assert out == {a: encode_art_dmx(a, Payload.of([2]))}

    # a newly added universe emits right away while the others stay quiet
    c = Address.of(3)
    out = packer.pack({a: Payload.of([2]), b: Payload.of([1]), c: Payload.of([5])}, now=0.2)
    assert set(out) == {c}


def test_uses_injected_clock_when_now_omitted() -> None:
    ticks = iter([0.0, 0.5, 1.0])
    packer = ArtPacker(clock=lambda: next(ticks))
    frames = {_A0: Payload.of([1])}

    assert packer.pack(frames) == {_A0: _packet(1)}
    assert packer.pack(frames) == {}
    assert packer.pack(frames) == {_A0: _packet(1)}


def test_from_config_applies_keepalive_interval() -> None:
    packer = ArtPacker.from_config(PackerConfig(keepalive_interval=2.0))
    frames = {_A0: Payload.of([1])}
    packer.pack(frames, now=0.0)
    assert packer.pack(frames, now=1.5) == {}
    assert packer.pack(frames, now=2.1) == {_A0: _packet(1)}


def test_reset_forces_next_tick_to_emit() -> None:
    packer = ArtPacker()
    frames = {_A0: Payload.of([1])}
    packer.pack(frames, now=0.0)
    packer.reset()
    assert len(packer) == 0
    assert packer.pack(frames, now=0.01) == {_A0: _packet(1)}


def test_independent_packers_do_not_share_state() -> None:
    first, second = ArtPacker(), ArtPacker()
    frames = {_A0: Payload.of([1])}
    first.pack(frames, now=0.0)
    assert second.pack(frames, now=0.0) == {_A0: _packet(1)}


def test_rejects_unvalidated_keys_and_values_without_mutating_state() -> None:
    packer = ArtPacker()
    with pytest.raises(TypeError):
        packer.pack({0: Payload.of([1])}, now=0.0)  # type: ignore[dict-item]
    with pytest.raises(TypeError):
        packer.pack({_A0: b"\x01"}, now=0.0)  # type: ignore[dict-item]
    assert len(packer) == 0


def test_logs_tracking_keepalive_and_drop(caplog: pytest.LogCaptureFixture) -> None:
    packer = ArtPacker()
    frames = {_A0: Payload.of([1])}
    with caplog.at_level(logging.DEBUG, logger="artpacker.packer"):
        packer.pack(frames, now=0.0)
        packer.pack(frames, now=1.0)
        packer.pack({}, now=1.1)

    messages = [record.getMessage() for record in caplog.records]
    assert "Tracking new port address 0" in messages
    assert "Keepalive refresh for port address 0" in messages
    assert "Dropping port address 0" in messages


@pytest.mark.parametrize("interval", [-5.0, 0.0, 4.0])
def test_rejects_keepalive_interval_outside_refresh_deadline(interval: float) -> None:
    with pytest.raises(ArtPackerConfigError):
        ArtPacker(keepalive_interval=interval)
