"""Scripted demonstration routines for the sport client."""

from __future__ import annotations

import time
from typing import Callable

from .client import SportClient

__all__ = ["run_standsit", "walk", "turn", "run_walk"]

_MAX_SPEED = 1.0
_MAX_TURN = 3.141592
_WALK_STEP_MS = 500
_TURN_MS_PER_RAD = 1500


def _always_ok() -> bool:
    return True


def _no_shutdown() -> None:
    return None


def run_standsit(
    client: SportClient,
    is_ok: Callable[[], bool] = _always_ok,
    sleep: Callable[[float], None] = time.sleep,
    shutdown: Callable[[], None] = _no_shutdown,
) -> bool:
    """Stand, sit, lie down, stand and lie down again.

    Returns ``True`` when the routine ran to the end (and ``shutdown`` was
    called), ``False`` when ``is_ok`` stopped it early.
    """
    steps = [
        ("Dog stand", client.stand_up),
        ("Dog sit", client.sit),
        ("Dog down", client.stand_down),
        ("Dog stand", client.stand_up),
    ]
    for message, action in steps:
        print(message)
        action()
        sleep(2)
        if not is_ok():
            return False

    print("Dog down")
    client.stand_down()
    sleep(2)
    shutdown()
    return True


def walk(
    client: SportClient,
    speed: float,
    seconds: int,
    is_ok: Callable[[], bool] = _always_ok,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Move straight at ``speed`` (clamped to [-1, 1]) for ``seconds``.

    A move command is sent every half second. Returns ``False`` if
    ``is_ok`` reports a stop.
    """
    seconds = int(seconds)
    if not 0 <= seconds <= 255:
        raise ValueError(f"seconds must be in 0..255, got {seconds}")
    speed = max(-_MAX_SPEED, min(_MAX_SPEED, speed))
    for _ in range(0, 1000 * seconds, _WALK_STEP_MS):
        if not is_ok():
            return False
        client.move(speed, 0, 0)
        sleep(_WALK_STEP_MS / 1000)
    return True


def turn(
    client: SportClient,
    arad: float,
    is_ok: Callable[[], bool] = _always_ok,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Turn at ``arad`` rad/s (clamped to ±pi) for up to 1.5 seconds."""
    arad = max(-_MAX_TURN, min(_MAX_TURN, arad))
    duration_ms = min(_TURN_MS_PER_RAD, int(_TURN_MS_PER_RAD * abs(arad)))
    if not is_ok():
        return False
    client.move(0, 0, arad)
    sleep(duration_ms / 1000)
    return True


def run_walk(
    client: SportClient,
    is_ok: Callable[[], bool] = _always_ok,
    sleep: Callable[[float], None] = time.sleep,
    shutdown: Callable[[], None] = _no_shutdown,
) -> bool:
    """Stand up, walk forward and back, turn around, then lie down.

    Returns ``True`` when the routine ran to the end (and ``shutdown`` was
    called), ``False`` when ``is_ok`` stopped it early.
    """
    print("Dog down")
    client.stand_down()
    sleep(2)
    if not is_ok():
        return False

    print("Dog stand")
    client.stand_up()
    sleep(2)
    client.balance_stand()
    sleep(1)
    if not is_ok():
        return False

    print("Dog move forward")
    if not walk(client, 0.3, 3, is_ok, sleep):
        return False

    print("Dog move backwards")
    if not walk(client, -0.3, 3, is_ok, sleep):
        return False

    print("Turn and sleep")
    if not turn(client, -1, is_ok, sleep):
        return False
    client.balance_stand()
    sleep(0.3)

    for _ in range(2):
        if not turn(client, 1, is_ok, sleep):
            return False
        sleep(0.7)
    client.balance_stand()
    sleep(0.3)

    if not turn(client, -1, is_ok, sleep):
        return False
    client.balance_stand()
    sleep(0.3)
    client.stand_down()
    sleep(2)

    shutdown()
    return True