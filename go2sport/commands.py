"""Sport-mode request commands for the Go2 robot.

Each command builder returns a :class:`Command` holding the API identifier
and, where the command takes arguments, the JSON parameter string.
"""

from __future__ import annotations

import json
import math
import struct
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Optional, Sequence

__all__ = [
    "TRAJECTORY_POINTS",
    "ApiId",
    "PathPoint",
    "Command",
    "Request",
    "balance_stand",
    "body_height",
    "content",
    "continuous_gait",
    "damp",
    "dance1",
    "dance2",
    "euler",
    "foot_raise_height",
    "front_flip",
    "front_jump",
    "front_pounce",
    "hello",
    "move",
    "pose",
    "recovery_stand",
    "rise_sit",
    "scrape",
    "sit",
    "speed_level",
    "stand_down",
    "stand_up",
    "stop_move",
    "stretch",
    "switch_gait",
    "switch_joystick",
    "trajectory_follow",
    "trigger",
    "wallow",
]

TRAJECTORY_POINTS = 30
"""Number of path points a trajectory-follow command carries."""


class ApiId(IntEnum):
    """Identifiers of the sport-mode API calls."""

    DAMP = 1001
    BALANCESTAND = 1002
    STOPMOVE = 1003
    STANDUP = 1004
    STANDDOWN = 1005
    RECOVERYSTAND = 1006
    EULER = 1007
    MOVE = 1008
    SIT = 1009
    RISESIT = 1010
    SWITCHGAIT = 1011
    TRIGGER = 1012
    BODYHEIGHT = 1013
    FOOTRAISEHEIGHT = 1014
    SPEEDLEVEL = 1015
    HELLO = 1016
    STRETCH = 1017
    TRAJECTORYFOLLOW = 1018
    CONTINUOUSGAIT = 1019
    CONTENT = 1020
    WALLOW = 1021
    DANCE1 = 1022
    DANCE2 = 1023
    GETBODYHEIGHT = 1024
    GETFOOTRAISEHEIGHT = 1025
    GETSPEEDLEVEL = 1026
    SWITCHJOYSTICK = 1027
    POSE = 1028
    SCRAPE = 1029
    FRONTFLIP = 1030
    FRONTJUMP = 1031
    FRONTPOUNCE = 1032


@dataclass(frozen=True)
class PathPoint:
    """One point of a trajectory to follow."""

    time_from_start: float = 0.0
    x: float = 0.0
    y: float = 0.0
    yaw: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    vyaw: float = 0.0


@dataclass(frozen=True)
class Command:
    """An API call: its identifier and an optional JSON parameter."""

    api_id: ApiId
    parameter: Optional[str] = None


@dataclass
class Request:
    """A request message as sent on the sport request topic.

    Applying a command without a parameter keeps the previous parameter,
    as a reused request message does.
    """

    api_id: int = 0
    parameter: str = ""

    def apply(self, command: Command) -> "Request":
        """Write ``command`` into this request and return it."""
        self.api_id = int(command.api_id)
        if command.parameter is not None:
            self.parameter = command.parameter
        return self


def _f32(value: float) -> Optional[float]:
    """Round to single precision; non-finite values become null."""
    rounded = struct.unpack("<f", struct.pack("<f", float(value)))[0]
    return rounded if math.isfinite(rounded) else None


def _dump(payload) -> str:
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def _with_data(api_id: ApiId, data) -> Command:
    return Command(api_id, _dump({"data": data}))


def _with_xyz(api_id: ApiId, x: float, y: float, z: float) -> Command:
    return Command(api_id, _dump({"x": _f32(x), "y": _f32(y), "z": _f32(z)}))


def balance_stand() -> Command:
    return Command(ApiId.BALANCESTAND)


def body_height(height: float) -> Command:
    return _with_data(ApiId.BODYHEIGHT, _f32(height))


def content() -> Command:
    return Command(ApiId.CONTENT)


def continuous_gait(flag: bool) -> Command:
    return _with_data(ApiId.CONTINUOUSGAIT, bool(flag))


def damp() -> Command:
    return Command(ApiId.DAMP)


def dance1() -> Command:
    return Command(ApiId.DANCE1)


def dance2() -> Command:
    return Command(ApiId.DANCE2)


def euler(roll: float, pitch: float, yaw: float) -> Command:
    return _with_xyz(ApiId.EULER, roll, pitch, yaw)


def foot_raise_height(height: float) -> Command:
    return _with_data(ApiId.FOOTRAISEHEIGHT, _f32(height))


def front_flip() -> Command:
    return Command(ApiId.FRONTFLIP)


def front_jump() -> Command:
    return Command(ApiId.FRONTJUMP)


def front_pounce() -> Command:
    return Command(ApiId.FRONTPOUNCE)


def hello() -> Command:
    return Command(ApiId.HELLO)


def move(vx: float, vy: float, vyaw: float) -> Command:
    return _with_xyz(ApiId.MOVE, vx, vy, vyaw)


def pose(flag: bool) -> Command:
    return _with_data(ApiId.POSE, bool(flag))


def recovery_stand() -> Command:
    return Command(ApiId.RECOVERYSTAND)


def rise_sit() -> Command:
    return Command(ApiId.RISESIT)


def scrape() -> Command:
    return Command(ApiId.SCRAPE)


def sit() -> Command:
    return Command(ApiId.SIT)


def speed_level(level: int) -> Command:
    return _with_data(ApiId.SPEEDLEVEL, int(level))


def stand_down() -> Command:
    return Command(ApiId.STANDDOWN)


def stand_up() -> Command:
    return Command(ApiId.STANDUP)


def stop_move() -> Command:
    return Command(ApiId.STOPMOVE)


def stretch() -> Command:
    return Command(ApiId.STRETCH)


def switch_gait(d: int) -> Command:
    return _with_data(ApiId.SWITCHGAIT, int(d))


def switch_joystick(flag: bool) -> Command:
    return _with_data(ApiId.SWITCHJOYSTICK, bool(flag))


_POINT_KEYS = {
    "time_from_start": "t_from_start",
    "x": "x",
    "y": "y",
    "yaw": "yaw",
    "vx": "vx",
    "vy": "vy",
    "vyaw": "vyaw",
}


def trajectory_follow(path: Sequence[PathPoint]) -> Command:
    """Build a trajectory command from the first 30 points of ``path``."""
    points = list(path)
    if len(points) < TRAJECTORY_POINTS:
        raise ValueError(
            f"trajectory needs {TRAJECTORY_POINTS} points, got {len(points)}"
        )
    payload = [
        {_POINT_KEYS[f.name]: _f32(getattr(point, f.name)) for f in fields(PathPoint)}
        for point in points[:TRAJECTORY_POINTS]
    ]
    return Command(ApiId.TRAJECTORYFOLLOW, _dump(payload))


def trigger() -> Command:
    return Command(ApiId.TRIGGER)


def wallow() -> Command:
    return Command(ApiId.WALLOW)