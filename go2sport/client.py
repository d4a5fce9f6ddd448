"""Client that publishes sport-mode requests through a publisher."""

from __future__ import annotations

from dataclasses import replace
from typing import Protocol, Sequence

from . import commands
from .commands import Command, PathPoint, Request

__all__ = ["Publisher", "SportClient"]


class Publisher(Protocol):
    def publish(self, request: Request) -> None:
        ...


class SportClient:
    """Sends sport-mode commands, reusing a single request message."""

    def __init__(self, publisher: Publisher) -> None:
        self._publisher = publisher
        self._request = Request()

    def send(self, command: Command) -> Request:
        """Apply ``command`` to the request, publish it and return a copy."""
        self._request.apply(command)
        message = replace(self._request)
        self._publisher.publish(message)
        return message

    def balance_stand(self) -> Request:
        return self.send(commands.balance_stand())

    def body_height(self, height: float) -> Request:
        return self.send(commands.body_height(height))

    def content(self) -> Request:
        return self.send(commands.content())

    def continuous_gait(self, flag: bool) -> Request:
        return self.send(commands.continuous_gait(flag))

    def damp(self) -> Request:
        return self.send(commands.damp())

    def dance1(self) -> Request:
        return self.send(commands.dance1())

    def dance2(self) -> Request:
        return self.send(commands.dance2())

    def euler(self, roll: float, pitch: float, yaw: float) -> Request:
        return self.send(commands.euler(roll, pitch, yaw))

    def foot_raise_height(self, height: float) -> Request:
        return self.send(commands.foot_raise_height(height))

    def front_flip(self) -> Request:
        return self.send(commands.front_flip())

    def front_jump(self) -> Request:
        return self.send(commands.front_jump())

    def front_pounce(self) -> Request:
        return self.send(commands.front_pounce())

    def hello(self) -> Request:
        return self.send(commands.hello())

    def move(self, vx: float, vy: float, vyaw: float) -> Request:
        return self.send(commands.move(vx, vy, vyaw))

    def pose(self, flag: bool) -> Request:
        return self.send(commands.pose(flag))

    def recovery_stand(self) -> Request:
        return self.send(commands.recovery_stand())

    def rise_sit(self) -> Request:
        return self.send(commands.rise_sit())

    def scrape(self) -> Request:
        return self.send(commands.scrape())

    def sit(self) -> Request:
        return self.send(commands.sit())

    def speed_level(self, level: int) -> Request:
        return self.send(commands.speed_level(level))

    def stand_down(self) -> Request:
        return self.send(commands.stand_down())

    def stand_up(self) -> Request:
        return self.send(commands.stand_up())

    def stop_move(self) -> Request:
        return self.send(commands.stop_move())

    def stretch(self) -> Request:
        return self.send(commands.stretch())

    def switch_gait(self, d: int) -> Request:
        return self.send(commands.switch_gait(d))

    def switch_joystick(self, flag: bool) -> Request:
        return self.send(commands.switch_joystick(flag))

    def trajectory_follow(self, path: Sequence[PathPoint]) -> Request:
        return self.send(commands.trajectory_follow(path))

    def trigger(self) -> Request:
        return self.send(commands.trigger())

    def wallow(self) -> Request:
        return self.send(commands.wallow())