import json

import pytest

from go2sport import commands
from go2sport.commands import ApiId, Command, PathPoint, Request


def test_api_id_values():
    assert commands.damp().api_id == 1001
    assert commands.move(0, 0, 0).api_id == 1008
    assert commands.front_pounce().api_id == 1032


@pytest.mark.parametrize(
    "builder, api_id",
    [
        (commands.balance_stand, ApiId.BALANCESTAND),
        (commands.content, ApiId.CONTENT),
        (commands.damp, ApiId.DAMP),
        (commands.dance1, ApiId.DANCE1),
        (commands.dance2, ApiId.DANCE2),
        (commands.front_flip, ApiId.FRONTFLIP),
        (commands.front_jump, ApiId.FRONTJUMP),
        (commands.front_pounce, ApiId.FRONTPOUNCE),
        (commands.hello, ApiId.HELLO),
        (commands.recovery_stand, ApiId.RECOVERYSTAND),
        (commands.rise_sit, ApiId.RISESIT),
        (commands.scrape, ApiId.SCRAPE),
        (commands.sit, ApiId.SIT),
        (commands.stand_down, ApiId.STANDDOWN),
        (commands.stand_up, ApiId.STANDUP),
        (commands.stop_move, ApiId.STOPMOVE),
        (commands.stretch, ApiId.STRETCH),
        (commands.trigger, ApiId.TRIGGER),
        (commands.wallow, ApiId.WALLOW),
    ],
)
def test_commands_without_parameter(builder, api_id):
    command = builder()
    assert command.api_id == api_id
    assert command.parameter is None


@pytest.mark.parametrize(
    "builder, api_id",
    [
        (commands.body_height, ApiId.BODYHEIGHT),
        (commands.foot_raise_height, ApiId.FOOTRAISEHEIGHT),
    ],
)
def test_height_commands(builder, api_id):
    command = builder(0.5)
    assert command.api_id == api_id
    assert json.loads(command.parameter) == {"data": 0.5}


def test_height_is_single_precision():
    value = json.loads(commands.body_height(0.3).parameter)["data"]
    assert value == pytest.approx(0.3, abs=1e-7)
    assert value == json.loads(commands.body_height(value).parameter)["data"]


@pytest.mark.parametrize(
    "builder, api_id",
    [
        (commands.continuous_gait, ApiId.CONTINUOUSGAIT),
        (commands.pose, ApiId.POSE),
        (commands.switch_joystick, ApiId.SWITCHJOYSTICK),
    ],
)
@pytest.mark.parametrize("flag", [True, False])
def test_flag_commands(builder, api_id, flag):
    command = builder(flag)
    assert command.api_id == api_id
    assert json.loads(command.parameter) == {"data": flag}


def test_flag_wire_format():
    assert commands.pose(True).parameter == '{"data":true}'


def test_speed_level_and_switch_gait_are_integers():
    level = commands.speed_level(2)
    gait = commands.switch_gait(1)
    assert level.api_id == ApiId.SPEEDLEVEL
    assert gait.api_id == ApiId.SWITCHGAIT
    assert json.loads(level.parameter) == {"data": 2}
    assert json.loads(gait.parameter) == {"data": 1}
    assert isinstance(json.loads(level.parameter)["data"], int)


@pytest.mark.parametrize(
    "builder, api_id",
    [(commands.move, ApiId.MOVE), (commands.euler, ApiId.EULER)],
)
def test_xyz_commands(builder, api_id):
    command = builder(0.5, -0.25, 1.0)
    assert command.api_id == api_id
    assert json.loads(command.parameter) == {"x": 0.5, "y": -0.25, "z": 1.0}


def test_move_wire_format_is_compact():
    assert commands.move(0.5, 0, 0).parameter == '{"x":0.5,"y":0.0,"z":0.0}'


def test_trajectory_follow_uses_thirty_points():
    path = [PathPoint(time_from_start=i * 0.5, x=float(i)) for i in range(35)]
    command = commands.trajectory_follow(path)
    assert command.api_id == ApiId.TRAJECTORYFOLLOW
    points = json.loads(command.parameter)
    assert len(points) == commands.TRAJECTORY_POINTS
    assert set(points[0]) == {"t_from_start", "x", "y", "yaw", "vx", "vy", "vyaw"}
    assert [p["x"] for p in points] == [float(i) for i in range(30)]
    assert points[4]["t_from_start"] == 2.0


def test_trajectory_follow_too_short():
    with pytest.raises(ValueError):
        commands.trajectory_follow([PathPoint()] * 29)


def test_request_apply_sets_fields():
    request = Request()
    result = request.apply(commands.move(0.5, 0, 0))
    assert result is request
    assert request.api_id == ApiId.MOVE
    assert json.loads(request.parameter)["x"] == 0.5


def test_request_apply_keeps_previous_parameter():
    request = Request()
    request.apply(commands.speed_level(1))
    previous = request.parameter
    request.apply(commands.damp())
    assert request.api_id == ApiId.DAMP
    assert request.parameter == previous


def test_command_is_immutable():
    command = Command(ApiId.SIT)
    with pytest.raises(AttributeError):
        command.api_id = ApiId.DAMP
    assert command.api_id == ApiId.SIT
    assert command.parameter is None