# go2sport

`go2sport` builds the sport-mode requests that a quadruped robot accepts and
passes them to a publisher that you supply. It also has two ready-made motion
routines: a stand/sit sequence and a short walk-and-turn sequence.

The library has no runtime dependencies. Any object with a `publish(request)`
method can serve as the transport.

## Installation

```
pip install go2sport
```

To run the test suite, install the `test` extra (`pip install go2sport[test]`).

## Building requests

`go2sport.commands` has one function for each sport-mode call: `damp`,
`balance_stand`, `stop_move`, `stand_up`, `stand_down`, `recovery_stand`,
`euler`, `move`, `sit`, `rise_sit`, `switch_gait`, `trigger`, `body_height`,
`foot_raise_height`, `speed_level`, `hello`, `stretch`, `trajectory_follow`,
`continuous_gait`, `content`, `wallow`, `dance1`, `dance2`, `switch_joystick`,
`pose`, `scrape`, `front_flip`, `front_jump` and `front_pounce`.

Each function returns a frozen `Command`. A `Command` holds an `api_id`, which
is a member of the `ApiId` enum, and a `parameter`. For calls that take no
arguments, `parameter` is `None`. For the other calls it is a compact JSON
string with sorted keys:

- `body_height`, `foot_raise_height`, `speed_level`, `switch_gait`,
  `continuous_gait`, `switch_joystick` and `pose` put their argument under
  `"data"`.
- `move(vx, vy, vyaw)` and `euler(roll, pitch, yaw)` use the keys `"x"`, `"y"`
  and `"z"`.

Float arguments are first rounded to single precision. Non-finite values
become `null`.

```python
from go2sport.commands import ApiId, Request, move, speed_level, stand_up

cmd = move(0.5, 0.0, 0.0)
cmd.api_id is ApiId.MOVE           # True
cmd.parameter                      # '{"x":0.5,"y":0.0,"z":0.0}'

request = Request()
request.apply(speed_level(1))      # api_id=1015, parameter='{"data":1}'
request.apply(stand_up())          # api_id=1004, parameter kept
```

`Request.apply` writes the command's id into the request. It also writes the
parameter, but only when the command has one, so a command without a parameter
leaves the previous parameter in place.

`trajectory_follow(path)` takes a sequence of `PathPoint` values. Each point
holds `time_from_start`, `x`, `y`, `yaw`, `vx`, `vy` and `vyaw`. Only the first
30 points (`TRAJECTORY_POINTS`) are encoded, under the keys `t_from_start`,
`x`, `y`, `yaw`, `vx`, `vy` and `vyaw`. A path with fewer than 30 points raises
`ValueError`.

## Sending commands

`SportClient` wraps a publisher and keeps a single `Request`. Each method
applies its command to that request, publishes a copy of it and returns the
copy. `send(command)` does the same for any `Command` you build yourself.

```python
from go2sport.client import SportClient

class PrintPublisher:
    def publish(self, request):
        print(request)

client = SportClient(PrintPublisher())
client.stand_up()
client.move(0.3, 0, 0)
client.stand_down()
```

## Routines

`go2sport.routines` has the following functions:

- `run_standsit(client, is_ok, sleep, shutdown)` runs stand, sit, down, stand,
  down. Each step is followed by a 2 s sleep.
- `run_walk(client, is_ok, sleep, shutdown)` runs down, stand and balance, then
  walks forward for 3 s and back for 3 s at 0.3. It then turns right, left
  twice, right again, and finally lies down.
- `walk(client, speed, seconds, is_ok, sleep)` sends a move every half second
  for `seconds` seconds. The speed is clamped to [-1, 1]. `seconds` must be in
  the range 0..255, otherwise `ValueError` is raised.
- `turn(client, arad, is_ok, sleep)` turns in place. The rate is clamped to
  ±3.141592 and the turn lasts `min(1500, 1500·|arad|)` ms.

Each routine prints a short line before each stage. It calls `is_ok()` between
stages and stops, returning `False`, once that call returns false. When the
full sequence completes, `run_standsit` and `run_walk` call `shutdown()` and
return `True`. `is_ok`, `sleep` and `shutdown` are optional; by default they
are "always ok", `time.sleep` and "do nothing".

```python
import time
from go2sport.client import SportClient
from go2sport.routines import run_standsit

client = SportClient(PrintPublisher())
run_standsit(client, lambda: True, time.sleep, lambda: print("done"))
```

## What this package does not do

`go2sport` does not connect to a robot. It does not create a messaging node,
open a topic or spin an event loop; the publisher you pass in does all of the
transport. It ships no command-line programs, so to run a routine you call it
from your own code. The `GET*` entries in `ApiId` are only identifiers: no
function builds those queries, and the package does not read responses.