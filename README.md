# coinflip-sim

A small coin-flip betting simulation. You start with a balance of 100,
choose a bet and flip a coin: heads wins the bet, tails loses it. A bet is
clamped between 0 and 90% of the current balance. The simulation records
every flip and every balance. From these it reports the peak balance, the
number of heads and tails, their ratio and the difference between them.

Around the simulation sits a minimal frame loop. It measures frame times in a
rolling window of five seconds' worth of frames. It averages them into a
frames-per-second figure and tracks named key bindings. A binding can be
down, freshly pressed or freshly released.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
coinflip-sim [--seed N] [--refresh-rate FPS]
```

The command reads commands from standard input, one per line, and runs one
frame per line:

- `flip` flips the coin and settles the current bet.
- `bet AMOUNT` sets the bet (clamped to the allowed range).
- `quit` presses the bound quit key; the loop prints
  `Break key was pressed, exiting.` and stops.

The loop also stops when input ends. After every frame it prints a debug
panel and the simulation panel. The debug panel holds the FPS, the average
delta time, and the frame width and height. The simulation panel holds the
bet, balance, coin state, heads, tails, ratio and difference. Unknown commands
and bets that are not numbers are reported on standard output.

`--seed` seeds the random number generator so that runs repeat exactly.
`--refresh-rate` (default 60) sets the number of frames per second used to
size the frame-time history.

## Using it as a library

```python
import random

from coinflip_sim.rolling_buffer import RollingBuffer
from coinflip_sim.simulation import Reactor

reactor = Reactor(random.Random(42))
reactor.set_bet(10.0)
reactor.flip()
print(reactor.render())
print(reactor.tails(), reactor.ratio(), reactor.difference())

frames = RollingBuffer(5, 0.0)
for value in (1.0, 2.0, 3.0, 4.0, 5.0, 6.0):
    frames.add(value)
print(frames.ordered())  # [2.0, 3.0, 4.0, 5.0, 6.0], oldest first
frames.resize(3)         # keeps the oldest values that fit: [2.0, 3.0, 4.0]
print(len(frames))       # 3
```

Main components:

- `coinflip_sim.rolling_buffer.RollingBuffer`: a fixed-capacity circular
  buffer. `add` overwrites the oldest value when full. `ordered` and iteration
  give the stored values oldest first, and `len` gives how many are stored.
  `resize` changes the capacity and keeps the oldest values that fit. `size`,
  `index` and `buffer` expose the raw slots.
- `coinflip_sim.input.Input`: binds action names to key codes with `bind`,
  `unbind` and `get_key`. `update` takes the set of key codes held this
  frame. `is_down`, `is_pressed` and `is_released` answer for an action.
  `KEY_PAUSE` is the key code the command binds to `quit`.
- `coinflip_sim.engine.Engine`: the frame loop state. It takes a refresh
  rate, a clock function and an optional `Input`. `begin_frame` records the
  delta time, updates input and returns a `FrameContext` of width, height
  and delta time. `ordered_frame_times` and `average_delta_time` expose the
  rolling frame-time window, and `should_close` is a plain flag. `fail`
  prints an error to standard error and raises `EngineError` when the
  failure is fatal.
- `coinflip_sim.simulation.Reactor`: the coin-flip game itself. It offers
  `set_bet`, `flip`, `tails`, `ratio`, `difference`, `render` and `max_bet`,
  and exposes `balance`, `balances`, `coin_states`, `peak` and `heads` as
  attributes.
- `coinflip_sim.main`: `render_debug`, `run` and the `main` entry point
  behind the `coinflip-sim` command.

## What it does not do

The package has no graphical window and draws no plots. Its panels are plain
text printed to the terminal. There is no live keyboard polling either. The
quit key is pressed only when an input line reads `quit`, and each frame
waits for a line of input rather than running at the refresh rate. The width
and height in `FrameContext` are fixed at 800 and 600. Nothing is saved
between runs.