"""Command-line front end driving the coin-flip simulation frame by frame."""

from __future__ import annotations

import argparse
import math
import random
import sys
from typing import Iterable, TextIO

from .engine import Engine, FrameContext
from .input import KEY_PAUSE
from .simulation import Reactor

QUIT_MESSAGE = "Break key was pressed, exiting."


def render_debug(engine: Engine, context: FrameContext) -> str:
    """Text panel with frame-rate statistics."""
    average = engine.average_delta_time()
    fps = 1.0 / average if average else math.inf
    lines = [
        "Debug",
        f"FPS: {fps:.1f}",
        f"Delta Time: {average:.3f}",
        f"Width: {context.width}",
        f"Height: {context.height}",
    ]
    return "\n".join(lines)


def _apply(reactor: Reactor, command: str, out: TextIO) -> None:
    words = command.split()
    if not words:
        return
    name, args = words[0].lower(), words[1:]
    if name == "flip" and not args:
        reactor.flip()
    elif name == "bet" and len(args) == 1:
        try:
            reactor.set_bet(float(args[0]))
        except ValueError:
            print(f"Invalid bet: {args[0]}", file=out)
    else:
        print(f"Unknown command: {command.strip()}", file=out)


def run(reactor: Reactor, engine: Engine, lines: Iterable[str], out: TextIO) -> int:
    """Run one frame per input line until quit or input ends; return frames run."""
    engine.input.bind("quit", KEY_PAUSE)
    commands = iter(lines)
    frames = 0
    while not engine.should_close:
        command = next(commands, None)
        if command is None:
            break
        quitting = command.strip().lower() == "quit"
        context = engine.begin_frame({KEY_PAUSE} if quitting else ())
        frames += 1
        if engine.input.is_down("quit"):
            print(QUIT_MESSAGE, file=out)
            engine.should_close = True
        else:
            _apply(reactor, command, out)
        print(render_debug(engine, context), file=out)
        print(reactor.render(), file=out)
    return frames


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Coin flip betting simulation.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--refresh-rate", type=int, default=60, help="frames per second")
    args = parser.parse_args(argv)
    if args.refresh_rate < 1:
        parser.error("--refresh-rate must be positive")
    reactor = Reactor(random.Random(args.seed))
    engine = Engine(refresh_rate=args.refresh_rate)
    run(reactor, engine, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())