"""The game loop, keyboard input and the command-line entry point."""

from __future__ import annotations

import argparse
import os
import random
import select
import sys
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TextIO

from .console import Console
from .enemy import EnemyFleet
from .entities import MAX_ENEMY, MY_BASE_X, MY_BASE_Y, SCORE_PER_KILL, Key, Point
from .player import Player

EXPLOSION_FRAMES = (
    "i<^>i",
    "i(*)i",
    " (* *) ",
    "(** **)",
    " (* *) ",
    "  (*)  ",
    "   *   ",
    "       ",
)

INITIAL_HISCORE = 2000
SCORE_POS = Point(68, 1)
END_POS = Point(36, 12)
END_MESSAGE = "Your ship has been destroyed."
AGAIN_PROMPT = "Play again? (y/n)\n"

SHOT_INTERVAL = 500
FRAME_INTERVAL = 150
EXPLOSION_INTERVAL = 100
ENEMY_INTERVAL = 500
FAST_ENEMY_INTERVAL = 150
SPEED_UP_KILLS = 20

MIN_X, MAX_X = 1, 75
MIN_Y, MAX_Y = 10, 25

SHOW_CURSOR = "\x1b[?25h"


class Keyboard:
    """Reads single characters from an input stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin

    def _fileno(self) -> int | None:
        try:
            return self._stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def _read_char(self, fd: int | None) -> str:
        if fd is None:
            return self._stream.read(1)
        return os.read(fd, 1).decode(errors="ignore")

    def read_key(self) -> str | None:
        """Return a waiting character, or None if nothing has been typed."""
        fd = self._fileno()
        if fd is not None:
            try:
                ready, _, _ = select.select([fd], [], [], 0)
            except (OSError, ValueError):
                ready = [fd]
            if not ready:
                return None
        return self._read_char(fd) or None

    def wait_key(self) -> str:
        """Block until a character is typed and return it ("" at end of input)."""
        return self._read_char(self._fileno())


class Game:
    """One player's session: repeated rounds against the invading fleet."""

    def __init__(
        self,
        console,
        keyboard,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console
        self.keyboard = keyboard
        self.clock = clock if clock is not None else _monotonic_ms
        self.player = Player(console)
        self.fleet = EnemyFleet(console, rng)
        self.score = 0
        self.hiscore = INITIAL_HISCORE
        self.kills = 0
        self.finished = False
        self._old_pos = Point(MY_BASE_X, MY_BASE_Y)

    def _steer(self, key: Key) -> None:
        pos = self.player.pos
        self._old_pos = pos
        if key is Key.LEFT:
            pos = Point(max(pos.x - 1, MIN_X), pos.y)
        elif key is Key.RIGHT:
            pos = Point(min(pos.x + 1, MAX_X), pos.y)
        elif key is Key.UP:
            pos = Point(pos.x, max(pos.y - 1, MIN_Y))
        else:
            pos = Point(pos.x, min(pos.y + 1, MAX_Y))
        self.player.pos = pos
        self.player.draw(pos, self._old_pos)

    def play(self) -> None:
        """Play one round until the ship dies, the fleet lands or all are shot."""
        now = self.clock()
        frame_time = enemy_time = shot_time = now
        enemy_interval = ENEMY_INTERVAL

        self.console.setup()
        self.player.reset()
        self.fleet.reset()
        self._old_pos = self.player.pos

        while True:
            now = self.clock()

            char = self.keyboard.read_key()
            key = Key.from_char(char) if char else None
            if key is Key.SHOT:
                if now - shot_time > SHOT_INTERVAL:
                    self.player.fire(self.player.pos)
                    shot_time = now
            elif key is not None:
                self._steer(key)

            if now - frame_time > FRAME_INTERVAL:
                if self.player.is_hit(self.player.pos, self.fleet.bullets):
                    if self.score > INITIAL_HISCORE:
                        self.hiscore = self.score
                    break
                killed = self.fleet.check_hits(self.player.bullets)
                self.kills += killed
                self.score += killed * SCORE_PER_KILL
                self.player.draw_bullets()
                self.player.draw(self.player.pos, self._old_pos)
                if self.kills >= MAX_ENEMY:
                    self.finished = True
                    break
                self.console.write(SCORE_POS, f"SCORE : {self.score}")
                if self.kills > SPEED_UP_KILLS:
                    enemy_interval = FAST_ENEMY_INTERVAL
                frame_time = now

            if now - enemy_time > enemy_interval:
                self.fleet.fire()
                self.fleet.draw_bullets()
                self.fleet.advance()
                self.fleet.draw()
                if self.fleet.reached_bottom():
                    break
                enemy_time = now

    def explode(self) -> None:
        """Animate the ship's destruction, unless the round was won."""
        if self.finished:
            return
        frames = iter(EXPLOSION_FRAMES)
        last = self.clock()
        while True:
            now = self.clock()
            if now - last > EXPLOSION_INTERVAL:
                frame = next(frames, None)
                if frame is None:
                    return
                self.console.write(self.player.pos, frame)
                last = now

    def run(self) -> None:
        """Play rounds until the player declines another."""
        while True:
            self.play()
            self.explode()
            self.console.write(END_POS, END_MESSAGE)
            self.console.write(END_POS.moved(0, 1), AGAIN_PROMPT)
            if self.keyboard.wait_key() != "y":
                return
            self.console.clear_screen()
            self.kills = 0
            self.finished = False


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def _idle_clock() -> int:
    """Milliseconds since an arbitrary start, yielding the CPU briefly first."""
    time.sleep(0.001)
    return _monotonic_ms()


@contextmanager
def _unbuffered_input(stream: TextIO) -> Iterator[None]:
    try:
        import termios
        import tty
    except ImportError:
        yield
        return
    try:
        fd = stream.fileno()
        saved = termios.tcgetattr(fd)
    except (AttributeError, OSError, ValueError, termios.error):
        yield
        return
    tty.setcbreak(fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def main(argv: list[str] | None = None) -> int:
    """Run the game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="invaders",
        description="Shoot down the invading fleet. Move with w/a/s/d, fire with p.",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy fire")
    args = parser.parse_args(argv)

    console = Console(sys.stdout)
    keyboard = Keyboard(sys.stdin)
    game = Game(console, keyboard, _idle_clock, random.Random(args.seed))
    try:
        with _unbuffered_input(sys.stdin):
            game.run()
    except KeyboardInterrupt:
        pass
    finally:
        sys.stdout.write(SHOW_CURSOR)
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())