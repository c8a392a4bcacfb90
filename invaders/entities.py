"""Shared game constants and small value types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MAX_ENEMY = 40
ENEMY_ROWS = 4
ENEMY_COLS = 10
MAX_ENEMY_BULLETS = 10
ENEMY_BASE_X = 20
ENEMY_BASE_Y = 2

MAX_MY_BULLETS = 6
MY_BASE_X = 38
MY_BASE_Y = 23

SCORE_PER_KILL = 100


@dataclass(frozen=True)
class Point:
    """A character cell on the console."""

    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Point:
        """Return the point shifted by the given offsets."""
        return Point(self.x + dx, self.y + dy)


class Key(Enum):
    """Keyboard controls."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"
    SHOT = "p"

    @classmethod
    def from_char(cls, char: str) -> Key | None:
        """Map a typed character to a control, or None if it is not one."""
        try:
            return cls(char)
        except ValueError:
            return None


@dataclass
class Bullet:
    """A shot that is either in flight or idle."""

    active: bool = False
    pos: Point = field(default_factory=lambda: Point(0, 0))

    def fire(self, pos: Point) -> None:
        """Put the bullet in flight at the given position."""
        self.active = True
        self.pos = pos

    def clear(self) -> None:
        """Take the bullet out of flight."""
        self.active = False