"""The player's ship and its bullets."""

from __future__ import annotations

from collections.abc import Iterable

from .entities import MAX_MY_BULLETS, MY_BASE_X, MY_BASE_Y, Bullet, Point

SHIP_SHAPE = "-i^i-"
SHIP_BLANK = " " * len(SHIP_SHAPE)
BULLET_SHAPE = "!"
TOP_LIMIT = 2


class Player:
    """The player's ship, drawn on a console, with a fixed pool of bullets."""

    def __init__(self, console) -> None:
        self.console = console
        self.bullets = [Bullet() for _ in range(MAX_MY_BULLETS)]
        self.active = False
        self.pos = Point(MY_BASE_X, MY_BASE_Y)
        self.reset()

    def reset(self) -> None:
        """Bring the ship back to life at its starting position."""
        self.active = True
        self.pos = Point(MY_BASE_X, MY_BASE_Y)

    def draw(self, pos: Point, old_pos: Point) -> None:
        """Erase the ship at old_pos and draw it at pos."""
        self.console.write(old_pos, SHIP_BLANK)
        self.console.write(pos, SHIP_SHAPE)

    def fire(self, pos: Point) -> None:
        """Fire a pair of bullets from the ship at pos, if a pair is free."""
        pairs = zip(self.bullets[0::2], self.bullets[1::2])
        for left, right in pairs:
            if not left.active and not right.active:
                left.fire(pos.moved(1, -1))
                right.fire(pos.moved(3, -1))
                return

    def draw_bullets(self) -> None:
        """Move bullets in flight up one row; stop at the first that leaves."""
        for bullet in self.bullets:
            if not bullet.active:
                continue
            if bullet.pos.y < TOP_LIMIT:
                bullet.clear()
                self.console.write(bullet.pos, " ")
                return
            old = bullet.pos
            bullet.pos = old.moved(0, -1)
            self.console.write(old, " ")
            self.console.write(bullet.pos, BULLET_SHAPE)

    def is_hit(self, pos: Point, enemy_bullets: Iterable[Bullet]) -> bool:
        """Tell whether any enemy bullet in flight strikes a ship at pos."""
        width = len(SHIP_SHAPE) - 1
        return any(
            b.active and pos.x <= b.pos.x <= pos.x + width and b.pos.y == pos.y
            for b in enemy_bullets
        )