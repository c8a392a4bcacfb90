"""The invading fleet and its bullets."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

from .entities import (
    ENEMY_BASE_X,
    ENEMY_BASE_Y,
    ENEMY_COLS,
    ENEMY_ROWS,
    MAX_ENEMY,
    MAX_ENEMY_BULLETS,
    MAX_MY_BULLETS,
    Bullet,
    Point,
)

SHIP_SHAPE = "^V^"
SHIP_BLANK = "   "
EXPLOSION = " *** "
BULLET_SHAPE = "|"
COL_SPACING = 4
ROW_SPACING = 2
LEFT_EDGE = 2
RIGHT_EDGE = 77
BOTTOM_ROW = 23


@dataclass
class EnemyShip:
    alive: bool
    pos: Point


class EnemyFleet:
    """A grid of enemy ships that marches side to side and down."""

    def __init__(self, console, rng: random.Random | None = None) -> None:
        self.console = console
        self.rng = rng if rng is not None else random.Random()
        self.ships: list[EnemyShip] = []
        self.old_positions: list[Point] = []
        self.bullets = [Bullet() for _ in range(MAX_ENEMY_BULLETS)]
        self._dx = 1
        self._dy = 0
        self._reversed = False
        self._booms = [Bullet() for _ in range(MAX_MY_BULLETS)]
        self.reset()

    def reset(self) -> None:
        """Rebuild the fleet at its base and ground all bullets."""
        self.ships = [
            EnemyShip(
                True,
                Point(ENEMY_BASE_X + col * COL_SPACING, ENEMY_BASE_Y + row * ROW_SPACING),
            )
            for row in range(ENEMY_ROWS)
            for col in range(ENEMY_COLS)
        ]
        self.old_positions = [ship.pos for ship in self.ships]
        for bullet in self.bullets:
            bullet.clear()
            bullet.pos = Point(0, 0)

    def advance(self) -> None:
        """Step every ship and work out the next step's direction."""
        self.old_positions = [ship.pos for ship in self.ships]
        for ship in self.ships:
            ship.pos = ship.pos.moved(self._dx, self._dy)
        self._dy = self._edge_turn()
        self._dx = -1 if self._reversed else 1

    def _edge_turn(self) -> int:
        first = self.ships[0].pos.x
        last = self.ships[ENEMY_COLS - 1].pos.x
        if first < LEFT_EDGE or last > RIGHT_EDGE:
            self._reversed = not self._reversed
            return 1
        return 0

    def draw(self) -> None:
        """Redraw every surviving ship at its new position."""
        for ship, old in zip(self.ships, self.old_positions):
            if ship.alive:
                self.console.write(old, SHIP_BLANK)
                self.console.write(ship.pos, SHIP_SHAPE)

    def pick_shooter(self) -> int:
        """Choose a random surviving ship's index."""
        if not any(ship.alive for ship in self.ships):
            raise ValueError("no surviving ship can shoot")
        while True:
            index = self.rng.randrange(MAX_ENEMY)
            if self.ships[index].alive:
                return index

    def fire(self) -> None:
        """Launch a bullet from a random ship if one is free."""
        shooter = self.ships[self.pick_shooter()]
        for bullet in self.bullets:
            if not bullet.active:
                bullet.fire(shooter.pos)
                return

    def draw_bullets(self) -> None:
        """Move bullets down one row; stop at the first that lands."""
        for bullet in self.bullets:
            if not bullet.active:
                continue
            if bullet.pos.y > BOTTOM_ROW:
                bullet.clear()
                self.console.write(bullet.pos, " ")
                return
            old = bullet.pos
            bullet.pos = old.moved(0, 1)
            self.console.write(old, " ")
            self.console.write(bullet.pos, BULLET_SHAPE)

    def reached_bottom(self) -> bool:
        """Tell whether a surviving ship has reached the bottom row."""
        return any(ship.alive and ship.pos.y == BOTTOM_ROW for ship in self.ships)

    def check_hits(self, bullets: Sequence[Bullet]) -> int:
        """Destroy ships struck by the given bullets; return how many died."""
        for boom in self._booms:
            if boom.active:
                self.console.write(boom.pos, SHIP_BLANK)
                boom.clear()

        kills = 0
        for bullet, boom in zip(bullets, self._booms):
            if not bullet.active:
                continue
            for ship in self.ships:
                if (
                    ship.alive
                    and ship.pos.x <= bullet.pos.x <= ship.pos.x + len(SHIP_SHAPE) - 1
                    and ship.pos.y == bullet.pos.y
                ):
                    ship.alive = False
                    self.console.write(ship.pos, EXPLOSION)
                    bullet.clear()
                    kills += 1
                    boom.fire(ship.pos)
        return kills