# invaders

invaders is a small space invaders game for a text terminal. It uses ANSI
escape sequences to draw a play field about 80 columns wide and 25 rows high,
with a line border around it.

## Installing

```
pip install .
```

## Playing

```
invaders
invaders --seed 42
```

`--seed` seeds the random number generator that picks which enemy fires next.
With the same seed, the enemies choose their shooters in the same order.

Your ship `-i^i-` starts near the bottom of the field. You can move it left
and right across the field, and up and down between rows 10 and 25. Forty
`^V^` enemies come across the screen in four rows of ten. When the fleet
touches either side, it turns around and drops one row on its next step.
Enemies fire `|` bullets downwards.

| Key | Action               |
|-----|----------------------|
| `w` | move up              |
| `s` | move down            |
| `a` | move left            |
| `d` | move right           |
| `p` | fire a pair of shots |

- You can fire at most once every half second. No more than three pairs of
  shots can be in the air at once.
- Each enemy you destroy adds 100 to the score. The score is shown at the top
  right as `SCORE : <n>`.
- When more than 20 enemies have been destroyed, the fleet moves faster.
- The round is won when all 40 enemies have been destroyed.
- The round is lost when an enemy bullet hits your ship or a living enemy
  reaches the bottom row. If your ship was hit, a short explosion is played.

At the end of a round the game asks `Play again? (y/n)`. Press `y` to start a
new round. Any other key quits. Ctrl-C also quits. The cursor is shown again
on the way out.

## Limitations

- The game reads keys one at a time by putting the terminal into cbreak mode
  with `termios`, and checks for waiting keys with `select`. This needs a
  POSIX terminal. Other platforms do not get non-blocking key input.
- A high score is kept on the `Game` object while the program runs. It is not
  displayed, and it is not saved between runs.

## Using it from Python

You can put the pieces together yourself. This helps when testing, or when
drawing to something other than a real terminal:

```python
import io
import random

from invaders.console import Console
from invaders.enemy import EnemyFleet

screen = io.StringIO()
console = Console(screen)
fleet = EnemyFleet(console, random.Random(0))
fleet.advance()
fleet.draw()
print(fleet.reached_bottom())  # False
```

The modules:

- `invaders.entities`: `Point`, `Key`, `Bullet` and the game's constants.
- `invaders.console`: `Console`, which writes text at cell positions on a
  stream.
- `invaders.player`: `Player`, which holds the player's ship and its bullets.
- `invaders.enemy`: `EnemyShip` and `EnemyFleet`, which hold the enemy grid,
  its movement and its bullets.
- `invaders.game`: `Keyboard`, `Game` and `main()`.

`Game(console, keyboard, clock, rng)` builds a complete game from a `Console`,
a `Keyboard`, a clock that returns milliseconds, and a `random.Random`.
`Game.run()` plays rounds until the player declines another one.
`invaders.game.main()` runs the game in the current terminal.

## Running the tests

```
pip install .[test]
pytest
```