import io
import random

import pytest

from invaders.entities import Point
from invaders.game import Game, Keyboard


class FakeConsole:
    def __init__(self):
        self.writes = []
        self.setups = 0
        self.clears = 0

    def setup(self):
        self.setups += 1

    def hide_cursor(self):
        pass

    def draw_border(self):
        pass

    def move(self, point):
        pass

    def write(self, point, text):
        self.writes.append((point, text))

    def clear_screen(self):
        self.clears += 1


class FakeKeyboard:
    def __init__(self, keys=(), answers=()):
        self.keys = list(keys)
        self.answers = list(answers)

    def read_key(self):
        return self.keys.pop(0) if self.keys else None

    def wait_key(self):
        return self.answers.pop(0) if self.answers else "n"


class FakeClock:
    def __init__(self, step=50):
        self.now = 0
        self.step = step

    def __call__(self):
        self.now += self.step
        return self.now


def make_game(keys=(), answers=(), seed=1):
    console = FakeConsole()
    game = Game(console, FakeKeyboard(keys, answers), FakeClock(), random.Random(seed))
    return game, console


def test_keyboard_reads_characters_in_order():
    keyboard = Keyboard(io.StringIO("ab"))
    assert keyboard.read_key() == "a"
    assert keyboard.read_key() == "b"
    assert keyboard.read_key() is None


def test_keyboard_wait_key():
    keyboard = Keyboard(io.StringIO("y"))
    assert keyboard.wait_key() == "y"
    assert keyboard.wait_key() == ""


def test_play_ends_with_death_or_landing():
    game, _ = make_game()
    game.play()
    hit = game.player.is_hit(game.player.pos, game.fleet.bullets)
    assert hit or game.fleet.reached_bottom() or game.finished


def test_score_matches_kills():
    game, _ = make_game(keys=["p"] * 3)
    game.play()
    assert game.score == 100 * game.kills


@pytest.mark.parametrize(
    "key, count, expected",
    [
        ("a", 60, Point(1, 23)),
        ("d", 60, Point(75, 23)),
        ("w", 30, Point(38, 10)),
        ("s", 10, Point(38, 25)),
    ],
)
def test_movement_is_clamped(key, count, expected):
    game, _ = make_game(keys=[key] * count)
    game.play()
    assert game.player.pos == expected


def test_score_is_shown():
    game, console = make_game()
    game.play()
    shown = [text for point, text in console.writes if point == Point(68, 1)]
    assert shown
    assert all(text.startswith("SCORE : ") for text in shown)


def test_hiscore_only_recorded_on_death():
    game, _ = make_game()
    game.score = 2500
    game.play()
    hit = game.player.is_hit(game.player.pos, game.fleet.bullets)
    assert game.score >= 2500
    assert game.hiscore == (game.score if hit else 2000)


def test_explode_shows_all_frames_at_ship():
    game, console = make_game()
    game.player.pos = Point(10, 20)
    game.explode()
    assert console.writes == [
        (Point(10, 20), frame)
        for frame in (
            "i<^>i",
            "i(*)i",
            " (* *) ",
            "(** **)",
            " (* *) ",
            "  (*)  ",
            "   *   ",
            "       ",
        )
    ]


def test_explode_skipped_after_victory():
    game, console = make_game()
    game.finished = True
    game.explode()
    assert console.writes == []


def test_run_once_when_declined():
    game, console = make_game(answers=["n"])
    game.run()
    assert console.setups == 1
    assert console.clears == 0
    end_points = [point for point, _ in console.writes[-2:]]
    assert end_points == [Point(36, 12), Point(36, 13)]


def test_run_replays_on_yes():
    game, console = make_game(answers=["y", "n"])
    game.run()
    assert console.setups == 2
    assert console.clears == 1
    assert game.finished is False