"""Timing and patrol routes for the boss who watches the shop."""

from __future__ import annotations

import random
from typing import Protocol

from pizzeria_engine.vector import Vector2

APPEAR_PERIOD = 5
DISAPPEAR_PERIOD = 3

START = Vector2(1155, 1200)
END = START

_P1 = Vector2(1155, 810)
_P2 = Vector2(1155, 400)
_P3 = Vector2(310, 400)
_P4 = Vector2(310, 810)


def _path(*points: tuple[float, float] | Vector2) -> tuple[Vector2, ...]:
    return tuple(p if isinstance(p, Vector2) else Vector2(*p) for p in points) + (END,)


PATROL_PATHS: tuple[tuple[Vector2, ...], ...] = (
    _path(_P1, _P2, _P3, _P4, _P1),
    _path(_P1, _P4, _P3, _P2, _P1),
    _path(_P2, _P3, _P2, _P3, _P2, _P3, _P4, _P1),
    _path(_P2, _P1, _P2, _P1, _P4, _P1, _P4, _P3, _P4, _P1),
    _path(
        (1155, 565), _P2, _P3, (800, 200), (595, 200), _P3, _P4,
        (200, 555), _P4, (600, 700), (800, 810), _P1,
    ),
    _path(
        _P1, _P2, (1155, 170), _P1, _P2, _P3, (695, 400), _P3, _P4,
        (310, 630), _P4, _P1,
    ),
    _path(
        _P2, (695, 300), (695, 395), (695, 200), (695, 300), _P3,
        (310, 500), (195, 500), (435, 500), (310, 500), _P4,
        (685, 710), (685, 810), (685, 660), (685, 710), _P1,
    ),
    _path((1255, 180), (1155, 710), _P2, (500, 300), (900, 250), _P3, _P4, _P1),
    _path(_P2, _P1, (685, 710), _P4, _P3, (855, 200), _P2, (1055, 565)),
    _path(_P1, (685, 810), _P4, _P1, (1255, 150), _P2),
    _path(
        (1155, 365), (685, 265), (705, 210), (910, 210), (910, 365),
        (685, 365), (310, 365), (310, 640), (800, 640), (800, 780),
        (550, 780), (550, 640), (800, 640), (1275, 640),
    ),
    _path(
        (1155, 435), (465, 435), (465, 310), (900, 310), (900, 435),
        (1155, 435),
    ),
)


class Stage(Protocol):
    def play_up_window(self) -> None: ...

    def play_walking_window(self) -> None: ...

    def spawn_boss(self, position: Vector2) -> None: ...


class BossManager:
    """Decides when the boss shows at the window, enters, and where he walks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.start = START
        self.end = END
        self.paths = PATROL_PATHS
        self.path_index = 0
        self.dest_index = 0
        self.destination = Vector2()
        self.boss_timer = 0.0
        self.appear_period = APPEAR_PERIOD
        self.disappear_period = DISAPPEAR_PERIOD
        self.window_period = self.random_window_period()
        self.half_percent = self.random_half_percent()
        self.appeared = False
        self.up_window_played = False
        self.walking_window_played = False

    def update(self, delta_time: float, stage: Stage) -> None:
        """Advance the window timer and show, hide or spawn the boss."""
        if self.appeared:
            return
        self.boss_timer += delta_time
        if self.boss_timer < self.window_period:
            return

        if self.half_percent < 0.5:
            if not self.up_window_played:
                stage.play_up_window()
                self.up_window_played = True
            if self.boss_timer >= self.window_period + self.disappear_period:
                self.disappear_boss()
        else:
            if not self.walking_window_played:
                stage.play_walking_window()
                self.walking_window_played = True
            if self.boss_timer >= self.window_period + self.appear_period:
                self.boss_timer = 0.0
                self.appeared = True
                self.path_index = self.random_path_index()
                self.destination = self.paths[self.path_index][self.dest_index]
                stage.spawn_boss(self.start)

    def disappear_boss(self) -> None:
        """Reset for the next appearance with fresh random timing."""
        self.appeared = False
        self.dest_index = 0
        self.boss_timer = 0.0
        self.window_period = self.random_window_period()
        self.half_percent = self.random_half_percent()
        self.up_window_played = False
        self.walking_window_played = False

    def find_next_destination(self) -> bool:
        """Move to the next point of the path; False once at its end."""
        path = self.paths[self.path_index]
        if self.dest_index == len(path) - 1:
            return False
        self.dest_index += 1
        self.destination = path[self.dest_index]
        return True

    def random_path_index(self) -> int:
        return self._rng.randint(0, len(self.paths) - 1)

    def random_window_period(self) -> int:
        return self._rng.randint(5, 7)

    def random_half_percent(self) -> float:
        return self._rng.random()