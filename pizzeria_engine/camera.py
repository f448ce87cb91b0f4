"""Full-screen camera effects: focus circles, fades, blackout and a swinging light."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto

from pizzeria_engine.vector import HALF_PI, Vector2, clamp

FOCUS_RADIUS = 300.0
FOCUS_MIN_RATIO = 0.05
FOCUS_MAX_RATIO = 0.7

FADE_MIN_ALPHA = 40
OPAQUE = 255
SHINE_ALPHA = 40

SHINE_OFFSET = Vector2(290.0, 290.0)
SHINE_PIVOT = Vector2(960.0, -500.0)

Rect = tuple[int, int, int, int]
Point = tuple[int, int]


class CameraEffectType(Enum):
    FOCUSED_ON = auto()
    FOCUSED_OUT = auto()
    FADE_IN = auto()
    ALL_BLACK = auto()
    SHINE_LIGHT = auto()


@dataclass
class CameraEffect:
    """A queued effect, its progress and the geometry computed for this frame."""

    effect: CameraEffectType
    duration: float
    target: Vector2 = Vector2()
    cur_time: float = 0.0
    hole: Rect | None = None
    light: tuple[Point, Point, Point] | None = None


@dataclass(frozen=True)
class Overlay:
    """What to draw over the screen this frame.

    The overlay is a black veil of ``size`` blended with constant ``alpha``
    (255 is opaque). ``hole`` is the bounding box of an ellipse left fully
    transparent; ``light`` holds the top-left, top-right and bottom-left
    corners of the light texture drawn onto the veil.
    """

    effect: CameraEffectType
    size: tuple[int, int]
    alpha: int
    hole: Rect | None = None
    light: tuple[Point, Point, Point] | None = None


def _require_positive(duration: float) -> None:
    if not duration > 0:
        raise ValueError(f"effect duration must be positive, got {duration!r}")


def _circle_box(center: Vector2, ratio: float) -> Rect:
    ratio = clamp(ratio, FOCUS_MIN_RATIO, FOCUS_MAX_RATIO)
    half = FOCUS_RADIUS / ratio * 0.5
    return (
        int(center.x - half),
        int(center.y - half),
        int(center.x + half),
        int(center.y + half),
    )


class CameraManager:
    """Runs a queue of camera effects, the front one at a time."""

    def __init__(self, resolution: tuple[int, int], light_size: tuple[int, int]) -> None:
        self.resolution = (int(resolution[0]), int(resolution[1]))
        self.light_size = (int(light_size[0]), int(light_size[1]))
        self.target_look_at = Vector2()
        self.cur_look_at = Vector2()
        self.pre_look_at = Vector2()
        self.render_gap = Vector2()
        self.follow_time = 0.0
        self.speed = 0.0
        self.acc_time = 0.0
        self._effects: deque[CameraEffect] = deque()

    @property
    def effects(self) -> tuple[CameraEffect, ...]:
        return tuple(self._effects)

    def set_target_look_at(self, look: Vector2) -> None:
        """Aim at ``look``; the speed covers the distance in ``follow_time``."""
        self.target_look_at = look
        distance = (look - self.pre_look_at).length()
        if self.follow_time:
            self.speed = distance / self.follow_time
        else:
            self.speed = math.inf if distance else math.nan
        self.acc_time = 0.0

    def render_pos(self, pos: Vector2) -> Vector2:
        return pos - self.render_gap

    def real_pos(self, pos: Vector2) -> Vector2:
        return pos + self.render_gap

    def _push(self, effect: CameraEffectType, duration: float, target: Vector2) -> None:
        _require_positive(duration)
        self._effects.append(CameraEffect(effect, duration, target))

    def focused_on(self, duration: float, target: Vector2) -> None:
        """A transparent circle around ``target`` that closes in over time."""
        self._push(CameraEffectType.FOCUSED_ON, duration, target)

    def focused_out(self, duration: float, target: Vector2) -> None:
        """A transparent circle around ``target`` that opens up over time."""
        self._push(CameraEffectType.FOCUSED_OUT, duration, target)

    def fade_in(self, duration: float) -> None:
        """Fade from black to a faint veil over ``duration``."""
        self._push(CameraEffectType.FADE_IN, duration, Vector2())

    def all_black(self, duration: float) -> None:
        """Keep the screen black for ``duration``."""
        self._push(CameraEffectType.ALL_BLACK, duration, Vector2())

    def shine_light(self, duration: float) -> None:
        """A light cone that swings to follow the mouse."""
        self._push(CameraEffectType.SHINE_LIGHT, duration, SHINE_OFFSET)

    def clear_effects(self) -> None:
        self._effects.clear()

    def update(self, delta_time: float, mouse_pos: Vector2) -> None:
        """Advance the front effect and compute its geometry."""
        if not self._effects:
            return
        effect = self._effects[0]
        effect.cur_time += delta_time
        kind = effect.effect
        if kind is CameraEffectType.FOCUSED_ON:
            effect.hole = _circle_box(effect.target, effect.cur_time / effect.duration)
        elif kind is CameraEffectType.FOCUSED_OUT:
            effect.hole = _circle_box(
                effect.target, 1.0 - effect.cur_time / effect.duration
            )
        elif kind is CameraEffectType.SHINE_LIGHT:
            effect.light = self._light_quad(effect.target, Vector2(*mouse_pos))

    def _light_quad(
        self, offset: Vector2, mouse_pos: Vector2
    ) -> tuple[Point, Point, Point]:
        gaze = mouse_pos - SHINE_PIVOT
        gaze = Vector2(gaze.x, -gaze.y)
        move = clamp(-(HALF_PI + gaze.angle()), -HALF_PI, HALF_PI)
        width, height = self.light_size
        corners = (
            Vector2(-offset.x, -offset.y),
            Vector2(-offset.x + width, -offset.y),
            Vector2(-offset.x, -offset.y + height),
        )
        rotated = [c.rotated_about(SHINE_PIVOT, move) for c in corners]
        top_left, top_right, bottom_left = ((int(p.x), int(p.y)) for p in rotated)
        return top_left, top_right, bottom_left

    def render(self) -> Overlay | None:
        """Describe the front effect's overlay; drop the effect once it has run out."""
        if not self._effects:
            return None
        effect = self._effects[0]
        kind = effect.effect
        if kind in (CameraEffectType.FOCUSED_ON, CameraEffectType.FOCUSED_OUT):
            overlay = Overlay(kind, self.resolution, OPAQUE, hole=effect.hole)
        elif kind is CameraEffectType.FADE_IN:
            ratio = 1.0 - effect.cur_time / effect.duration
            alpha = clamp(int(ratio * 255), FADE_MIN_ALPHA, OPAQUE)
            overlay = Overlay(kind, self.resolution, alpha)
        elif kind is CameraEffectType.ALL_BLACK:
            overlay = Overlay(kind, self.resolution, OPAQUE)
        else:
            overlay = Overlay(kind, self.resolution, SHINE_ALPHA, light=effect.light)

        if effect.duration < effect.cur_time:
            self._effects.popleft()
        return overlay