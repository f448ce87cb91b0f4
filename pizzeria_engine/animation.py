"""Sprite-sheet animations and the animator that plays them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pizzeria_engine.vector import Vector2


@dataclass
class AnimFrame:
    """One frame: its rectangle in the texture, draw offset and duration."""

    left_top: Vector2
    slice: Vector2
    offset: Vector2 = field(default_factory=Vector2)
    duration: float = 0.0


class Animation:
    """A sequence of equally sized frames cut from one texture."""

    def __init__(
        self,
        name: str,
        texture: Any,
        left_top: Vector2,
        slice_size: Vector2,
        step: Vector2,
        duration: float,
        frame_count: int,
    ) -> None:
        self.name = name
        self.texture = texture
        self.animator: Animator | None = None
        self.frames = [
            AnimFrame(left_top + step * i, slice_size, duration=duration)
            for i in range(frame_count)
        ]
        self.current_frame = 0
        self.acc_time = 0.0
        self.finished = False

    def update(self, delta_time: float) -> None:
        """Advance time; past the last frame the animation finishes at frame -1."""
        if self.finished:
            return
        self.acc_time += delta_time
        if self.acc_time > self.frames[self.current_frame].duration:
            self.current_frame += 1
            if self.current_frame >= len(self.frames):
                self.current_frame = -1
                self.finished = True
                self.acc_time = 0.0
                return
            self.acc_time -= self.frames[self.current_frame].duration

    def set_frame(self, index: int) -> None:
        """Restart playback from ``index``."""
        self.finished = False
        self.current_frame = index
        self.acc_time = 0.0

    def frame(self, index: int) -> AnimFrame:
        return self.frames[index]

    def blit_rect(
        self, position: Vector2
    ) -> tuple[tuple[int, int, int, int], tuple[int, int]] | None:
        """Destination ``(x, y, w, h)`` and source ``(x, y)`` of the current frame.

        The frame is centred on ``position`` plus its offset. ``None`` once finished.
        """
        if self.finished:
            return None
        frame = self.frames[self.current_frame]
        pos = position + frame.offset
        dest = (
            int(pos.x - frame.slice.x / 2),
            int(pos.y - frame.slice.y / 2),
            int(frame.slice.x),
            int(frame.slice.y),
        )
        return dest, (int(frame.left_top.x), int(frame.left_top.y))


class Animator:
    """Holds named animations for an owner and plays one at a time."""

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self.animations: dict[str, Animation] = {}
        self.current: Animation | None = None
        self.repeat = False

    def __copy__(self) -> "Animator":
        twin = Animator(self.owner)
        twin.animations = dict(self.animations)
        twin.current = self.current
        twin.repeat = self.repeat
        return twin

    def create_animation(
        self,
        name: str,
        texture: Any,
        left_top: Vector2,
        slice_size: Vector2,
        step: Vector2,
        duration: float,
        frame_count: int,
    ) -> Animation:
        """Create and register an animation; names must be unique."""
        if name in self.animations:
            raise ValueError(f"animation {name!r} already exists")
        animation = Animation(
            name, texture, left_top, slice_size, step, duration, frame_count
        )
        animation.animator = self
        self.animations[name] = animation
        return animation

    def find_animation(self, name: str) -> Animation | None:
        return self.animations.get(name)

    def play(self, name: str, repeat: bool) -> None:
        """Make ``name`` the current animation (``None`` if unknown)."""
        self.current = self.find_animation(name)
        self.repeat = repeat

    def final_update(self, delta_time: float) -> None:
        """Advance the current animation, looping or dropping it when it ends."""
        if self.current is None:
            return
        self.current.update(delta_time)
        if self.current.finished:
            if self.repeat:
                self.current.set_frame(0)
            else:
                self.current = None