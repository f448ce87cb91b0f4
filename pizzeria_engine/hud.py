"""Simple on-screen widgets: a progress bar and a blinking arrow."""

from __future__ import annotations

from typing import Any

from pizzeria_engine.entity import GameObject
from pizzeria_engine.vector import Vector2, clamp

BAR_MAX = 100.0
BLINK_PERIOD = 1.0
BLINK_HALF = 0.5

Rect = tuple[int, int, int, int]


class BarUI(GameObject):
    """A horizontal gauge filled from 0 to 100 percent."""

    def __init__(self) -> None:
        super().__init__()
        self.bar_len = 0.0
        self.offset = Vector2()
        self.brush: Any = None
        self.pen: Any = None

    def set_colors(self, pen: Any, brush: Any) -> None:
        self.pen = pen
        self.brush = brush

    def update(self, game: Any) -> None:
        """Keep the fill level within 0..100."""
        self.bar_len = clamp(self.bar_len, 0.0, BAR_MAX)

    def fill_rects(self) -> tuple[Rect, Rect, Rect]:
        """The frame, the empty inner track and the filled part, as (l, t, r, b)."""
        pos, scale, off = self.pos, self.scale, self.offset
        outer = (
            int(pos.x), int(pos.y), int(pos.x + scale.x), int(pos.y + scale.y)
        )
        left = int(pos.x + off.x / 2)
        top = int(pos.y + off.y / 2)
        bottom = int(pos.y + scale.y - off.y / 2)
        track = (left, top, int(pos.x + scale.x - off.x / 2), bottom)
        dist = (scale.x - off.x) * self.bar_len / BAR_MAX
        fill = (left, top, int(pos.x + dist + off.x / 2), bottom)
        return outer, track, fill


class Arrow(GameObject):
    """An arrow that alternates between two sprite halves every half second."""

    def __init__(self) -> None:
        super().__init__()
        self.add_time = 0.0

    def update(self, game: Any) -> None:
        self.add_time += game.delta_time
        if self.add_time >= BLINK_PERIOD:
            self.add_time = 0.0

    def source_offset(self, width: int) -> int:
        """Source x of the half of a ``width``-wide texture to draw now."""
        return 0 if self.add_time >= BLINK_HALF else width // 2