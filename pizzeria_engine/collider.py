"""Axis-aligned box colliders attached to game objects."""

from __future__ import annotations

import itertools
from typing import Any

from pizzeria_engine.vector import Vector2


class BoxCollider:
    """A box that follows its owner's position and forwards collision events."""

    _ids = itertools.count()

    def __init__(self, owner: Any) -> None:
        self.owner = owner
        self.offset = Vector2()
        self.final_pos = Vector2()
        self.scale = Vector2()
        self.collision_count = 0
        self.active = False
        self.id = next(BoxCollider._ids)

    def copy(self, owner: Any) -> "BoxCollider":
        """A new collider for ``owner`` with the same geometry and a fresh id."""
        twin = BoxCollider(owner)
        twin.offset = self.offset
        twin.final_pos = self.final_pos
        twin.scale = self.scale
        twin.active = self.active
        return twin

    def final_update(self) -> None:
        """Move the box to the owner's position plus the offset."""
        self.final_pos = self.owner.pos + self.offset
        if self.collision_count < 0:
            raise RuntimeError("collision count went negative")

    def bounds(self) -> tuple[int, int, int, int]:
        """``(left, top, right, bottom)`` of the box in pixels."""
        half = self.scale / 2
        return (
            int(self.final_pos.x - half.x),
            int(self.final_pos.y - half.y),
            int(self.final_pos.x + half.x),
            int(self.final_pos.y + half.y),
        )

    def on_collision(self, other: "BoxCollider", context: Any) -> None:
        self.owner.on_collision(other, context)

    def on_collision_enter(self, other: "BoxCollider", context: Any) -> None:
        self.collision_count += 1
        self.owner.on_collision_enter(other, context)

    def on_collision_exit(self, other: "BoxCollider", context: Any) -> None:
        self.collision_count -= 1
        self.owner.on_collision_exit(other, context)