"""Group-based AABB collision detection with enter/stay/exit notifications."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from itertools import combinations_with_replacement
from typing import Any

from pizzeria_engine.collider import BoxCollider
from pizzeria_engine.entity import GameObject


def is_collision(left: BoxCollider, right: BoxCollider) -> bool:
    """True when the two boxes overlap or touch."""
    left_min = left.final_pos - left.scale * 0.5
    left_max = left.final_pos + left.scale * 0.5
    right_min = right.final_pos - right.scale * 0.5
    right_max = right.final_pos + right.scale * 0.5
    return (
        left_min.x <= right_max.x
        and left_max.x >= right_min.x
        and left_min.y <= right_max.y
        and left_max.y >= right_min.y
    )


def push_box(left: BoxCollider, right: BoxCollider) -> None:
    """Push ``right``'s owner out of ``left`` along the axis of least overlap."""
    rad_x = left.scale.x * 0.5 + right.scale.x * 0.5
    rad_y = left.scale.y * 0.5 + right.scale.y * 0.5

    left_final = left.final_pos
    right_final = right.final_pos
    push_x = rad_x - abs(left_final.x - right_final.x)
    push_y = rad_y - abs(left_final.y - right_final.y)

    owner = right.owner
    pos = owner.pos
    if push_x < push_y:
        if left_final.x > right_final.x:
            push_x = -push_x
        owner.pos = type(pos)(pos.x + push_x, pos.y)
    else:
        if left_final.y > right_final.y:
            push_y = -push_y
        owner.pos = type(pos)(pos.x, pos.y + push_y)
    right.final_update()


class CollisionManager:
    """Checks registered pairs of object groups and dispatches collision events."""

    def __init__(self) -> None:
        self._pairs: set[frozenset[Hashable]] = set()
        self._touching: dict[tuple[int, int], bool] = {}

    def check_group_pair(self, left: Hashable, right: Hashable) -> None:
        """Register two groups (possibly the same one) for collision checks."""
        self._pairs.add(frozenset((left, right)))

    def update(
        self, groups: Mapping[Hashable, Sequence[GameObject]] | None, context: Any
    ) -> None:
        """Test every registered group pair found in ``groups``."""
        if groups is None:
            return
        for left, right in combinations_with_replacement(list(groups), 2):
            if frozenset((left, right)) in self._pairs:
                self._update_groups(groups[left], groups[right], context)

    def _update_groups(
        self,
        lefts: Sequence[GameObject],
        rights: Sequence[GameObject],
        context: Any,
    ) -> None:
        for left_obj in lefts:
            for right_obj in rights:
                left = left_obj.collider
                right = right_obj.collider
                if left is None or right is None or left_obj is right_obj:
                    continue

                key = (left.id, right.id)
                was_touching = self._touching.setdefault(key, False)
                dead = left_obj.is_dead or right_obj.is_dead

                if is_collision(left, right):
                    if was_touching and dead:
                        left.on_collision_exit(right, context)
                        right.on_collision_exit(left, context)
                        self._touching[key] = False
                    elif was_touching:
                        left.on_collision(right, context)
                        right.on_collision(left, context)
                    elif not dead:
                        left.on_collision_enter(right, context)
                        right.on_collision_enter(left, context)
                        self._touching[key] = True
                elif was_touching:
                    left.on_collision_exit(right, context)
                    right.on_collision_exit(left, context)
                    self._touching[key] = False