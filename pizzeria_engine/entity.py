"""Base class for every object placed in a scene."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any

from pizzeria_engine.animation import Animator
from pizzeria_engine.collider import BoxCollider
from pizzeria_engine.vector import Vector2


class GameObject(ABC):
    """A positioned scene object with optional animator and collider."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.pos = Vector2()
        self.scale = Vector2()
        self.look_dir = Vector2()
        self.texture: Any = None
        self.animator: Animator | None = None
        self.collider: BoxCollider | None = None
        self.pizza: GameObject | None = None
        self.topping: GameObject | None = None
        self.started = False
        self.contacts: list[BoxCollider] = []
        self._alive = True

    @property
    def is_dead(self) -> bool:
        return not self._alive

    def set_dead(self) -> None:
        self._alive = False

    def clone(self) -> "GameObject":
        """A live copy sharing the texture, with fresh position and components."""
        twin = copy.copy(self)
        twin.name = ""
        twin.pos = Vector2()
        twin.scale = Vector2()
        twin.look_dir = Vector2()
        twin.pizza = None
        twin.topping = None
        twin.started = False
        twin.contacts = []
        twin._alive = True
        twin.collider = self.collider.copy(twin) if self.collider else None
        if self.animator is not None:
            twin.animator = copy.copy(self.animator)
            twin.animator.owner = twin
        return twin

    def create_animator(self) -> Animator:
        self.animator = Animator(self)
        return self.animator

    def create_collider(self) -> BoxCollider:
        self.collider = BoxCollider(self)
        return self.collider

    def delete_food(self, events: Any) -> None:
        """Queue deletion of the held pizza and topping and drop them."""
        if self.pizza is not None:
            events.delete_object(self.pizza)
            self.pizza = None
        if self.topping is not None:
            events.delete_object(self.topping)
            self.topping = None

    def start(self) -> None:
        """Mark the object as started when its scene starts."""
        self.started = True

    @abstractmethod
    def update(self, game: Any) -> None:
        """Advance the object's own logic by one frame."""

    def final_update(self, delta_time: float) -> None:
        """Sync the collider to the object and advance its animation."""
        if self.collider is not None:
            self.collider.final_update()
        if self.animator is not None:
            self.animator.final_update(delta_time)

    def on_collision(self, other: BoxCollider, context: Any) -> None:
        """Called every frame while touching ``other``."""

    def on_collision_enter(self, other: BoxCollider, context: Any) -> None:
        """Record ``other`` as a current contact when touching begins."""
        if not any(contact is other for contact in self.contacts):
            self.contacts.append(other)

    def on_collision_exit(self, other: BoxCollider, context: Any) -> None:
        """Forget ``other`` as a contact when touching ends."""
        self.contacts = [contact for contact in self.contacts if contact is not other]