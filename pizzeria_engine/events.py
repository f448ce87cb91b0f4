"""Deferred scene events processed once per frame."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Protocol

from pizzeria_engine.entity import GameObject


class EventType(Enum):
    CREATE_OBJECT = auto()
    DELETE_OBJECT = auto()
    CHANGE_SCENE = auto()


@dataclass(frozen=True)
class Event:
    """A queued request: the object or scene it concerns and an optional group."""

    type: EventType
    target: Any
    group: Any = None


class World(Protocol):
    def add_object(self, obj: GameObject, group: Any) -> None: ...

    def change_scene(self, scene: Any) -> None: ...


class EventManager:
    """Queues object creation, deletion and scene changes until ``update``."""

    def __init__(self) -> None:
        self._events: deque[Event] = deque()
        self._dead: list[GameObject] = []

    @property
    def pending(self) -> tuple[Event, ...]:
        return tuple(self._events)

    @property
    def dead_objects(self) -> tuple[GameObject, ...]:
        """Objects marked dead last frame, released at the next update."""
        return tuple(self._dead)

    def create_object(self, obj: GameObject, group: Any) -> None:
        self._events.append(Event(EventType.CREATE_OBJECT, obj, group))

    def delete_object(self, obj: GameObject) -> None:
        if obj is None:
            raise ValueError("cannot delete a missing object")
        self._events.append(Event(EventType.DELETE_OBJECT, obj))

    def change_scene(self, scene: Any) -> None:
        self._events.append(Event(EventType.CHANGE_SCENE, scene))

    def update(self, world: World) -> None:
        """Release last frame's dead objects, then run the queued events.

        A scene change discards every event still queued behind it.
        """
        self._dead.clear()
        while self._events:
            event = self._events.popleft()
            self._execute(event, world)
            if event.type is EventType.CHANGE_SCENE:
                self._events.clear()
                self._dead.clear()
                return

    def _execute(self, event: Event, world: World) -> None:
        if event.type is EventType.CREATE_OBJECT:
            world.add_object(event.target, event.group)
        elif event.type is EventType.DELETE_OBJECT:
            obj = event.target
            if not obj.is_dead:
                obj.set_dead()
                self._dead.append(obj)
        elif event.type is EventType.CHANGE_SCENE:
            world.change_scene(event.target)