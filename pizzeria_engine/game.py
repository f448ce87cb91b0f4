"""The game loop that ties the managers and the current world together."""

from __future__ import annotations

import random
from collections.abc import Hashable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Optional, Protocol

from pizzeria_engine.boss_manager import BossManager
from pizzeria_engine.camera import CameraManager, Overlay
from pizzeria_engine.collision import CollisionManager
from pizzeria_engine.entity import GameObject
from pizzeria_engine.events import EventManager
from pizzeria_engine.keys import Key, KeyManager
from pizzeria_engine.vector import Vector2

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class FontSpec:
    face: str
    height: int
    width: int = 0


_BRUSHES: dict[str, Optional[RGB]] = {
    "HOLLOW": None,
    "BLACK": (0, 0, 0),
    "RED": (255, 0, 0),
    "GREEN": (0, 255, 0),
    "BLUE": (0, 0, 255),
    "SKKBLUE": (203, 219, 252),
    "BROWN": (143, 86, 59),
    "MAGENTA": (255, 0, 255),
}

_PENS: dict[str, Optional[RGB]] = {
    "HOLLOW": None,
    "WHITE": (255, 255, 255),
    "RED": (255, 0, 0),
    "GREEN": (0, 255, 0),
    "BLUE": (0, 0, 255),
    "SKKBLUE": (203, 219, 252),
    "BROWN": (143, 86, 59),
    "MAGENTA": (255, 0, 255),
}

_FONTS: dict[str, FontSpec] = {
    "DOSPILGI": FontSpec("DOSPilgi", 25),
    "GALMURI7": FontSpec("Galmuri7 Regular", 70, 80),
    "GALMURI9": FontSpec("Galmuri9 Regular", 60),
    "GALMURI9_SMALL": FontSpec("Galmuri9 Regular", 30),
}


@dataclass(frozen=True)
class Palette:
    """Named brush and pen colours (``None`` is hollow) and fonts."""

    brushes: Mapping[str, Optional[RGB]] = field(
        default_factory=lambda: MappingProxyType(dict(_BRUSHES))
    )
    pens: Mapping[str, Optional[RGB]] = field(
        default_factory=lambda: MappingProxyType(dict(_PENS))
    )
    fonts: Mapping[str, FontSpec] = field(
        default_factory=lambda: MappingProxyType(dict(_FONTS))
    )


class World(Protocol):
    @property
    def groups(self) -> Mapping[Hashable, Sequence[GameObject]] | None: ...

    def update(self, game: "GameProcess") -> None: ...

    def final_update(self, delta_time: float) -> None: ...

    def render(self) -> Any: ...

    def add_object(self, obj: GameObject, group: Any) -> None: ...

    def change_scene(self, scene: Any) -> None: ...


class GameProcess:
    """Owns the managers and runs one frame of the game per ``progress`` call.

    ``sound`` may be set to an object with ``play(name, channel, volume)``
    and ``pause_boss()``; it is ``None`` until then.
    """

    def __init__(
        self,
        resolution: tuple[int, int],
        world: World,
        poll: Callable[[Key], bool],
        rng: random.Random | None = None,
    ) -> None:
        self.resolution = (int(resolution[0]), int(resolution[1]))
        self.world = world
        self.palette = Palette()
        self.events = EventManager()
        self.collision = CollisionManager()
        self.boss_manager = BossManager(rng)
        self.keys = KeyManager(poll)
        self.camera = CameraManager(self.resolution, (0, 0))
        self.sound: Any = None
        self.delta_time = 0.0

    @property
    def stage(self) -> World:
        return self.world

    def progress(
        self, delta_time: float, focused: bool, mouse_pos: Vector2
    ) -> tuple[Any, Overlay | None]:
        """Run one frame and return the rendered world and the camera overlay."""
        self.delta_time = delta_time
        self.keys.update(focused, mouse_pos)
        self.camera.update(delta_time, self.keys.mouse_pos)

        self.world.update(self)
        self.world.final_update(delta_time)

        self.collision.update(self.world.groups, self)

        image = self.world.render()
        overlay = self.camera.render()

        self.events.update(self.world)
        return image, overlay