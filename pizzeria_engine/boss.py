"""The boss who patrols the shop and catches the player resting."""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Any, Protocol

from pizzeria_engine.boss_manager import BossManager
from pizzeria_engine.collider import BoxCollider
from pizzeria_engine.collision import push_box
from pizzeria_engine.entity import GameObject
from pizzeria_engine.keys import Key, KeyManager, KeyState
from pizzeria_engine.vector import Vector2

BOSS_NAME = "Object_Boss"
PLAYER_NAME = "Object_Player"

SPEED = 500.0
INITIAL_IDLE_TIME = 1.2
ARRIVAL_DISTANCE = 50.0
DETECTION_DISTANCE = 400.0
IDLE_TURN_PERIOD = 1.3
TRUST_PENALTY = -100.0
CAUGHT_FRAME = 18
FLOOR_LIMIT_Y = 950.0

WALK_SOUND = "SE_Walk"
WALK_VOLUME = 0.1
BOSS_CHANNEL = "boss"

_TILE = 225.0
_FRAME_DURATION = 0.2
_WALK_FRAMES = 4
_FIND_FRAMES = 23

_DIRECTIONS = (
    Vector2(1.0, 0.0),
    Vector2(-1.0, 0.0),
    Vector2(0.0, 1.0),
    Vector2(0.0, -1.0),
)


class BossState(Enum):
    IDLE = auto()
    PATROL = auto()
    TRACE = auto()
    FIND = auto()
    DONE = auto()


class Player(Protocol):
    pos: Vector2

    @property
    def is_resting(self) -> bool: ...


class Stage(Protocol):
    @property
    def player(self) -> Player: ...

    def add_trust(self, amount: float) -> None: ...


class Sound(Protocol):
    def play(self, name: str, channel: str, volume: float) -> None: ...

    def pause_boss(self) -> None: ...


class Events(Protocol):
    def delete_object(self, obj: GameObject) -> None: ...


class Game(Protocol):
    delta_time: float
    keys: KeyManager
    sound: Sound
    stage: Stage
    events: Events


class Boss(GameObject):
    """Walks a patrol path chosen by the manager, pausing to look around."""

    def __init__(
        self, manager: BossManager, rng: random.Random | None = None
    ) -> None:
        super().__init__(BOSS_NAME)
        self.manager = manager
        self._rng = rng if rng is not None else random.Random()
        self.speed = SPEED
        self.move_direction = Vector2()
        self.look_direction = Vector2()
        self.state = BossState.IDLE
        self.previous_state = BossState.IDLE
        self.idle_time = INITIAL_IDLE_TIME
        self.attached_distance = ARRIVAL_DISTANCE
        self.detected_distance = DETECTION_DISTANCE
        self.detected = False
        self.show_view = True
        self.walk_sound_playing = False
        self._idle_timer = 0.0
        self._turn_timer = 0.0

        self._create_animations()
        collider = self.create_collider()
        collider.offset = Vector2(0.0, 50.0)
        collider.scale = Vector2(70.0, 100.0)

    def _create_animations(self) -> None:
        animator = self.create_animator()
        slice_size = Vector2(_TILE, _TILE)
        step = Vector2(_TILE, 0.0)
        rows = (
            "BOSS_MOVE_DOWN", "BOSS_MOVE_LEFT", "BOSS_MOVE_RIGHT", "BOSS_MOVE_UP",
            "BOSS_IDLE_DOWN", "BOSS_IDLE_LEFT", "BOSS_IDLE_RIGHT", "BOSS_IDLE_UP",
        )
        for row, name in enumerate(rows):
            animator.create_animation(
                name, "BossWalkTex", Vector2(0.0, _TILE * row),
                slice_size, step, _FRAME_DURATION, _WALK_FRAMES,
            )
        animator.create_animation(
            "BOSS_FIND", "BossFindTex", Vector2(), slice_size, step,
            _FRAME_DURATION, _FIND_FRAMES,
        )

    @property
    def view_bounds(self) -> tuple[int, int, int, int] | None:
        """Bounding box of the detection circle when it is shown."""
        if not self.show_view:
            return None
        r = self.detected_distance
        return (
            int(self.pos.x - r), int(self.pos.y - r),
            int(self.pos.x + r), int(self.pos.y + r),
        )

    def change_state(self, state: BossState) -> None:
        self.previous_state = self.state
        self.state = state
        self.walk_sound_playing = False

    def state_is(self, state: BossState) -> bool:
        return self.state is state

    def update(self, game: Game) -> None:
        """Run one frame of sound, detection and state logic."""
        self.sound_control(game.sound)
        self.detect_player(game.stage)

        if game.keys.is_key_state(Key.CTRL, KeyState.TAP):
            self.show_view = not self.show_view

        if self.state is BossState.IDLE:
            self.idle_update(game.delta_time)
        elif self.state is BossState.PATROL:
            self.patrol_update(game.delta_time)
        elif self.state is BossState.DONE:
            self.manager.disappear_boss()
            if not self.is_dead:
                game.events.delete_object(self)

        self._update_animation()

    def _facing(self) -> str:
        look = self.look_direction
        if look.x == 1:
            return "RIGHT"
        if look.x == -1:
            return "LEFT"
        if look.y == -1:
            return "UP"
        return "DOWN"

    def _update_animation(self) -> None:
        animator = self.animator
        if animator is None:
            return
        if self.state is BossState.IDLE:
            animator.play(f"BOSS_IDLE_{self._facing()}", True)
        elif self.state in (BossState.PATROL, BossState.TRACE):
            animator.play(f"BOSS_MOVE_{self._facing()}", True)
        elif self.state is BossState.FIND:
            animator.play("BOSS_FIND", True)

    def detect_player(self, stage: Stage) -> None:
        """Catch a resting player in range; cost trust at the caught frame."""
        player = stage.player
        distance = (player.pos - self.pos).length()
        if distance <= self.detected_distance:
            self.detected = True
            if player.is_resting:
                self.change_state(BossState.FIND)
        else:
            self.detected = False

        find = self.animator.find_animation("BOSS_FIND") if self.animator else None
        if find is not None and find.current_frame == CAUGHT_FRAME:
            stage.add_trust(TRUST_PENALTY)

    def idle_update(self, delta_time: float) -> None:
        """Look around, then start patrolling once the idle time is up."""
        self._idle_timer += delta_time
        self.change_idle_direction(delta_time)
        if self._idle_timer >= self.idle_time:
            self._idle_timer = 0.0
            self.idle_time = float(self.random_idle_time())
            self.change_state(BossState.PATROL)

    def patrol_update(self, delta_time: float) -> None:
        """Walk toward the destination; on arrival pause or finish the route."""
        to_dest = self.manager.destination - self.pos
        if to_dest.length() <= self.attached_distance:
            if self.manager.find_next_destination():
                self.change_state(BossState.IDLE)
            else:
                self.change_state(BossState.DONE)
            return
        self.look_direction = to_dest.boss_direction()
        self.move_direction = to_dest.normalized()
        self.pos = self.pos + self.move_direction * (self.speed * delta_time)

    def change_idle_direction(self, delta_time: float) -> None:
        """Turn to a random direction every so often."""
        self._turn_timer += delta_time
        if self._turn_timer >= IDLE_TURN_PERIOD:
            self._turn_timer = 0.0
            self.look_direction = _DIRECTIONS[self.random_direction_value() % 4]

    def sound_control(self, sound: Sound) -> None:
        """Play footsteps once per patrol; silence them in any other state."""
        if self.state is BossState.PATROL:
            if not self.walk_sound_playing:
                sound.play(WALK_SOUND, BOSS_CHANNEL, WALK_VOLUME)
                self.walk_sound_playing = True
        else:
            sound.pause_boss()
            self.walk_sound_playing = False

    def on_collision(self, other: BoxCollider, context: Any) -> None:
        """Push the player away and keep them inside the floor."""
        player = other.owner
        if player.name != PLAYER_NAME or self.collider is None:
            return
        push_box(self.collider, other)
        if player.pos.y >= FLOOR_LIMIT_Y:
            player.pos = Vector2(player.pos.x, FLOOR_LIMIT_Y)

    def random_idle_time(self) -> int:
        return self._rng.randint(0, 3)

    def random_direction_value(self) -> int:
        return self._rng.randint(0, 65599)