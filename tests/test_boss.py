import random
from dataclasses import dataclass, field

import pytest

from pizzeria_engine.boss import Boss, BossState
from pizzeria_engine.boss_manager import BossManager
from pizzeria_engine.entity import GameObject
from pizzeria_engine.keys import Key, KeyManager
from pizzeria_engine.vector import Vector2


class Dummy(GameObject):
    def __init__(self, name, resting=False):
        super().__init__(name)
        self.is_resting = resting

    def update(self, game):
        pass


@dataclass
class FakeStage:
    player: Dummy
    trust: float = 0.0

    def add_trust(self, amount):
        self.trust += amount


@dataclass
class FakeSound:
    played: list = field(default_factory=list)
    pauses: int = 0

    def play(self, name, channel, volume):
        self.played.append((name, channel, volume))

    def pause_boss(self):
        self.pauses += 1


@dataclass
class FakeEvents:
    deleted: list = field(default_factory=list)

    def delete_object(self, obj):
        self.deleted.append(obj)


@dataclass
class FakeGame:
    stage: FakeStage
    delta_time: float = 0.0
    keys: KeyManager = field(default_factory=lambda: KeyManager(lambda key: False))
    sound: FakeSound = field(default_factory=FakeSound)
    events: FakeEvents = field(default_factory=FakeEvents)


class FixedRng(random.Random):
    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def randint(self, a, b):
        return self.value


def far_player(resting=False):
    player = Dummy("Object_Player", resting)
    player.pos = Vector2(5000.0, 5000.0)
    return player


@pytest.fixture
def manager():
    return BossManager(random.Random(1))


def test_initial_setup(manager):
    boss = Boss(manager, random.Random(2))
    assert boss.state_is(BossState.IDLE)
    assert boss.collider.offset == Vector2(0.0, 50.0)
    assert boss.collider.scale == Vector2(70.0, 100.0)
    assert len(boss.animator.find_animation("BOSS_FIND").frames) == 23
    assert len(boss.animator.animations) == 9


def test_change_state_records_previous(manager):
    boss = Boss(manager)
    boss.walk_sound_playing = True
    boss.change_state(BossState.PATROL)
    assert boss.previous_state is BossState.IDLE
    assert boss.state_is(BossState.PATROL)
    assert boss.walk_sound_playing is False


def test_idle_switches_to_patrol(manager):
    boss = Boss(manager, FixedRng(3))
    boss.idle_update(boss.idle_time)
    assert boss.state is BossState.PATROL
    assert boss.idle_time == 3.0


def test_idle_direction_changes_after_period(manager):
    boss = Boss(manager, FixedRng(2))
    boss.change_idle_direction(1.0)
    assert boss.look_direction == Vector2()
    boss.change_idle_direction(0.3)
    assert boss.look_direction == Vector2(0.0, 1.0)


def test_patrol_moves_toward_destination(manager):
    boss = Boss(manager)
    boss.change_state(BossState.PATROL)
    manager.destination = Vector2(1000.0, 0.0)
    boss.patrol_update(0.1)
    assert boss.pos.x == pytest.approx(boss.speed * 0.1)
    assert boss.pos.y == 0
    assert boss.look_direction == Vector2(1.0, 0.0)


def test_patrol_arrival_goes_idle_then_done(manager):
    boss = Boss(manager)
    manager.path_index = 0
    manager.dest_index = 0
    manager.destination = Vector2(10.0, 0.0)
    boss.change_state(BossState.PATROL)
    boss.patrol_update(0.1)
    assert boss.state is BossState.IDLE
    assert manager.dest_index == 1

    manager.dest_index = len(manager.paths[0]) - 1
    manager.destination = boss.pos
    boss.change_state(BossState.PATROL)
    boss.patrol_update(0.1)
    assert boss.state is BossState.DONE


def test_done_removes_boss(manager):
    boss = Boss(manager)
    manager.appeared = True
    boss.change_state(BossState.DONE)
    game = FakeGame(FakeStage(far_player()))
    boss.update(game)
    assert manager.appeared is False
    assert game.events.deleted == [boss]


def test_detects_resting_player(manager):
    boss = Boss(manager)
    player = Dummy("Object_Player", resting=True)
    player.pos = Vector2(100.0, 0.0)
    boss.detect_player(FakeStage(player))
    assert boss.detected is True
    assert boss.state is BossState.FIND


def test_working_player_only_detected(manager):
    boss = Boss(manager)
    player = Dummy("Object_Player", resting=False)
    player.pos = Vector2(100.0, 0.0)
    boss.detect_player(FakeStage(player))
    assert boss.detected is True
    assert boss.state is BossState.IDLE
    boss.detect_player(FakeStage(far_player(resting=True)))
    assert boss.detected is False
    assert boss.state is BossState.IDLE


def test_caught_frame_costs_trust(manager):
    boss = Boss(manager)
    stage = FakeStage(far_player())
    boss.animator.find_animation("BOSS_FIND").set_frame(18)
    boss.detect_player(stage)
    assert stage.trust == -100.0


def test_sound_control(manager):
    boss = Boss(manager)
    sound = FakeSound()
    boss.change_state(BossState.PATROL)
    boss.sound_control(sound)
    boss.sound_control(sound)
    assert sound.played == [("SE_Walk", "boss", 0.1)]
    boss.change_state(BossState.IDLE)
    boss.sound_control(sound)
    assert sound.pauses == 1
    assert boss.walk_sound_playing is False


def test_ctrl_tap_toggles_view(manager):
    boss = Boss(manager)
    keys = KeyManager(lambda key: key is Key.CTRL)
    keys.update(True, (0, 0))
    game = FakeGame(FakeStage(far_player()), keys=keys)
    assert boss.view_bounds is not None
    boss.update(game)
    assert boss.show_view is False
    assert boss.view_bounds is None


def test_idle_animation_follows_look(manager):
    boss = Boss(manager)
    boss.look_direction = Vector2(1.0, 0.0)
    boss.update(FakeGame(FakeStage(far_player())))
    assert boss.animator.current.name == "BOSS_IDLE_RIGHT"


def test_collision_pushes_player(manager):
    boss = Boss(manager)
    boss.collider.final_update()
    player = Dummy("Object_Player")
    player.create_collider().scale = Vector2(50.0, 50.0)
    player.pos = Vector2(10.0, 60.0)
    player.collider.final_update()
    boss.on_collision(player.collider, None)
    gap = abs(player.collider.final_pos.x - boss.collider.final_pos.x)
    assert gap == pytest.approx((boss.collider.scale.x + player.collider.scale.x) / 2)


def test_collision_keeps_player_on_floor(manager):
    boss = Boss(manager)
    boss.pos = Vector2(0.0, 950.0)
    boss.collider.final_update()
    player = Dummy("Object_Player")
    player.create_collider().scale = Vector2(50.0, 50.0)
    player.pos = Vector2(0.0, 990.0)
    player.collider.final_update()
    boss.on_collision(player.collider, None)
    assert player.pos.y == 950.0


def test_collision_ignores_other_objects(manager):
    boss = Boss(manager)
    boss.collider.final_update()
    other = Dummy("Crate")
    other.create_collider().scale = Vector2(50.0, 50.0)
    other.pos = Vector2(10.0, 60.0)
    other.collider.final_update()
    boss.on_collision(other.collider, None)
    assert other.pos == Vector2(10.0, 60.0)


def test_random_ranges(manager):
    boss = Boss(manager, random.Random(5))
    assert all(0 <= boss.random_idle_time() <= 3 for _ in range(50))
    assert all(0 <= boss.random_direction_value() <= 65599 for _ in range(50))