import copy

import pytest

from pizzeria_engine.animation import Animation, Animator
from pizzeria_engine.vector import Vector2


def make_anim(frame_count=3, duration=0.5):
    return Animation(
        "walk", "tex", Vector2(10, 20), Vector2(64, 32), Vector2(64, 0), duration, frame_count
    )


def test_frames_laid_out_along_step():
    lt, size, step = Vector2(10, 20), Vector2(64, 32), Vector2(64, 0)
    anim = Animation("walk", "tex", lt, size, step, 0.25, 4)
    assert len(anim.frames) == 4
    for i, frame in enumerate(anim.frames):
        assert frame.left_top == lt + step * i
        assert frame.slice == size
        assert frame.duration == 0.25
        assert frame.offset == Vector2()


def test_update_advances_after_duration():
    anim = make_anim()
    anim.update(0.75)
    assert anim.current_frame == 1
    assert anim.acc_time == pytest.approx(0.75 - 0.5)


def test_update_at_exact_duration_does_not_advance():
    anim = make_anim()
    anim.update(0.5)
    assert anim.current_frame == 0


def test_animation_finishes_after_last_frame():
    anim = make_anim(frame_count=3)
    for _ in range(3):
        anim.update(0.6)
    assert anim.finished
    assert anim.current_frame == -1
    assert anim.acc_time == 0.0
    anim.update(5.0)
    assert anim.current_frame == -1


def test_set_frame_restarts():
    anim = make_anim(frame_count=1)
    anim.update(0.6)
    assert anim.finished
    anim.set_frame(0)
    assert not anim.finished
    assert anim.current_frame == 0
    assert anim.acc_time == 0.0


def test_blit_rect_centres_frame():
    anim = Animation("a", "tex", Vector2(7, 9), Vector2(10, 20), Vector2(10, 0), 0.1, 2)
    dest, src = anim.blit_rect(Vector2(5, 10))
    assert dest == (0, 0, 10, 20)
    assert src == (7, 9)


def test_blit_rect_applies_offset():
    anim = Animation("a", "tex", Vector2(), Vector2(10, 20), Vector2(10, 0), 0.1, 2)
    anim.frame(0).offset = Vector2(3, 4)
    dest, _ = anim.blit_rect(Vector2(5, 10))
    assert dest[:2] == (3, 4)


def test_blit_rect_none_when_finished():
    anim = make_anim(frame_count=1)
    anim.update(1.0)
    assert anim.blit_rect(Vector2()) is None


def test_create_and_find_animation():
    animator = Animator(owner="owner")
    anim = animator.create_animation("idle", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.1, 2)
    assert animator.find_animation("idle") is anim
    assert anim.animator is animator
    assert anim.name == "idle"


def test_duplicate_animation_rejected():
    animator = Animator(owner=None)
    animator.create_animation("idle", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.1, 2)
    with pytest.raises(ValueError):
        animator.create_animation("idle", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.1, 2)


def test_find_and_play_missing():
    animator = Animator(owner=None)
    assert animator.find_animation("nope") is None
    animator.play("nope", True)
    assert animator.current is None
    animator.final_update(1.0)
    assert animator.current is None


def test_repeating_animation_loops():
    animator = Animator(owner=None)
    anim = animator.create_animation("idle", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.5, 2)
    animator.play("idle", True)
    animator.final_update(0.6)
    animator.final_update(0.6)
    assert animator.current is anim
    assert anim.current_frame == 0
    assert not anim.finished


def test_non_repeating_animation_is_dropped():
    animator = Animator(owner=None)
    anim = animator.create_animation("find", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.5, 1)
    animator.play("find", False)
    animator.final_update(0.6)
    assert animator.current is None
    assert anim.finished


def test_copy_shares_animations_in_new_mapping():
    animator = Animator(owner="a")
    anim = animator.create_animation("idle", "tex", Vector2(), Vector2(8, 8), Vector2(8, 0), 0.5, 1)
    animator.play("idle", True)
    twin = copy.copy(animator)
    assert twin.find_animation("idle") is anim
    assert twin.current is anim
    assert twin.animations is not animator.animations