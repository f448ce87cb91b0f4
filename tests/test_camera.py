import math

import pytest

from pizzeria_engine.camera import (
    FADE_MIN_ALPHA,
    OPAQUE,
    SHINE_ALPHA,
    SHINE_OFFSET,
    CameraEffectType,
    CameraManager,
)
from pizzeria_engine.vector import Vector2


def make_camera():
    return CameraManager((1920, 1080), (600, 800))


def width(box):
    return box[2] - box[0]


def test_no_effects_renders_nothing():
    cam = make_camera()
    cam.update(0.1, Vector2())
    assert cam.render() is None


@pytest.mark.parametrize("method", ["fade_in", "all_black", "shine_light"])
@pytest.mark.parametrize("duration", [0.0, -1.0])
def test_non_positive_duration_rejected(method, duration):
    cam = make_camera()
    with pytest.raises(ValueError):
        getattr(cam, method)(duration)
    assert cam.effects == ()


def test_focus_rejects_zero_duration():
    cam = make_camera()
    with pytest.raises(ValueError):
        cam.focused_on(0.0, Vector2(1, 1))
    with pytest.raises(ValueError):
        cam.focused_out(0.0, Vector2(1, 1))


def test_fade_in_alpha_starts_opaque_and_falls_to_floor():
    cam = make_camera()
    cam.fade_in(2.0)
    cam.update(0.0, Vector2())
    first = cam.render()
    assert first.alpha == OPAQUE
    alphas = [first.alpha]
    for _ in range(4):
        cam.update(0.5, Vector2())
        alphas.append(cam.render().alpha)
    assert alphas == sorted(alphas, reverse=True)
    assert alphas[-1] == FADE_MIN_ALPHA


def test_effect_popped_only_after_duration_exceeded():
    cam = make_camera()
    cam.all_black(1.0)
    cam.update(1.0, Vector2())
    assert cam.render().effect is CameraEffectType.ALL_BLACK
    assert len(cam.effects) == 1
    cam.update(0.01, Vector2())
    cam.render()
    assert cam.effects == ()


def test_effects_run_in_order():
    cam = make_camera()
    cam.all_black(0.5)
    cam.fade_in(0.5)
    cam.update(0.6, Vector2())
    overlay = cam.render()
    assert overlay.effect is CameraEffectType.ALL_BLACK
    assert overlay.alpha == OPAQUE
    cam.update(0.1, Vector2())
    assert cam.render().effect is CameraEffectType.FADE_IN


def test_focused_on_hole_centered_and_shrinking():
    cam = make_camera()
    target = Vector2(400, 300)
    cam.focused_on(1.0, target)
    widths = []
    for _ in range(5):
        cam.update(0.2, Vector2())
        hole = cam.render().hole
        assert (hole[0] + hole[2]) / 2 == pytest.approx(target.x, abs=1)
        assert (hole[1] + hole[3]) / 2 == pytest.approx(target.y, abs=1)
        widths.append(width(hole))
    assert widths == sorted(widths, reverse=True)
    assert widths[0] > widths[-1]


def test_focused_out_hole_grows():
    cam = make_camera()
    cam.focused_out(1.0, Vector2(100, 100))
    widths = []
    for _ in range(5):
        cam.update(0.2, Vector2())
        widths.append(width(cam.render().hole))
    assert widths == sorted(widths)
    assert widths[-1] > widths[0]


def test_shine_light_straight_down_is_unrotated():
    cam = make_camera()
    cam.shine_light(5.0)
    cam.update(0.1, Vector2(960, 500))
    overlay = cam.render()
    assert overlay.alpha == SHINE_ALPHA
    ox, oy = int(SHINE_OFFSET.x), int(SHINE_OFFSET.y)
    assert overlay.light == ((-ox, -oy), (-ox + 600, -oy), (-ox, -oy + 800))


@pytest.mark.parametrize("mouse", [Vector2(0, 0), Vector2(1900, 100), Vector2(5000, -400)])
def test_shine_light_keeps_texture_shape(mouse):
    cam = make_camera()
    cam.shine_light(5.0)
    cam.update(0.1, mouse)
    tl, tr, bl = cam.render().light
    assert math.dist(tl, tr) == pytest.approx(600, abs=2)
    assert math.dist(tl, bl) == pytest.approx(800, abs=2)


def test_clear_effects():
    cam = make_camera()
    cam.fade_in(1.0)
    cam.shine_light(1.0)
    cam.clear_effects()
    assert cam.effects == ()
    assert cam.render() is None


def test_render_and_real_pos_round_trip():
    cam = make_camera()
    pos = Vector2(12.5, -3.0)
    assert cam.real_pos(cam.render_pos(pos)) == pos


def test_target_look_at_speed():
    cam = make_camera()
    cam.follow_time = 2.0
    cam.set_target_look_at(Vector2(6, 8))
    assert cam.target_look_at == Vector2(6, 8)
    assert cam.speed == pytest.approx(5.0)
    cam.follow_time = 0.0
    cam.set_target_look_at(Vector2(6, 8))
    assert math.isinf(cam.speed)