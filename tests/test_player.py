import math

import pytest

from spellhaven.debug import DebugSettings
from spellhaven.player import (
    Key,
    KeyState,
    Player,
    follow_body,
    follow_camera,
)

IDENTITY = (0.0, 0.0, 0.0, 1.0)


def test_key_state_pressed_and_just_pressed():
    keys = KeyState(held=frozenset({Key.W}), went_down=frozenset({Key.F}))
    assert keys.pressed(Key.W)
    assert keys.pressed(Key.F)
    assert keys.just_pressed(Key.F)
    assert not keys.just_pressed(Key.W)
    assert not keys.pressed(Key.S)


def test_flying_velocity_decays_evenly():
    player = Player(velocity=(1.0, 1.0, 1.0))
    step = player.update(KeyState(), 0.016)
    assert step.translation == pytest.approx((0.8, 0.8, 0.8))
    assert player.velocity == step.translation
    assert step.facing is None


def test_walking_keeps_more_vertical_speed():
    player = Player(velocity=(1.0, 1.0, 1.0), fly=False)
    step = player.update(KeyState(), 0.016)
    assert step.translation[1] == pytest.approx(0.98)
    assert step.translation[0] == pytest.approx(0.8)


def test_f_toggles_flying():
    player = Player()
    player.update(KeyState(went_down=frozenset({Key.F})), 0.1)
    assert player.fly is False
    player.update(KeyState(went_down=frozenset({Key.F})), 0.1)
    assert player.fly is True


def test_jump_when_grounded():
    player = Player(fly=False)
    step = player.update(KeyState(held=frozenset({Key.SPACE})), 1.0, grounded=True)
    assert step.translation[1] == pytest.approx(0.1)
    assert player.jumped is True


def test_no_double_jump_while_airborne():
    player = Player(fly=False, jumped=True)
    player.update(KeyState(held=frozenset({Key.SPACE})), 1.0, grounded=False)
    assert player.jumped is True


def test_landing_resets_jump():
    player = Player(fly=False, jumped=True)
    player.update(KeyState(), 0.1, grounded=True)
    assert player.jumped is False


def test_gravity_only_when_controller_reports_airborne():
    falling = Player(fly=False)
    unknown = Player(fly=False)
    falling_step = falling.update(KeyState(), 1.0, grounded=False)
    unknown_step = unknown.update(KeyState(), 1.0, grounded=None)
    assert falling_step.translation[1] == pytest.approx(-0.4)
    assert unknown_step.translation[1] == 0.0


def test_vertical_keys_ignored_when_walking():
    player = Player(fly=False)
    step = player.update(KeyState(held=frozenset({Key.E})), 1.0, grounded=True)
    assert step.translation == (0.0, 0.0, 0.0)


def test_diagonal_speed_is_normalized_with_camera():
    player = Player(fly=False)
    keys = KeyState(held=frozenset({Key.W, Key.D}))
    step = player.update(keys, 1.0, grounded=True, camera_yaw=0.0)
    length = math.hypot(step.translation[0], step.translation[2])
    assert length == pytest.approx(1.0)


def test_sprint_flying_speed_with_rotated_camera():
    player = Player(fly=True)
    keys = KeyState(held=frozenset({Key.W, Key.SHIFT_LEFT}))
    step = player.update(keys, 1.0, camera_yaw=1.2)
    length = math.sqrt(sum(c * c for c in step.translation))
    assert length == pytest.approx(100.0)


def test_facing_forward_and_right():
    forward = Player(fly=False)
    step = forward.update(KeyState(held=frozenset({Key.W})), 1.0, grounded=True, camera_yaw=0.0)
    assert step.facing == pytest.approx(0.0)
    assert forward.facing == step.facing

    right = Player(fly=False)
    step = right.update(KeyState(held=frozenset({Key.D})), 1.0, grounded=True, camera_yaw=0.0)
    assert step.facing == pytest.approx(-math.pi / 2)


def test_follow_body_moves_a_quarter():
    translation, rotation = follow_body((4.0, 8.0, -4.0), IDENTITY, (0.0, 0.0, 0.0), IDENTITY)
    assert translation == pytest.approx((1.0, 2.0, -1.0))
    assert rotation == pytest.approx(IDENTITY)


def test_follow_body_rotation_stays_unit_length():
    half = math.sqrt(0.5)
    _, rotation = follow_body((0, 0, 0), (0.0, half, 0.0, half), (0, 0, 0), IDENTITY)
    assert math.sqrt(sum(c * c for c in rotation)) == pytest.approx(1.0)
    assert 0.0 < rotation[1] < half


def test_follow_camera_unlocked_keeps_focus():
    settings = DebugSettings(unlock_camera=True)
    assert follow_camera((10.0, 10.0, 10.0), (1.0, 2.0, 3.0), settings) == (1.0, 2.0, 3.0)


def test_follow_camera_converges_above_player():
    settings = DebugSettings()
    focus = (0.0, 0.0, 0.0)
    for _ in range(200):
        focus = follow_camera((5.0, 7.0, -3.0), focus, settings)
    assert focus == pytest.approx((5.0, 8.0, -3.0))