"""Player movement, facing and the camera and body that follow the player."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import AbstractSet, NamedTuple, Optional, Sequence, Tuple

from spellhaven.blocks import VOXEL_SIZE
from spellhaven.debug import DebugSettings
from spellhaven.utils import RotationDirection, rotate_around

Vec3 = Tuple[float, float, float]
Quat = Tuple[float, float, float, float]

STEP_HEIGHT = 1.0 * VOXEL_SIZE
SPAWN_POSITION: Vec3 = (0.0, 2200.0, 0.0)
FOLLOW_FACTOR = 0.25
GROUND_DAMPING = 0.8
FLY_VERTICAL_DAMPING = 0.8
FALL_DAMPING = 0.98
GRAVITY = 0.4
JUMP_IMPULSE = 0.1
SPRINT_MULTIPLIER = 2.0
FLY_MULTIPLIER = 50.0


class Key(Enum):
    """Keys the player controls react to."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    E = "e"
    Q = "q"
    F = "f"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SPACE = "space"
    SHIFT_LEFT = "shift_left"


@dataclass(frozen=True)
class KeyState:
    """Keys held down this frame and keys that went down this frame."""

    held: AbstractSet[Key] = frozenset()
    went_down: AbstractSet[Key] = frozenset()

    def pressed(self, key: Key) -> bool:
        """Whether ``key`` is held down."""
        return key in self.held or key in self.went_down

    def just_pressed(self, key: Key) -> bool:
        """Whether ``key`` went down this frame."""
        return key in self.went_down


class PlayerStep(NamedTuple):
    """Translation to apply this frame and the yaw the player now faces, if it turned."""

    translation: Vec3
    facing: Optional[float]


def _normalize_or_zero(vec: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in vec))
    if length == 0.0 or not math.isfinite(length):
        return (0.0, 0.0, 0.0)
    return (vec[0] / length, vec[1] / length, vec[2] / length)


@dataclass
class Player:
    """A player's motion state between frames."""

    velocity: Vec3 = (0.0, 0.0, 0.0)
    jumped: bool = False
    fly: bool = True
    facing: Optional[float] = field(default=None)

    def update(
        self,
        keys: KeyState,
        delta: float,
        grounded: Optional[bool] = None,
        camera_yaw: Optional[float] = None,
    ) -> PlayerStep:
        """Advance one frame.

        ``grounded`` is ``None`` while the character controller has not yet
        reported; ``camera_yaw`` is ``None`` when no player camera exists.
        """
        if keys.just_pressed(Key.F):
            self.fly = not self.fly

        if self.jumped and grounded is True:
            self.jumped = False

        vx, vy, vz = self.velocity
        last = (
            vx * GROUND_DAMPING,
            vy * (FLY_VERTICAL_DAMPING if self.fly else FALL_DAMPING),
            vz * GROUND_DAMPING,
        )

        mx = my = mz = 0.0
        if keys.pressed(Key.W) or keys.pressed(Key.UP):
            mz -= 1.0
        if keys.pressed(Key.A) or keys.pressed(Key.LEFT):
            mx -= 1.0
        if keys.pressed(Key.S) or keys.pressed(Key.DOWN):
            mz += 1.0
        if keys.pressed(Key.D) or keys.pressed(Key.RIGHT):
            mx += 1.0
        if self.fly:
            if keys.pressed(Key.E):
                my += 1.0
            if keys.pressed(Key.Q):
                my -= 1.0

        speed = SPRINT_MULTIPLIER if keys.pressed(Key.SHIFT_LEFT) else 1.0
        if self.fly:
            speed *= FLY_MULTIPLIER

        move: Vec3 = (mx, my, mz)
        if camera_yaw is not None:
            unit = _normalize_or_zero(move)
            scaled = (unit[0] * speed, unit[1] * speed, unit[2] * speed)
            move = rotate_around(
                scaled, (0.0, 0.0, 0.0), math.degrees(camera_yaw), RotationDirection.Y
            )

        mx, my, mz = move
        if not self.fly and grounded is False:
            my -= GRAVITY

        mx, my, mz = mx * delta, my * delta, mz * delta

        if keys.pressed(Key.SPACE) and grounded is True and not self.jumped:
            my = JUMP_IMPULSE
            self.jumped = True

        movement = (mx + last[0], my + last[1], mz + last[2])
        self.velocity = movement

        facing: Optional[float] = None
        if mx != 0.0 or mz != 0.0:
            facing = -math.atan2(mz, mx) - math.pi / 2.0
            self.facing = facing

        return PlayerStep(movement, facing)


def _lerp_vec(start: Sequence[float], end: Sequence[float], t: float) -> Vec3:
    sx, sy, sz = start
    ex, ey, ez = end
    return (sx + (ex - sx) * t, sy + (ey - sy) * t, sz + (ez - sz) * t)


def _quat_lerp(start: Quat, end: Quat, t: float) -> Quat:
    dot = sum(a * b for a, b in zip(start, end))
    bias = 1.0 if dot >= 0.0 else -1.0
    mixed = [s + (e * bias - s) * t for s, e in zip(start, end)]
    length = math.sqrt(sum(c * c for c in mixed))
    if length == 0.0:
        raise ValueError("cannot interpolate between opposite zero-length rotations")
    x, y, z, w = (c / length for c in mixed)
    return (x, y, z, w)


def follow_body(
    player_translation: Sequence[float],
    player_rotation: Quat,
    body_translation: Sequence[float],
    body_rotation: Quat,
) -> Tuple[Vec3, Quat]:
    """Move the visible body a quarter of the way towards the player."""
    translation = _lerp_vec(body_translation, player_translation, FOLLOW_FACTOR)
    rotation = _quat_lerp(tuple(body_rotation), tuple(player_rotation), FOLLOW_FACTOR)  # type: ignore[arg-type]
    return translation, rotation


def follow_camera(
    player_translation: Sequence[float],
    target_focus: Sequence[float],
    settings: DebugSettings,
) -> Vec3:
    """New camera focus, moved towards a point one unit above the player.

    An unlocked camera keeps its focus.
    """
    fx, fy, fz = target_focus
    if settings.unlock_camera:
        return (fx, fy, fz)
    px, py, pz = player_translation
    return _lerp_vec((fx, fy, fz), (px, py + 1.0, pz), FOLLOW_FACTOR)