"""Vertical rise and fall animations for spawning and despawning objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

TRAVEL = 40.0


class AnimationStep(NamedTuple):
    """Height to place the object at, and whether the animation has ended."""

    y: float
    finished: bool


@dataclass
class SpawnAnimation:
    """Rises an object by ``TRAVEL`` units, easing out over one second."""

    elapsed: float = 0.0
    origin: Optional[float] = None

    def advance(self, y: float, delta: float) -> AnimationStep:
        """Compute the new height from the current one and advance by ``delta`` seconds."""
        if self.elapsed == 0.0 and self.origin is None:
            self.origin = y
        assert self.origin is not None
        progress = min(self.elapsed, 1.0)
        new_y = self.origin + TRAVEL * (1.0 - (1.0 - progress) ** 2)
        if self.elapsed >= 1.0:
            return AnimationStep(new_y, True)
        self.elapsed += delta
        return AnimationStep(new_y, False)


@dataclass
class DespawnAnimation:
    """Sinks an object by ``TRAVEL`` units, easing in over one second."""

    elapsed: float = 0.0
    origin: Optional[float] = None

    def advance(self, y: float, delta: float) -> AnimationStep:
        """Compute the new height from the current one and advance by ``delta`` seconds.

        A finished step means the object is to be removed.
        """
        if self.elapsed == 0.0 and self.origin is None:
            self.origin = y
        assert self.origin is not None
        progress = min(self.elapsed, 1.0)
        new_y = self.origin - TRAVEL * progress**2
        if self.elapsed >= 1.0:
            return AnimationStep(new_y, True)
        self.elapsed += delta
        return AnimationStep(new_y, False)