"""Start menu that turns a seed phrase into a world seed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_MASK = (1 << 64) - 1


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK


def _sip_round(v0: int, v1: int, v2: int, v3: int) -> tuple:
    v0 = (v0 + v1) & _MASK
    v1 = _rotl(v1, 13) ^ v0
    v0 = _rotl(v0, 32)
    v2 = (v2 + v3) & _MASK
    v3 = _rotl(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK
    v3 = _rotl(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK
    v1 = _rotl(v1, 17) ^ v2
    v2 = _rotl(v2, 32)
    return v0, v1, v2, v3


def _siphash13(data: bytes, k0: int = 0, k1: int = 0) -> int:
    v0 = k0 ^ 0x736F6D6570736575
    v1 = k1 ^ 0x646F72616E646F6D
    v2 = k0 ^ 0x6C7967656E657261
    v3 = k1 ^ 0x7465646279746573

    full = len(data) - len(data) % 8
    for start in range(0, full, 8):
        m = int.from_bytes(data[start : start + 8], "little")
        v3 ^= m
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
        v0 ^= m

    b = ((len(data) & 0xFF) << 56) | int.from_bytes(data[full:], "little")
    v3 ^= b
    v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    v0 ^= b
    v2 ^= 0xFF
    for _ in range(3):
        v0, v1, v2, v3 = _sip_round(v0, v1, v2, v3)
    return v0 ^ v1 ^ v2 ^ v3


def hash_seed(text: str) -> int:
    """Unsigned 64-bit world seed for a seed phrase (SipHash-1-3, zero keys)."""
    return _siphash13(text.encode("utf-8") + b"\xff")


class MenuState(Enum):
    """Whether the menu is on screen."""

    SHOWN = "shown"
    HIDDEN = "hidden"


@dataclass
class MainMenu:
    """The start menu: a seed phrase and a start button.

    ``on_start`` receives the world seed when the game starts.
    """

    seed: str = "Seed"
    state: MenuState = MenuState.SHOWN
    on_start: Optional[Callable[[int], None]] = None

    @property
    def shown(self) -> bool:
        """Whether the menu is on screen."""
        return self.state is MenuState.SHOWN

    def start(self) -> Optional[int]:
        """Start the game from the current phrase and hide the menu.

        Returns the world seed, or ``None`` when the menu is already hidden.
        """
        if not self.shown:
            return None
        world_seed = hash_seed(self.seed)
        logger.info("Seed to use: %d", world_seed)
        self.state = MenuState.HIDDEN
        if self.on_start is not None:
            self.on_start(world_seed)
        return world_seed