"""Voxel block kinds and world size constants."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

CHUNK_SIZE = 64
VOXEL_SIZE = 1.0

_TEXTURE_INDEX = {
    "PATH": (25, 2),
    "GRASS": (29, 18),
    "STONE": (30, 29),
    "SNOW": (9, 29),
}

_TEXTURE_ID = {
    "PATH": 2,
    "GRASS": 0,
    "STONE": 1,
    "SNOW": 3,
}


class BlockType(Enum):
    """Kinds of voxel a chunk can hold."""

    AIR = "air"
    STONE = "stone"
    GRASS = "grass"
    PATH = "path"
    SNOW = "snow"

    def texture_index(self) -> Tuple[int, int]:
        """Column and row of this block's tile in the texture atlas."""
        return _TEXTURE_INDEX.get(self.name, (0, 0))

    def texture_id(self) -> int:
        """Layer of this block's texture in the array texture."""
        return _TEXTURE_ID.get(self.name, 0)