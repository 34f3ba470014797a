"""Tile states and constraint propagation for a 2D cave tileset."""

from __future__ import annotations

import functools
import operator
from dataclasses import dataclass
from enum import Flag
from typing import Dict, List, MutableMapping, Tuple

Pos = Tuple[int, int]

ATLAS_TILE_SIZE = (32, 32)
ATLAS_COLUMNS = 10
ATLAS_ROWS = 7
TILE_SPACING = 64
TILE_SCALE = 2.0

TILESET_INDICES = (
    (56, 66, 47, 3),
    (40, 41, 42, 45),
    (50, 51, 52, 55),
    (60, 61, 62, 65),
)


class Flags(Flag):
    """Possible contents of a tile."""

    NONE = 0
    BARREL = 1 << 0
    BARREL_BROKEN = 1 << 1
    TORCH = 1 << 2
    FLOOR_TL = 1 << 3
    FLOOR_TM = 1 << 4
    FLOOR_TR = 1 << 5
    FLOOR_ML = 1 << 6
    FLOOR_MM = 1 << 7
    FLOOR_MR = 1 << 8
    FLOOR_BL = 1 << 9
    FLOOR_BM = 1 << 10
    FLOOR_BR = 1 << 11
    POLE_TOP = 1 << 12
    POLE_MIDDLE = 1 << 13
    POLE_BOTTOM = 1 << 14
    AIR = 1 << 15


_SINGLE_FLAGS = [m for m in Flags if m.value and m.value & (m.value - 1) == 0]
ALL_FLAGS = functools.reduce(operator.or_, _SINGLE_FLAGS, Flags.NONE)

FLOOR_TOP = Flags.FLOOR_TL | Flags.FLOOR_TM | Flags.FLOOR_TR


def _split(value: Flags) -> List[Flags]:
    return [flag for flag in _SINGLE_FLAGS if flag in value]


@dataclass
class WfcTile:
    """A tile on the grid and the contents it may still take."""

    position: Pos
    atlas_index: int = 0
    state: Flags = ALL_FLAGS

    def remove_state(
        self, state_to_remove: Flags, tiles: MutableMapping[Pos, "WfcTile"]
    ) -> None:
        """Rule out states and narrow the tiles above and below accordingly."""
        removed = self.state & state_to_remove
        self.state &= ~state_to_remove

        x, y = self.position
        below = tiles.get((x, y - 1))
        above = tiles.get((x, y + 1))

        for flag in _split(removed):
            if flag is Flags.BARREL:
                if below is not None:
                    below.remove_state(~FLOOR_TOP, tiles)
            elif flag is Flags.BARREL_BROKEN:
                if below is not None:
                    below.state &= FLOOR_TOP
            elif flag is Flags.POLE_TOP:
                if below is not None:
                    below.state &= Flags.POLE_MIDDLE | Flags.POLE_BOTTOM
            elif flag is Flags.POLE_MIDDLE:
                if below is not None:
                    below.state &= Flags.POLE_MIDDLE | Flags.POLE_BOTTOM
                if above is not None:
                    above.state &= Flags.POLE_TOP
            elif flag in (Flags.POLE_BOTTOM, Flags.FLOOR_TL):
                if below is not None:
                    below.state &= FLOOR_TOP
                if above is not None:
                    above.state &= Flags.POLE_TOP | Flags.POLE_MIDDLE


def build_tilemap() -> Dict[Pos, WfcTile]:
    """Lay out the demo tileset on a grid, each tile open to every state."""
    tiles: Dict[Pos, WfcTile] = {}
    for row, indices in enumerate(TILESET_INDICES):
        for column, index in enumerate(indices):
            position = (column * TILE_SPACING, -(row * TILE_SPACING))
            tiles[position] = WfcTile(position, index)
    return tiles