from spellhaven.wave_function_collapse import (
    ALL_FLAGS,
    FLOOR_TOP,
    Flags,
    TILESET_INDICES,
    WfcTile,
    build_tilemap,
)


def column(*ys):
    return {(0, y): WfcTile((0, y)) for y in ys}


def test_build_tilemap_layout():
    tiles = build_tilemap()
    assert len(tiles) == 16
    assert tiles[(0, 0)].atlas_index == 56
    assert tiles[(192, -192)].atlas_index == 65
    assert all(tile.state == ALL_FLAGS for tile in tiles.values())
    assert [tiles[(x * 64, 0)].atlas_index for x in range(4)] == list(TILESET_INDICES[0])


def test_positions_match_keys():
    tiles = build_tilemap()
    assert all(pos == tile.position for pos, tile in tiles.items())


def test_new_tile_holds_every_flag():
    tile = WfcTile((0, 0))
    for flag in Flags:
        assert flag in tile.state


def test_remove_barrel_broken_narrows_below():
    tiles = column(0, -1)
    tiles[(0, 0)].remove_state(Flags.BARREL_BROKEN, tiles)
    assert Flags.BARREL_BROKEN not in tiles[(0, 0)].state
    assert tiles[(0, -1)].state == FLOOR_TOP


def test_remove_pole_middle_narrows_both_sides():
    tiles = column(1, 0, -1)
    tiles[(0, 0)].remove_state(Flags.POLE_MIDDLE, tiles)
    assert tiles[(0, 1)].state == Flags.POLE_TOP
    assert tiles[(0, -1)].state == Flags.POLE_MIDDLE | Flags.POLE_BOTTOM


def test_remove_floor_tl_narrows_both_sides():
    tiles = column(1, 0, -1)
    tiles[(0, 0)].remove_state(Flags.FLOOR_TL, tiles)
    assert tiles[(0, 1)].state == Flags.POLE_TOP | Flags.POLE_MIDDLE
    assert tiles[(0, -1)].state == FLOOR_TOP


def test_removing_absent_state_changes_nothing():
    tiles = column(1, 0, -1)
    tiles[(0, 0)].state = Flags.AIR
    tiles[(0, 0)].remove_state(Flags.POLE_MIDDLE | Flags.BARREL, tiles)
    assert tiles[(0, 0)].state == Flags.AIR
    assert tiles[(0, 1)].state == ALL_FLAGS
    assert tiles[(0, -1)].state == ALL_FLAGS


def test_missing_neighbours_are_ignored():
    tile = WfcTile((5, 5))
    tiles = {(5, 5): tile}
    tile.remove_state(Flags.POLE_BOTTOM | Flags.BARREL, tiles)
    assert tile.state == ALL_FLAGS & ~(Flags.POLE_BOTTOM | Flags.BARREL)
    assert list(tiles) == [(5, 5)]


def test_state_never_grows():
    tiles = column(2, 1, 0, -1, -2)
    before = {pos: tile.state for pos, tile in tiles.items()}
    tiles[(0, 0)].remove_state(ALL_FLAGS, tiles)
    for pos, tile in tiles.items():
        assert tile.state & ~before[pos] == Flags.NONE
    assert tiles[(0, 0)].state == Flags.NONE