import pytest

from spellhaven.blocks import BlockType


@pytest.mark.parametrize(
    "block, expected",
    [
        (BlockType.PATH, (25, 2)),
        (BlockType.GRASS, (29, 18)),
        (BlockType.STONE, (30, 29)),
        (BlockType.SNOW, (9, 29)),
        (BlockType.AIR, (0, 0)),
    ],
)
def test_texture_index(block, expected):
    assert block.texture_index() == expected


@pytest.mark.parametrize(
    "block, expected",
    [
        (BlockType.PATH, 2),
        (BlockType.GRASS, 0),
        (BlockType.STONE, 1),
        (BlockType.SNOW, 3),
        (BlockType.AIR, 0),
    ],
)
def test_texture_id(block, expected):
    assert block.texture_id() == expected


def test_solid_blocks_have_distinct_texture_ids():
    ids = [
        BlockType.GRASS.texture_id(),
        BlockType.STONE.texture_id(),
        BlockType.PATH.texture_id(),
        BlockType.SNOW.texture_id(),
    ]
    assert sorted(ids) == [0, 1, 2, 3]