import pytest

from blockrender.blocks import BlockType
from blockrender.chunk import (
    CHUNK_HEIGHT,
    CHUNK_SIZE,
    ChunkBlockData,
    block_for_position,
)


def test_terrain_rule_boundary():
    assert block_for_position(0, 4, 0) is BlockType.DIRT
    assert block_for_position(0, 5, 0) is BlockType.AIR
    assert block_for_position(3, 0, 7) is BlockType.DIRT


def test_default_chunk_is_empty_at_origin():
    data = ChunkBlockData()
    assert data.chunk_pos == (0.0, 0.0)
    assert data.blocks == []


def test_generate_fills_every_cell():
    data = ChunkBlockData()
    data.generate()
    assert len(data.blocks) == CHUNK_SIZE * CHUNK_SIZE * CHUNK_HEIGHT


def test_generate_twice_does_not_grow():
    data = ChunkBlockData()
    data.generate()
    first = list(data.blocks)
    data.generate()
    assert data.blocks == first


def test_dirt_fills_the_bottom_layers():
    data = ChunkBlockData()
    data.generate()
    layer = CHUNK_SIZE * CHUNK_SIZE
    assert data.blocks.count(BlockType.DIRT) == 5 * layer
    assert all(b is BlockType.DIRT for b in data.blocks[: 5 * layer])
    assert all(b is BlockType.AIR for b in data.blocks[5 * layer :])


@pytest.mark.parametrize("x,y,z", [(0, 0, 0), (15, 4, 15), (7, 5, 2), (15, 127, 15)])
def test_block_at_matches_rule(x, y, z):
    data = ChunkBlockData()
    data.generate()
    assert data.block_at(x, y, z) is block_for_position(x, y, z)


@pytest.mark.parametrize(
    "x,y,z", [(-1, 0, 0), (CHUNK_SIZE, 0, 0), (0, CHUNK_HEIGHT, 0), (0, 0, CHUNK_SIZE)]
)
def test_block_at_outside_raises(x, y, z):
    data = ChunkBlockData()
    data.generate()
    with pytest.raises(IndexError):
        data.block_at(x, y, z)


def test_block_at_before_generate_raises():
    with pytest.raises(IndexError):
        ChunkBlockData().block_at(0, 0, 0)