"""Block storage for a single chunk column of the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from .blocks import BlockType

CHUNK_SIZE = 16
CHUNK_HEIGHT = 128

_DIRT_TOP = 4


def block_for_position(x: int, y: int, z: int) -> BlockType:
    """Return the block the generator places at a position inside a chunk."""
    return BlockType.DIRT if y <= _DIRT_TOP else BlockType.AIR


@dataclass
class ChunkBlockData:
    """The blocks of one chunk, stored layer by layer (y, then x, then z)."""

    chunk_pos: tuple[float, float] = (0.0, 0.0)
    blocks: list[BlockType] = field(default_factory=list)

    def generate(self) -> None:
        """Fill the chunk from scratch using the terrain rule."""
        self.blocks = [
            block_for_position(x, y, z)
            for y in range(CHUNK_HEIGHT)
            for x in range(CHUNK_SIZE)
            for z in range(CHUNK_SIZE)
        ]

    def block_at(self, x: int, y: int, z: int) -> BlockType:
        """Return the stored block at local coordinates.

        Raises IndexError for coordinates outside the chunk or when the
        chunk has not been generated yet.
        """
        if not (0 <= x < CHUNK_SIZE and 0 <= y < CHUNK_HEIGHT and 0 <= z < CHUNK_SIZE):
            raise IndexError(f"block position ({x}, {y}, {z}) is outside the chunk")
        if not self.blocks:
            raise IndexError("chunk has not been generated")
        return self.blocks[(y * CHUNK_SIZE + x) * CHUNK_SIZE + z]