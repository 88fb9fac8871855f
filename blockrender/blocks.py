"""Kinds of blocks that make up a chunk."""

from enum import IntEnum


class BlockType(IntEnum):
    """The material stored in one block cell."""

    AIR = 0
    DIRT = 1