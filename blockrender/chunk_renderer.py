"""Turning chunk block data into a drawable mesh."""

from __future__ import annotations

import numpy as np

from .chunk import ChunkBlockData
from .light import Light
from .objects import _GpuMesh


def build_chunk_mesh(data: ChunkBlockData) -> tuple[np.ndarray, np.ndarray]:
    """Return the (vertices, indices) for a chunk.

    Vertices are rows of position + normal; no faces are emitted yet, so
    the mesh is empty.
    """
    vertices = np.empty((0, 6), dtype=np.float32)
    indices = np.empty((0,), dtype=np.uint32)
    return vertices, indices


class ChunkRenderer:
    """Holds the GPU mesh for one chunk."""

    def __init__(self, program) -> None:
        self.program = program
        self.model = np.identity(4)
        self.index_count = 0
        self._mesh: _GpuMesh | None = None

    def generate_mesh(self, data: ChunkBlockData) -> None:
        """Build the chunk mesh and upload it to the GPU."""
        vertices, indices = build_chunk_mesh(data)
        if self._mesh is not None:
            self._mesh.delete()
        self._mesh = _GpuMesh.upload(vertices, indices)
        self.index_count = self._mesh.index_count

    def render(self, projection, view, light: Light) -> None:
        """Drawing chunks is not done yet."""