"""Drawable objects: a lit cube and a placeholder icosphere."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .light import Light

_FACES = (
    # normal, four corner positions (counter-clockwise seen from outside)
    ((0.0, 0.0, 1.0), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0.0, 0.0, -1.0), ((-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5), (0.5, -0.5, -0.5))),
    ((-1.0, 0.0, 0.0), ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5))),
    ((1.0, 0.0, 0.0), ((0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5))),
    ((0.0, 1.0, 0.0), ((-0.5, 0.5, -0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5))),
    ((0.0, -1.0, 0.0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
)

_FLOAT_SIZE = 4
_STRIDE = 6 * _FLOAT_SIZE


def cube_mesh() -> tuple[np.ndarray, np.ndarray]:
    """Return the unit cube as (vertices, indices).

    Vertices are rows of position + normal as float32, indices are uint32
    triangles, two per face.
    """
    rows = [corner + normal for normal, corners in _FACES for corner in corners]
    indices = [
        base + offset
        for base in range(0, 4 * len(_FACES), 4)
        for offset in (0, 1, 2, 2, 3, 0)
    ]
    return np.array(rows, dtype=np.float32), np.array(indices, dtype=np.uint32)


@dataclass
class _GpuMesh:
    """Vertex array, vertex buffer and index buffer living on the GPU."""

    vao: int
    vbo: int
    ebo: int
    index_count: int

    @classmethod
    def upload(cls, vertices: np.ndarray, indices: np.ndarray) -> "_GpuMesh":
        from pyglet import gl

        vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        indices = np.ascontiguousarray(indices, dtype=np.uint32)
        vao, vbo, ebo = gl.GLuint(), gl.GLuint(), gl.GLuint()
        gl.glGenVertexArrays(1, vao)
        gl.glGenBuffers(1, vbo)
        gl.glGenBuffers(1, ebo)

        gl.glBindVertexArray(vao)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, vertices.nbytes, vertices.tobytes(), gl.GL_STATIC_DRAW
        )
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices.tobytes(), gl.GL_STATIC_DRAW
        )
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, None)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, _STRIDE, 3 * _FLOAT_SIZE)
        gl.glEnableVertexAttribArray(1)
        gl.glBindVertexArray(0)
        return cls(vao.value, vbo.value, ebo.value, int(indices.size))

    def draw(self) -> None:
        from pyglet import gl

        gl.glBindVertexArray(self.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, self.index_count, gl.GL_UNSIGNED_INT, None)
        gl.glBindVertexArray(0)

    def delete(self) -> None:
        from pyglet import gl

        gl.glDeleteVertexArrays(1, gl.GLuint(self.vao))
        gl.glDeleteBuffers(1, gl.GLuint(self.vbo))
        gl.glDeleteBuffers(1, gl.GLuint(self.ebo))


def _set_mat4(gl, location: int, matrix) -> None:
    # Matrices are row-major here; GL reads column-major.
    values = np.asarray(matrix, dtype=np.float32).T.flatten().tolist()
    gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, (gl.GLfloat * 16)(*values))


def _set_vec3(gl, program: int, name: bytes, value) -> None:
    x, y, z = (float(v) for v in value)
    gl.glUniform3f(gl.glGetUniformLocation(program, name), x, y, z)


class Cube:
    """A unit cube lit by a single point light."""

    def __init__(self, program, color) -> None:
        self.program = program
        self.object_color = tuple(float(c) for c in color)
        self.model = np.identity(4)
        vertices, indices = cube_mesh()
        self._mesh = _GpuMesh.upload(vertices, indices)

    def render(self, projection, view, cam_pos, time_value: float, light: Light) -> None:
        """Draw the cube with the given camera matrices and light."""
        from pyglet import gl

        program = self.program.program
        gl.glUseProgram(program)
        gl.glUniform1f(gl.glGetUniformLocation(program, b"u_time"), float(time_value))
        _set_vec3(gl, program, b"lightPos", light.position)
        _set_vec3(gl, program, b"lightColor", light.color)
        _set_vec3(gl, program, b"objectColor", self.object_color)
        _set_vec3(gl, program, b"viewPos", cam_pos)
        _set_mat4(gl, gl.glGetUniformLocation(program, b"model"), self.model)
        _set_mat4(gl, gl.glGetUniformLocation(program, b"view"), view)
        _set_mat4(gl, gl.glGetUniformLocation(program, b"projection"), projection)
        self._mesh.draw()

    def delete(self) -> None:
        """Release the GPU buffers."""
        self._mesh.delete()


class Icosphere:
    """A sphere object; it holds cube geometry for now and draws nothing."""

    def __init__(self, program, color) -> None:
        self.program = program
        self.object_color = tuple(float(c) for c in color)
        self.model = np.identity(4)
        vertices, indices = cube_mesh()
        self._mesh = _GpuMesh.upload(vertices, indices)

    def render(self, projection, view, cam_pos, time_value: float, light: Light) -> None:
        """Drawing is not done for this shape yet."""

    def delete(self) -> None:
        """Release the GPU buffers."""
        self._mesh.delete()