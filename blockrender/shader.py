"""Loading and linking the GLSL program used for drawing."""

from __future__ import annotations

from pathlib import Path


def load_source(path) -> str:
    """Read a shader source file; raises FileNotFoundError if it is missing."""
    file = Path(path)
    try:
        return file.read_text()
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Error opening file {file}") from exc


class Shaders:
    """A linked vertex + fragment shader program.

    Both source files are read before any GL work is done, so a missing
    file is reported without needing a GL context.
    """

    def __init__(self, vertex_path, fragment_path) -> None:
        self.vertex_source = load_source(vertex_path)
        self.fragment_source = load_source(fragment_path)

        from pyglet.graphics.shader import Shader, ShaderProgram

        vertex = Shader(self.vertex_source, "vertex")
        fragment = Shader(self.fragment_source, "fragment")
        self._program = ShaderProgram(vertex, fragment)
        vertex.delete()
        fragment.delete()

    @property
    def program(self) -> int:
        """The GL name of the linked program."""
        return self._program.id

    def delete(self) -> None:
        """Release the GL program."""
        if self._program is not None:
            self._program.delete()
            self._program = None