"""Window, per-frame drawing and the main loop."""

from __future__ import annotations

import time

import numpy as np

from .camera import Camera
from .input import Input
from .light import Light
from .objects import Cube
from .shader import Shaders
from .transforms import perspective

VERTEX_SHADER = "../resources/shaders/vertex.glsl"
FRAGMENT_SHADER = "../resources/shaders/fragment.frag"


class FrameClock:
    """Measures the time between successive frames."""

    def __init__(self) -> None:
        self.last = 0.0

    def tick(self, now: float) -> float:
        """Record a frame at time ``now`` and return the time since the last one."""
        delta = now - self.last
        self.last = now
        return delta


class Graphics:
    """Owns the shader, scene objects and camera, and draws frames."""

    def __init__(self, window, input: Input) -> None:
        from pyglet import gl

        self.window = window
        self.input = input
        self.camera = Camera((0.0, 0.0, 3.0), (0.0, 1.0, 0.0), -90.0, 0.0)
        self.program = Shaders(VERTEX_SHADER, FRAGMENT_SHADER)
        self.cube = Cube(self.program, (0.1, 0.5, 0.7))
        self.light = Light(color=(1.0, 1.0, 1.0), position=(1.2, 1.0, 2.0))
        self.clock = FrameClock()
        self._start = time.perf_counter()
        gl.glEnable(gl.GL_CULL_FACE)
        self.input.set_lock_cursor(True)

    def do_frame(self) -> None:
        """Advance the camera and draw one frame."""
        from pyglet import gl

        now = time.perf_counter() - self._start
        self.camera.update(self.clock.tick(now), self.input)

        width, height = self.window.get_framebuffer_size()
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(0.1, 0.1, 0.1, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        view = self.camera.view_matrix()
        projection = perspective(np.radians(45.0), width / max(height, 1), 0.1, 100.0)
        self.cube.render(projection, view, self.camera.position, now, self.light)

    def delete(self) -> None:
        self.cube.delete()
        self.program.delete()


class Window:
    """An OpenGL 4.1 window with its input state and graphics."""

    def __init__(self, width: int, height: int, title: str) -> None:
        import pyglet

        config = pyglet.gl.Config(
            major_version=4,
            minor_version=1,
            forward_compatible=True,
            double_buffer=True,
            depth_size=24,
        )
        self.window = pyglet.window.Window(width, height, title, config=config)
        self.window.switch_to()
        self.input = Input(self.window)
        self.graphics = Graphics(self.window, self.input)

    @property
    def should_close(self) -> bool:
        return bool(self.window.has_exit)

    def close(self) -> None:
        self.graphics.delete()
        self.window.close()


class App:
    """The application: one window drawn until it is closed."""

    def __init__(self) -> None:
        self.window = Window(1920, 1080, "Cool Program")

    def run(self) -> None:
        """Draw frames until the window is asked to close."""
        try:
            while not self.window.should_close:
                self.window.graphics.do_frame()
                self.window.window.flip()
                self.window.window.dispatch_events()
        finally:
            self.window.close()


def main(argv=None) -> int:
    App().run()
    return 0