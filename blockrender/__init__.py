"""A small OpenGL renderer with a free-flying camera, a lit cube and chunked block data."""

__version__ = "0.1.0"