[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockrender"
version = "0.1.0"
description = "A small OpenGL renderer with a free-flying camera, a lit cube and chunked block data"
requires-python = ">=3.10"
keywords = ["opengl", "renderer", "voxel", "camera", "pyglet"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blockrender = "blockrender.app:main"

[tool.hatch.build.targets.wheel]
packages = ["blockrender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
