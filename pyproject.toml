[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fildefer"
version = "0.1.0"
description = "Wireframe viewer for height maps stored in .fdf files"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["wireframe", "heightmap", "isometric", "fdf", "projection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fildefer = "fildefer.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fildefer"]

[tool.pytest.ini_options]
addopts = "-ra"
