"""Wireframe viewer for height maps stored in .fdf files."""

__version__ = "0.1.0"