"""Mesh and texture data loading: Wavefront OBJ meshes, BMP and DDS images."""

__version__ = "0.1.0"
__all__ = ["bmp", "dds", "fileio", "objmodel", "texture"]