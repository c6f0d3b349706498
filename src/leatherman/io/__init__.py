"""I/O utilities for robot descriptions and mesh files.

This module provides parsers for standard robotics file formats (URDF, binary
STL, collada unit declarations) that produce leatherman value types.
"""

from .collada import read_unit_scale
from .stl import create_mesh_from_binary_stl, create_mesh_from_binary_stl_data
from .urdf_parser import load_urdf, parse_urdf

__all__ = [
    "read_unit_scale",
    "create_mesh_from_binary_stl",
    "create_mesh_from_binary_stl_data",
    "load_urdf",
    "parse_urdf",
]
