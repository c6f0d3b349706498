"""Shared fixtures for the leatherman tests."""

import shutil
import struct
from pathlib import Path

import pytest

from leatherman.io import load_urdf
from leatherman.resources import PackageRegistry

FIXTURES = Path(__file__).parent / "fixtures"


def build_binary_stl(triangles, header=b"test mesh"):
    """Binary STL bytes for a list of triangles, each three (x, y, z) corners."""
    data = header.ljust(80, b"\0")[:80]
    data += struct.pack("<I", len(triangles))
    for corners in triangles:
        data += struct.pack("<3f", 0.0, 0.0, 1.0)
        for corner in corners:
            data += struct.pack("<3f", *corner)
        data += struct.pack("<H", 0)
    return data


UNIT_SQUARE = [
    [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)],
    [(0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
]


@pytest.fixture
def urdf_path():
    return FIXTURES / "three_link_arm.urdf"


@pytest.fixture
def urdf_string(urdf_path):
    return urdf_path.read_text()


@pytest.fixture
def robot(urdf_path):
    return load_urdf(str(urdf_path))


@pytest.fixture
def square_stl():
    return build_binary_stl(UNIT_SQUARE)


@pytest.fixture
def arm_package(tmp_path, square_stl):
    """A `test_arm` package on disk holding the meshes the URDF fixture references."""
    root = tmp_path / "test_arm"
    meshes = root / "meshes"
    meshes.mkdir(parents=True)
    (meshes / "link1.stl").write_bytes(square_stl)
    shutil.copy(FIXTURES / "cm_box.dae", meshes / "link2.dae")
    shutil.copy(FIXTURES / "cm_triangle.dae", meshes / "triangle.dae")
    return root


@pytest.fixture
def registry(arm_package):
    return PackageRegistry(packages={"test_arm": str(arm_package)})
