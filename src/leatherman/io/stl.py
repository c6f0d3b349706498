"""Binary STL reader.

Layout: an 80-byte header, a little-endian uint32 triangle count, then 50 bytes
per triangle (normal, three vertices as float32 triples, uint16 attribute).
"""

import logging
from typing import Optional

import numpy as np

from leatherman.core.mesh import Mesh

logger = logging.getLogger(__name__)

HEADER_SIZE = 80
COUNT_SIZE = 4

TRIANGLE_DTYPE = np.dtype([
    ("normal", "<f4", (3,)),
    ("vertices", "<f4", (3, 3)),
    ("attribute", "<u2"),
])


def create_mesh_from_binary_stl_data(data: bytes) -> Optional[Mesh]:
    """Parse a binary STL buffer.

    Every triangle contributes its own three vertices; shared vertices are not
    merged. Bytes beyond the declared triangle count are ignored.

    Returns:
        The mesh, or None for a truncated or malformed buffer.
    """
    if data is None or len(data) < HEADER_SIZE + COUNT_SIZE:
        logger.error("STL buffer too short for a header (%d bytes).",
                     0 if data is None else len(data))
        return None

    num_triangles = int(np.frombuffer(data, dtype="<u4", count=1, offset=HEADER_SIZE)[0])
    expected = HEADER_SIZE + COUNT_SIZE + num_triangles * TRIANGLE_DTYPE.itemsize
    if len(data) < expected:
        logger.error("STL buffer declares %d triangles but holds %d bytes (expected %d).",
                     num_triangles, len(data), expected)
        return None

    records = np.frombuffer(data, dtype=TRIANGLE_DTYPE, count=num_triangles,
                            offset=HEADER_SIZE + COUNT_SIZE)
    vertices = records["vertices"].reshape(-1, 3).astype(np.float64)
    if not np.all(np.isfinite(vertices)):
        logger.error("STL buffer contains non-finite vertex coordinates.")
        return None

    triangles = np.arange(num_triangles * 3, dtype=np.int64).reshape(-1, 3)
    return Mesh.from_arrays(vertices, triangles)


def create_mesh_from_binary_stl(filename: str) -> Optional[Mesh]:
    """Read and parse a binary STL file."""
    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.error("Failed to open STL file '%s': %s", filename, e)
        return None

    mesh = create_mesh_from_binary_stl_data(data)
    if mesh is None:
        logger.error("Failed to parse STL file '%s'.", filename)
    return mesh
