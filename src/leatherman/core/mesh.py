"""Mesh value type."""

import jax.numpy as jnp
import numpy as np
from flax import struct
from jax import Array


@struct.dataclass
class Mesh:
    """Triangle mesh owned by whoever holds the value.

    Attributes:
        vertices: Array of shape (num_vertices, 3).
        triangles: Integer array of shape (num_triangles, 3) indexing vertices.
    """
    vertices: Array
    triangles: Array

    @classmethod
    def from_arrays(cls, vertices, triangles) -> "Mesh":
        vertices = jnp.asarray(vertices, dtype=jnp.float64).reshape(-1, 3)
        triangles = jnp.asarray(np.asarray(triangles, dtype=np.int64).reshape(-1, 3))
        return cls(vertices=vertices, triangles=triangles)

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0])

    def scaled(self, sx: float, sy: float, sz: float) -> "Mesh":
        """Return a copy with vertices scaled independently per axis."""
        return self.replace(vertices=self.vertices * jnp.array([sx, sy, sz]))
