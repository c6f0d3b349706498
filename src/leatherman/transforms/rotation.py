"""Rotation conversion utilities in JAX.

Orientations move between three representations: roll-pitch-yaw angles,
3x3 rotation matrices and unit quaternions. Array quaternions are in
(w, x, y, z) order; message quaternions keep their (x, y, z, w) fields.
The fixed-axis convention is R = Rz(yaw) @ Ry(pitch) @ Rx(roll).
"""

import math
from typing import Sequence, Tuple, Union

import jax
import jax.numpy as jnp

from leatherman.core.messages import Quaternion

# Type aliases
Array = jax.Array
Scalar = Union[float, Array]


def quaternion_to_matrix(quaternions: Array) -> Array:
    """
    Convert quaternions to rotation matrices.

    Args:
        quaternions: (..., 4) array in (w, x, y, z) order, not necessarily unit

    Returns:
        (..., 3, 3) array of rotation matrices
    """
    q = normalize_quaternions(jnp.asarray(quaternions, dtype=jnp.float64))
    w, x, y, z = (q[..., i] for i in range(4))

    rows = (
        (w*w + x*x - y*y - z*z, 2*(x*y - w*z), 2*(x*z + w*y)),
        (2*(x*y + w*z), w*w - x*x + y*y - z*z, 2*(y*z - w*x)),
        (2*(x*z - w*y), 2*(y*z + w*x), w*w - x*x - y*y + z*z),
    )
    return jnp.stack([jnp.stack(row, axis=-1) for row in rows], axis=-2)


def normalize_quaternions(quaternions: Array) -> Array:
    return quaternions / jnp.linalg.norm(quaternions, axis=-1, keepdims=True)


def matrix_to_quaternion(matrix: Array) -> Array:
    """
    Convert rotation matrices to (w, x, y, z) quaternions with w >= 0.

    The quaternion is recovered from whichever component has the largest
    magnitude, which keeps the division well conditioned. Works under jit and
    over leading batch dimensions.
    """
    m = jnp.asarray(matrix, dtype=jnp.float64)
    d0, d1, d2 = m[..., 0, 0], m[..., 1, 1], m[..., 2, 2]

    # 4 * q_i**2 for each component
    squares = jnp.stack([
        1.0 + d0 + d1 + d2,
        1.0 + d0 - d1 - d2,
        1.0 - d0 + d1 - d2,
        1.0 - d0 - d1 + d2,
    ], axis=-1)

    a = m[..., 2, 1] - m[..., 1, 2]
    b = m[..., 0, 2] - m[..., 2, 0]
    c = m[..., 1, 0] - m[..., 0, 1]
    xy = m[..., 0, 1] + m[..., 1, 0]
    xz = m[..., 0, 2] + m[..., 2, 0]
    yz = m[..., 1, 2] + m[..., 2, 1]

    # row k is 4 * q_k * q
    candidates = jnp.stack([
        jnp.stack([squares[..., 0], a, b, c], axis=-1),
        jnp.stack([a, squares[..., 1], xy, xz], axis=-1),
        jnp.stack([b, xy, squares[..., 2], yz], axis=-1),
        jnp.stack([c, xz, yz, squares[..., 3]], axis=-1),
    ], axis=-2)

    pick = jax.nn.one_hot(jnp.argmax(squares, axis=-1), 4, dtype=m.dtype)
    q = jnp.sum(candidates * pick[..., :, None], axis=-2)
    q = jnp.where(q[..., 0:1] < 0, -q, q)
    return normalize_quaternions(q)


def rpy_to_matrix(roll: Scalar, pitch: Scalar, yaw: Scalar) -> Array:
    """
    Build the rotation matrix for fixed-axis roll, pitch and yaw.

    Args:
        roll: rotation about x in radians
        pitch: rotation about y in radians
        yaw: rotation about z in radians

    Returns:
        (3, 3) rotation matrix Rz(yaw) @ Ry(pitch) @ Rx(roll)
    """
    cr, sr = jnp.cos(roll), jnp.sin(roll)
    cp, sp = jnp.cos(pitch), jnp.sin(pitch)
    cy, sy = jnp.cos(yaw), jnp.sin(yaw)

    return jnp.array([
        [cy * cp, cy * sp * sr - sy * cr, cy * sp * cr + sy * sr],
        [sy * cp, sy * sp * sr + cy * cr, sy * sp * cr - cy * sr],
        [-sp, cp * sr, cp * cr],
    ], dtype=jnp.float64)


def matrix_to_rpy(matrix: Array) -> Tuple[float, float, float]:
    """
    Extract roll, pitch and yaw from a rotation matrix.

    Returns the principal decomposition (pitch in [-pi/2, pi/2]). At gimbal
    lock yaw is reported as zero and the remaining rotation goes to roll.
    """
    return nested_matrix_to_rpy(jnp.asarray(matrix).tolist(), 1)


def nested_matrix_to_rpy(
    rot: Sequence[Sequence[float]], solution_number: int
) -> Tuple[float, float, float]:
    """
    Extract roll, pitch and yaw from a 3x3 matrix given as nested sequences.

    Away from gimbal lock two Euler decompositions describe the same rotation:
    solution 1 has pitch = -asin(r20) in [-pi/2, pi/2], solution 0 has
    pitch = pi - pitch1. At gimbal lock both coincide.

    Args:
        rot: 3x3 rotation matrix as nested lists (row major)
        solution_number: 1 for the principal solution, 0 for the alternate one

    Returns:
        (roll, pitch, yaw) in radians
    """
    if solution_number not in (0, 1):
        raise ValueError(f"solution_number must be 0 or 1, got {solution_number}")

    if len(rot) != 3 or any(len(row) != 3 for row in rot):
        raise ValueError("rot must be a 3x3 nested sequence")

    r20 = float(rot[2][0])
    if abs(r20) >= 1.0:
        yaw = 0.0
        if r20 < 0:
            pitch = math.pi / 2.0
            roll = math.atan2(rot[0][1], rot[0][2])
        else:
            pitch = -math.pi / 2.0
            roll = math.atan2(-rot[0][1], -rot[0][2])
        return roll, pitch, yaw

    pitch = -math.asin(r20)
    if solution_number == 0:
        pitch = math.pi - pitch

    cp = math.cos(pitch)
    roll = math.atan2(rot[2][1] / cp, rot[2][2] / cp)
    yaw = math.atan2(rot[1][0] / cp, rot[0][0] / cp)
    return roll, pitch, yaw


def rpy_to_quaternion(roll: Scalar, pitch: Scalar, yaw: Scalar) -> Array:
    """
    Convert roll, pitch and yaw to a quaternion.

    Returns:
        (4,) quaternion in (w, x, y, z) format
    """
    half_r, half_p, half_y = roll / 2.0, pitch / 2.0, yaw / 2.0
    cr, sr = jnp.cos(half_r), jnp.sin(half_r)
    cp, sp = jnp.cos(half_p), jnp.sin(half_p)
    cy, sy = jnp.cos(half_y), jnp.sin(half_y)

    return jnp.array([
        cr * cp * cy + sr * sp * sy,
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
    ], dtype=jnp.float64)


def quaternion_to_rpy(quaternion: Array) -> Tuple[float, float, float]:
    """Convert a (w, x, y, z) quaternion to roll, pitch and yaw."""
    return matrix_to_rpy(quaternion_to_matrix(quaternion))


def rpy_to_quaternion_msg(roll: float, pitch: float, yaw: float) -> Quaternion:
    w, x, y, z = (float(c) for c in rpy_to_quaternion(roll, pitch, yaw))
    return Quaternion(x=x, y=y, z=z, w=w)


def quaternion_msg_to_rpy(q: Quaternion) -> Tuple[float, float, float]:
    return quaternion_to_rpy(jnp.array([q.w, q.x, q.y, q.z], dtype=jnp.float64))


def quaternion_msg_to_matrix(q: Quaternion) -> Array:
    return quaternion_to_matrix(jnp.array([q.w, q.x, q.y, q.z], dtype=jnp.float64))
