"""Geometric queries on points, segments and trajectory waypoints."""

import logging
import math
from typing import Iterator, List, Optional

import jax.numpy as jnp
from jax import Array

from .core.messages import JointTrajectoryPoint

logger = logging.getLogger(__name__)

SMALL_NUM = 1e-8


def distance_between_3d_line_segments(l1a, l1b, l2a, l2b) -> float:
    """Minimum Euclidean distance between segments [l1a, l1b] and [l2a, l2b].

    Solves for the closest points with parameters sc, tc in [0, 1], clamping to
    the segment ends. Parallel and zero-length segments fall back to an end
    point instead of dividing by a vanishing denominator.

    Args:
        l1a, l1b: End points of the first segment, shape (3,)
        l2a, l2b: End points of the second segment, shape (3,)

    Returns:
        Distance between the closest points of the two segments.
    """
    l1a, l1b = jnp.asarray(l1a, dtype=jnp.float64), jnp.asarray(l1b, dtype=jnp.float64)
    l2a, l2b = jnp.asarray(l2a, dtype=jnp.float64), jnp.asarray(l2b, dtype=jnp.float64)

    u = l1b - l1a
    v = l2b - l2a
    w = l1a - l2a

    a = float(jnp.dot(u, u))
    b = float(jnp.dot(u, v))
    c = float(jnp.dot(v, v))
    d = float(jnp.dot(u, w))
    e = float(jnp.dot(v, w))
    D = a * c - b * b

    sN, sD = D, D
    tN, tD = D, D

    if D < SMALL_NUM:
        # parallel (or degenerate): pin s to the start of the first segment
        sN, sD = 0.0, 1.0
        tN, tD = e, c
    else:
        sN = b * e - c * d
        tN = a * e - b * d
        if sN < 0.0:
            sN, tN, tD = 0.0, e, c
        elif sN > sD:
            sN, tN, tD = sD, e + b, c

    if tN < 0.0:
        tN = 0.0
        if -d < 0.0:
            sN = 0.0
        elif -d > a:
            sN = sD
        else:
            sN, sD = -d, a
    elif tN > tD:
        tN = tD
        if (-d + b) < 0.0:
            sN = 0.0
        elif (-d + b) > a:
            sN = sD
        else:
            sN, sD = -d + b, a

    sc = 0.0 if abs(sN) < SMALL_NUM or sD < SMALL_NUM else sN / sD
    tc = 0.0 if abs(tN) < SMALL_NUM or tD < SMALL_NUM else tN / tD

    dP = w + sc * u - tc * v
    return float(jnp.linalg.norm(dP))


def get_intermediate_points(a, b, d: float) -> Iterator[Array]:
    """Lazily yield evenly spaced points from a to b, both ends included.

    The segment is cut into ceil(|b - a| / d) equal intervals, so consecutive
    points are never more than d apart.
    """
    if d <= 0:
        raise ValueError(f"spacing d must be positive, got {d}")

    a = jnp.asarray(a, dtype=jnp.float64)
    b = jnp.asarray(b, dtype=jnp.float64)
    length = float(jnp.linalg.norm(b - a))
    n = int(math.ceil(length / d))

    if n == 0:
        yield a
        return

    for i in range(n + 1):
        yield a + (b - a) * (i / n)


def _lerp(start: List[float], end: List[float], fraction: float) -> List[float]:
    return [s + (e - s) * fraction for s, e in zip(start, end)]


def interpolate_trajectory_points(
    a: JointTrajectoryPoint, b: JointTrajectoryPoint, num_points: int
) -> Optional[List[JointTrajectoryPoint]]:
    """Interpolate num_points waypoints from a to b, both ends included.

    Positions, velocities, accelerations and time_from_start are interpolated
    component-wise. A velocity or acceleration block missing on either end is
    left empty in the result.

    Returns:
        The interpolated points, or None if the waypoints differ in dimension.
    """
    if num_points < 1:
        raise ValueError(f"num_points must be at least 1, got {num_points}")

    if len(a.positions) != len(b.positions):
        logger.error(
            "Waypoints have different numbers of positions (%d vs %d).",
            len(a.positions), len(b.positions))
        return None

    blocks = {}
    for block in ("velocities", "accelerations"):
        start, end = getattr(a, block), getattr(b, block)
        if start and end:
            if len(start) != len(end):
                logger.error(
                    "Waypoints have different numbers of %s (%d vs %d).",
                    block, len(start), len(end))
                return None
            blocks[block] = (list(start), list(end))

    points = []
    for i in range(num_points):
        fraction = i / (num_points - 1) if num_points > 1 else 0.0
        point = JointTrajectoryPoint(
            positions=_lerp(a.positions, b.positions, fraction),
            time_from_start=a.time_from_start + (b.time_from_start - a.time_from_start) * fraction,
        )
        for block, (start, end) in blocks.items():
            setattr(point, block, _lerp(start, end, fraction))
        points.append(point)

    return points
