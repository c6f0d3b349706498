"""Mesh components, vertex scaling and meshes referenced by resource paths."""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np
import trimesh

from .core.mesh import Mesh
from .core.messages import Header, Point, Pose, PoseStamped
from .io.collada import read_unit_scale
from .io.stl import create_mesh_from_binary_stl
from .io.urdf_parser import parse_urdf
from .resources import PackageRegistry, resolve_resource
from .transforms.rotation import rpy_to_quaternion_msg

logger = logging.getLogger(__name__)


def get_mesh_components(mesh: Mesh) -> Tuple[List[int], List[np.ndarray]]:
    """Flatten a mesh into a triangle index list and a vertex list.

    Returns:
        (triangles, vertices) where triangles holds three consecutive vertex
        indices per triangle.
    """
    triangles = [int(i) for i in np.asarray(mesh.triangles).reshape(-1)]
    vertices = [np.array(v, dtype=np.float64) for v in np.asarray(mesh.vertices)]
    return triangles, vertices


def scale_vertices(vertices, sx: float, sy: float, sz: float) -> np.ndarray:
    """Scale 3-vectors independently per axis; returns an (N, 3) array."""
    vertices = np.asarray(vertices, dtype=np.float64).reshape(-1, 3)
    return vertices * np.array([sx, sy, sz])


def scale_points(points: Sequence[Point], sx: float, sy: float, sz: float) -> List[Point]:
    return [Point(x=p.x * sx, y=p.y * sy, z=p.z * sz) for p in points]


def get_collada_file_scale(resource: str, registry: Optional[PackageRegistry] = None) -> float:
    """Unit scale declared by the collada file behind `resource` (1.0 by default)."""
    path = resolve_resource(resource, registry)
    if path is None:
        return 1.0
    return read_unit_scale(path)


def _load_mesh(path: str) -> Optional[Mesh]:
    if path.lower().endswith(".stl"):
        mesh = create_mesh_from_binary_stl(path)
        if mesh is not None:
            return mesh
        logger.debug("'%s' is not a binary STL; trying the generic loader.", path)

    try:
        loaded = trimesh.load(path, force="mesh")
    except Exception as e:
        logger.error("Failed to load mesh '%s': %s", path, e)
        return None

    if len(loaded.faces) == 0:
        logger.error("Mesh '%s' has no triangles.", path)
        return None
    return Mesh.from_arrays(loaded.vertices, loaded.faces)


def get_mesh_components_from_resource(
    resource: str, scale=(1.0, 1.0, 1.0), registry: Optional[PackageRegistry] = None
) -> Optional[Tuple[List[int], List[np.ndarray]]]:
    """Load the mesh behind a resource reference and return its components.

    Collada files are additionally scaled by their declared unit.

    Returns:
        (triangles, vertices), or None if the resource cannot be resolved or
        loaded.
    """
    path = resolve_resource(resource, registry)
    if path is None:
        logger.error("Failed to resolve mesh resource '%s'.", resource)
        return None

    mesh = _load_mesh(path)
    if mesh is None:
        return None

    sx, sy, sz = (float(s) for s in scale)
    if path.lower().endswith(".dae"):
        unit = read_unit_scale(path)
        sx, sy, sz = sx * unit, sy * unit, sz * unit

    return get_mesh_components(mesh.scaled(sx, sy, sz))


def get_link_mesh(urdf: str, link_name: str, collision: bool) -> Optional[Tuple[str, PoseStamped]]:
    """Find the mesh resource attached to a link of a URDF document.

    Args:
        urdf: The robot description as an XML string.
        link_name: Link to look up.
        collision: Use the collision geometry instead of the visual one.

    Returns:
        (mesh_resource, pose) with the geometry origin stamped in the link
        frame, or None when the link has no such mesh.
    """
    model = parse_urdf(urdf)
    link = model.get_link(link_name)
    if link is None:
        logger.error("Failed to find link '%s' in the URDF.", link_name)
        return None

    geometry = link.collision if collision else link.visual
    kind = "collision" if collision else "visual"
    if geometry is None:
        logger.error("Link '%s' has no %s geometry.", link_name, kind)
        return None
    if geometry.kind != "mesh":
        logger.error("The %s geometry of link '%s' is a %s, not a mesh.", kind, link_name, geometry.kind)
        return None

    x, y, z = geometry.origin.xyz
    pose = PoseStamped(
        header=Header(frame_id=link_name),
        pose=Pose(position=Point(x=x, y=y, z=z),
                  orientation=rpy_to_quaternion_msg(*geometry.origin.rpy)),
    )
    return geometry.filename, pose
