"""Visualization marker builders.

Every builder is stateless: it stamps the caller's (namespace, id) pair, the
ADD action and the configured lifetime onto a freshly built Marker or
MarkerArray. Colors are given either as a hue (converted with the configured
saturation and value) or as an [r, g, b(, a)] sequence.
"""

import logging
import numbers
from typing import Optional, Sequence, Union

from .color import hue_to_color
from .config import DEFAULT_VIZ_CONFIG, VizConfig
from .core.messages import (
    CollisionObject,
    ColorRGBA,
    Header,
    Marker,
    MarkerArray,
    Point,
    Pose,
    PoseStamped,
    Quaternion,
    SolidPrimitive,
    Vector3,
)
from .transforms.rotation import rpy_to_quaternion_msg

logger = logging.getLogger(__name__)

Color = Union[int, float, Sequence[float]]

PSYCHEDELIC_COLORS = (
    ColorRGBA(r=1.0, g=0.0, b=0.0, a=1.0),
    ColorRGBA(r=0.0, g=1.0, b=0.0, a=1.0),
    ColorRGBA(r=0.0, g=0.0, b=1.0, a=1.0),
)


def _config(config: Optional[VizConfig]) -> VizConfig:
    return config or DEFAULT_VIZ_CONFIG


def _new_marker(marker_type: int, frame_id: str, ns: str, id: int, config: VizConfig) -> Marker:
    return Marker(
        header=Header(frame_id=frame_id),
        ns=ns,
        id=id,
        type=marker_type,
        action=Marker.ADD,
        lifetime=config.lifetime,
    )


def _to_color(color: Color, config: VizConfig) -> ColorRGBA:
    if isinstance(color, numbers.Real):
        return hue_to_color(color, config)
    if len(color) == 3:
        return ColorRGBA(r=color[0], g=color[1], b=color[2], a=config.alpha)
    if len(color) == 4:
        return ColorRGBA(r=color[0], g=color[1], b=color[2], a=color[3])
    raise ValueError(f"color must be a hue or an [r, g, b(, a)] sequence, got {list(color)}")


def _to_point(p) -> Point:
    if isinstance(p, Point):
        return Point(x=p.x, y=p.y, z=p.z)
    return Point(x=float(p[0]), y=float(p[1]), z=float(p[2]))


def _copy_pose(pose: Pose) -> Pose:
    o = pose.orientation
    return Pose(position=_to_point(pose.position),
                orientation=Quaternion(x=o.x, y=o.y, z=o.z, w=o.w))


def _pose_from_list(values: Sequence[float]) -> Pose:
    """[x, y, z] or [x, y, z, roll, pitch, yaw] to a Pose."""
    pose = Pose(position=_to_point(values))
    if len(values) >= 6:
        pose.orientation = rpy_to_quaternion_msg(values[3], values[4], values[5])
    return pose


# Poses

def get_pose_marker_array(
    pose: Pose, frame_id: str, ns: str, id: int = 0, text: bool = False,
    *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """Arrow along the pose's x axis (id), a sphere at its origin (id + 1)
    and, with `text`, a label above it (id + 2)."""
    config = _config(config)
    markers = MarkerArray()

    arrow = _new_marker(Marker.ARROW, frame_id, ns, id, config)
    arrow.pose = _copy_pose(pose)
    arrow.scale = Vector3(*config.pose_arrow_scale)
    arrow.color = hue_to_color(0, config)
    markers.markers.append(arrow)

    sphere = _new_marker(Marker.SPHERE, frame_id, ns, id + 1, config)
    sphere.pose = _copy_pose(pose)
    d = config.pose_sphere_diameter
    sphere.scale = Vector3(d, d, d)
    sphere.color = hue_to_color(240, config)
    markers.markers.append(sphere)

    if text:
        label = _new_marker(Marker.TEXT_VIEW_FACING, frame_id, ns + "-text", id + 2, config)
        label.pose = _copy_pose(pose)
        label.pose.position.z += config.pose_text_offset
        label.scale = Vector3(0.0, 0.0, config.pose_text_size)
        label.color = ColorRGBA(r=1.0, g=1.0, b=1.0, a=config.alpha)
        label.text = ns + "-" + str(id)
        markers.markers.append(label)

    return markers


def get_pose_stamped_marker_array(
    pose: PoseStamped, ns: str, id: int = 0, text: bool = False,
    *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    return get_pose_marker_array(pose.pose, pose.header.frame_id, ns, id, text, config=config)


def get_poses_marker_array(
    poses: Sequence[Union[Pose, Sequence[float]]], frame_id: str, ns: str, id: int = 0,
    text: bool = False, *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """Pose markers for many poses, given as Pose messages or
    [x, y, z, roll, pitch, yaw] lists; ids increase without gaps."""
    markers = MarkerArray()
    for pose in poses:
        if not isinstance(pose, Pose):
            pose = _pose_from_list(pose)
        pose_markers = get_pose_marker_array(pose, frame_id, ns, id, text, config=config)
        markers.markers.extend(pose_markers.markers)
        id += len(pose_markers.markers)
    return markers


# Spheres

def get_sphere_marker(
    x: float, y: float, z: float, radius: float, hue: int, frame_id: str, ns: str,
    id: int = 0, *, config: Optional[VizConfig] = None,
) -> Marker:
    config = _config(config)
    marker = _new_marker(Marker.SPHERE, frame_id, ns, id, config)
    marker.pose.position = Point(x=x, y=y, z=z)
    marker.scale = Vector3(radius * 2, radius * 2, radius * 2)
    marker.color = hue_to_color(hue, config)
    return marker


def get_spheres_marker(
    points: Sequence, radius: float, hue: int, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    """One SPHERE_LIST marker; points as Point messages or [x, y, z, ...] lists."""
    config = _config(config)
    marker = _new_marker(Marker.SPHERE_LIST, frame_id, ns, id, config)
    marker.scale = Vector3(radius * 2, radius * 2, radius * 2)
    marker.color = hue_to_color(hue, config)
    marker.points = [_to_point(p) for p in points]
    return marker


def get_spheres_marker_array(
    poses: Sequence[Sequence[float]], radii: Sequence[float], hue: int, frame_id: str,
    ns: str, id: int = 0, *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """One SPHERE marker per [x, y, z] pose with the matching radius."""
    if len(poses) != len(radii):
        raise ValueError(f"got {len(poses)} poses but {len(radii)} radii")
    markers = MarkerArray()
    for i, (pose, radius) in enumerate(zip(poses, radii)):
        markers.markers.append(
            get_sphere_marker(pose[0], pose[1], pose[2], radius, hue, frame_id, ns, id + i, config=config))
    return markers


def get_spheres_marker_array_by_hue(
    poses: Sequence[Sequence[float]], hues: Sequence[int], frame_id: str, ns: str,
    id: int = 0, *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """One SPHERE marker per [x, y, z, radius] pose with the matching hue."""
    if len(poses) != len(hues):
        raise ValueError(f"got {len(poses)} poses but {len(hues)} hues")
    markers = MarkerArray()
    for i, (pose, hue) in enumerate(zip(poses, hues)):
        if len(pose) < 4:
            raise ValueError(f"pose {i} has no radius: {list(pose)}")
        markers.markers.append(
            get_sphere_marker(pose[0], pose[1], pose[2], pose[3], hue, frame_id, ns, id + i, config=config))
    return markers


# Lines and text

def get_line_marker(
    points: Sequence, thickness: float, hue: int, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    config = _config(config)
    marker = _new_marker(Marker.LINE_STRIP, frame_id, ns, id, config)
    marker.scale = Vector3(thickness, 0.0, 0.0)
    marker.color = hue_to_color(hue, config)
    marker.points = [_to_point(p) for p in points]
    return marker


def get_text_marker(
    pose: Pose, text: str, size: float, color: Color, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    config = _config(config)
    marker = _new_marker(Marker.TEXT_VIEW_FACING, frame_id, ns, id, config)
    marker.pose = _copy_pose(pose)
    marker.scale = Vector3(size, size, size)
    marker.color = _to_color(color, config)
    marker.text = text
    return marker


# Cubes

def get_cube_marker(
    pose: PoseStamped, dim: Sequence[float], hue: int, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    return get_cube_marker_from_pose(
        pose.pose, dim, hue, pose.header.frame_id, ns, id, config=config)


def get_cube_marker_from_list(
    cube: Sequence[float], color: Color, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    """Axis-aligned cube from [x, y, z, dx, dy, dz]."""
    if len(cube) < 6:
        raise ValueError(f"cube must be [x, y, z, dx, dy, dz], got {list(cube)}")
    return get_cube_marker_from_pose(
        Pose(position=_to_point(cube)), cube[3:6], color, frame_id, ns, id, config=config)


def get_cube_marker_from_pose(
    pose: Pose, dim: Sequence[float], color: Color, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    if len(dim) < 3:
        raise ValueError(f"dim must hold three extents, got {list(dim)}")
    config = _config(config)
    marker = _new_marker(Marker.CUBE, frame_id, ns, id, config)
    marker.pose = _copy_pose(pose)
    marker.scale = Vector3(dim[0], dim[1], dim[2])
    marker.color = _to_color(color, config)
    return marker


def get_cubes_marker(
    poses: Sequence, size: float, color: Color, frame_id: str, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    """One CUBE_LIST marker of equally sized cubes."""
    config = _config(config)
    marker = _new_marker(Marker.CUBE_LIST, frame_id, ns, id, config)
    marker.scale = Vector3(size, size, size)
    marker.color = _to_color(color, config)
    marker.points = [_to_point(p) for p in poses]
    return marker


def get_cubes_marker_array(
    poses: Sequence, size: float, colors: Sequence[Color], frame_id: str, ns: str,
    id: int = 0, *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """One CUBE marker per position, each with its own color."""
    if len(poses) != len(colors):
        raise ValueError(f"got {len(poses)} poses but {len(colors)} colors")
    markers = MarkerArray()
    for i, (pose, color) in enumerate(zip(poses, colors)):
        markers.markers.append(get_cube_marker_from_pose(
            Pose(position=_to_point(pose)), (size, size, size), color, frame_id, ns, id + i,
            config=config))
    return markers


# Meshes

def get_mesh_resource_marker(
    pose: PoseStamped, mesh_resource: str, hue: int, ns: str, id: int = 0,
    *, config: Optional[VizConfig] = None,
) -> Marker:
    config = _config(config)
    marker = _new_marker(Marker.MESH_RESOURCE, pose.header.frame_id, ns, id, config)
    marker.pose = _copy_pose(pose.pose)
    marker.scale = Vector3(1.0, 1.0, 1.0)
    marker.color = hue_to_color(hue, config)
    marker.mesh_resource = mesh_resource
    return marker


def get_mesh_marker(
    pose: PoseStamped, vertices: Sequence, triangles: Sequence[int], hue: int,
    psychedelic: bool, ns: str, id: int = 0, *, config: Optional[VizConfig] = None,
) -> Marker:
    """TRIANGLE_LIST marker from a vertex list and a flat triangle index list.

    With `psychedelic` the corners of every triangle are colored red, green
    and blue instead of using the hue.
    """
    if len(triangles) % 3 != 0:
        raise ValueError(f"triangle index count {len(triangles)} is not a multiple of 3")
    config = _config(config)
    marker = _new_marker(Marker.TRIANGLE_LIST, pose.header.frame_id, ns, id, config)
    marker.pose = _copy_pose(pose.pose)
    marker.scale = Vector3(1.0, 1.0, 1.0)
    marker.color = hue_to_color(hue, config)
    marker.points = [_to_point(vertices[i]) for i in triangles]
    if psychedelic:
        marker.colors = [
            ColorRGBA(**vars(PSYCHEDELIC_COLORS[i % 3])) for i in range(len(marker.points))
        ]
    return marker


# Collision objects

def get_shapes_marker_array(
    shapes: Sequence[SolidPrimitive], poses: Sequence[Pose], colors: Sequence[Color],
    frame_id: str, ns: str, id: int, *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """Markers for boxes, spheres and cylinders; other primitives are skipped."""
    if not (len(shapes) == len(poses) == len(colors)):
        raise ValueError(
            f"got {len(shapes)} shapes, {len(poses)} poses and {len(colors)} colors")
    config = _config(config)
    markers = MarkerArray()
    for shape, pose, color in zip(shapes, poses, colors):
        d = shape.dimensions
        if shape.type == SolidPrimitive.BOX:
            marker = _new_marker(Marker.CUBE, frame_id, ns, id, config)
            marker.scale = Vector3(d[SolidPrimitive.BOX_X], d[SolidPrimitive.BOX_Y], d[SolidPrimitive.BOX_Z])
        elif shape.type == SolidPrimitive.SPHERE:
            marker = _new_marker(Marker.SPHERE, frame_id, ns, id, config)
            diameter = d[SolidPrimitive.SPHERE_RADIUS] * 2
            marker.scale = Vector3(diameter, diameter, diameter)
        elif shape.type == SolidPrimitive.CYLINDER:
            marker = _new_marker(Marker.CYLINDER, frame_id, ns, id, config)
            diameter = d[SolidPrimitive.CYLINDER_RADIUS] * 2
            marker.scale = Vector3(diameter, diameter, d[SolidPrimitive.CYLINDER_HEIGHT])
        else:
            logger.warning("Unsupported primitive type %d in '%s'; skipping it.", shape.type, ns)
            continue

        marker.pose = _copy_pose(pose)
        marker.color = _to_color(color, config)
        markers.markers.append(marker)
        id += 1
    return markers


def get_collision_object_marker_array(
    obj: CollisionObject, hue: Sequence[float], ns: str, id: int,
    *, config: Optional[VizConfig] = None,
) -> MarkerArray:
    """Markers for the primitives of a collision object.

    `hue` is a single hue applied to every primitive, or one hue per primitive.
    """
    if len(hue) == 1:
        hues = list(hue) * len(obj.primitives)
    elif len(hue) == len(obj.primitives):
        hues = list(hue)
    else:
        raise ValueError(f"got {len(hue)} hues for {len(obj.primitives)} primitives")
    return get_shapes_marker_array(
        obj.primitives, obj.primitive_poses, hues, obj.header.frame_id, ns, id, config=config)


# Removal

def get_remove_marker_array(ns: str, max_id: int) -> MarkerArray:
    """DELETE markers for ids [0, max_id) in one namespace."""
    return MarkerArray(markers=[
        Marker(ns=ns, id=i, action=Marker.DELETE) for i in range(max_id)
    ])
