"""Message value types exchanged with robot middleware.

Field names follow the middleware message schema so that values can be copied
field-by-field into real messages by the calling code. These are plain mutable
dataclasses: the utilities build fresh instances and, where documented
(joint states), mutate caller-owned ones in place.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Header:
    frame_id: str = ""
    stamp: float = 0.0


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Quaternion:
    """Unit quaternion in (x, y, z, w) field order."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0


@dataclass
class Pose:
    position: Point = field(default_factory=Point)
    orientation: Quaternion = field(default_factory=Quaternion)


@dataclass
class PoseStamped:
    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


@dataclass
class Transform:
    translation: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)


@dataclass
class ColorRGBA:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0


@dataclass
class JointState:
    """Parallel arrays keyed by joint name."""
    header: Header = field(default_factory=Header)
    name: List[str] = field(default_factory=list)
    position: List[float] = field(default_factory=list)
    velocity: List[float] = field(default_factory=list)
    effort: List[float] = field(default_factory=list)


@dataclass
class MultiDOFJointState:
    header: Header = field(default_factory=Header)
    joint_names: List[str] = field(default_factory=list)
    transforms: List[Transform] = field(default_factory=list)


@dataclass
class JointTrajectoryPoint:
    positions: List[float] = field(default_factory=list)
    velocities: List[float] = field(default_factory=list)
    accelerations: List[float] = field(default_factory=list)
    time_from_start: float = 0.0


@dataclass
class JointTrajectory:
    header: Header = field(default_factory=Header)
    joint_names: List[str] = field(default_factory=list)
    points: List[JointTrajectoryPoint] = field(default_factory=list)


@dataclass
class Marker:
    # marker types
    ARROW = 0
    CUBE = 1
    SPHERE = 2
    CYLINDER = 3
    LINE_STRIP = 4
    LINE_LIST = 5
    CUBE_LIST = 6
    SPHERE_LIST = 7
    POINTS = 8
    TEXT_VIEW_FACING = 9
    MESH_RESOURCE = 10
    TRIANGLE_LIST = 11

    # actions
    ADD = 0
    MODIFY = 0
    DELETE = 2
    DELETEALL = 3

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: int = 0
    action: int = 0
    pose: Pose = field(default_factory=Pose)
    scale: Vector3 = field(default_factory=Vector3)
    color: ColorRGBA = field(default_factory=ColorRGBA)
    lifetime: float = 0.0
    points: List[Point] = field(default_factory=list)
    colors: List[ColorRGBA] = field(default_factory=list)
    text: str = ""
    mesh_resource: str = ""
    mesh_use_embedded_materials: bool = False


@dataclass
class MarkerArray:
    markers: List[Marker] = field(default_factory=list)


@dataclass
class SolidPrimitive:
    BOX = 1
    SPHERE = 2
    CYLINDER = 3
    CONE = 4

    # dimension indices
    BOX_X = 0
    BOX_Y = 1
    BOX_Z = 2
    SPHERE_RADIUS = 0
    CYLINDER_HEIGHT = 0
    CYLINDER_RADIUS = 1
    CONE_HEIGHT = 0
    CONE_RADIUS = 1

    type: int = 0
    dimensions: List[float] = field(default_factory=list)


@dataclass
class CollisionObject:
    ADD = 0
    REMOVE = 1

    header: Header = field(default_factory=Header)
    id: str = ""
    primitives: List[SolidPrimitive] = field(default_factory=list)
    primitive_poses: List[Pose] = field(default_factory=list)
    operation: int = 0
