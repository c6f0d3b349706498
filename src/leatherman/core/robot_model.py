"""RobotModel data structure for parsed robot descriptions.

This module defines the immutable representation of a robot description
(links, joints, limits and attached geometry) that the limit, mesh and chain
utilities query. Instances are produced by :mod:`leatherman.io.urdf_parser`.
"""

from typing import Optional, Tuple

from flax import struct


@struct.dataclass
class Origin:
    """Pose of a child frame relative to its parent, URDF style."""
    xyz: Tuple[float, float, float] = struct.field(pytree_node=False, default=(0.0, 0.0, 0.0))
    rpy: Tuple[float, float, float] = struct.field(pytree_node=False, default=(0.0, 0.0, 0.0))


@struct.dataclass
class Geometry:
    """Visual or collision geometry of a link.

    Attributes:
        kind: One of "mesh", "box", "sphere", "cylinder".
        origin: Geometry origin in the link frame.
        filename: Mesh resource path (meshes only).
        scale: Per-axis mesh scale (meshes only).
        size: Box extents (boxes only).
        radius: Sphere/cylinder radius.
        length: Cylinder length.
    """
    kind: str = struct.field(pytree_node=False)
    origin: Origin = struct.field(pytree_node=False, default=Origin())
    filename: str = struct.field(pytree_node=False, default="")
    scale: Tuple[float, float, float] = struct.field(pytree_node=False, default=(1.0, 1.0, 1.0))
    size: Tuple[float, float, float] = struct.field(pytree_node=False, default=(0.0, 0.0, 0.0))
    radius: float = struct.field(pytree_node=False, default=0.0)
    length: float = struct.field(pytree_node=False, default=0.0)


@struct.dataclass
class Link:
    name: str = struct.field(pytree_node=False)
    parent_joint: Optional[str] = struct.field(pytree_node=False, default=None)
    visual: Optional[Geometry] = struct.field(pytree_node=False, default=None)
    collision: Optional[Geometry] = struct.field(pytree_node=False, default=None)


@struct.dataclass
class Joint:
    """A joint of the robot description.

    Attributes:
        name: Joint name.
        type: URDF joint type ("revolute", "continuous", "prismatic", "fixed",
              "floating", "planar").
        parent: Parent link name.
        child: Child link name.
        origin: Joint origin relative to the parent link.
        axis: Joint axis in the joint frame.
        lower, upper: Hard position limits from the <limit> element.
        soft_lower, soft_upper: Soft limits from the <safety_controller>
              element, None when the joint has none.
    """
    name: str = struct.field(pytree_node=False)
    type: str = struct.field(pytree_node=False)
    parent: str = struct.field(pytree_node=False)
    child: str = struct.field(pytree_node=False)
    origin: Origin = struct.field(pytree_node=False, default=Origin())
    axis: Tuple[float, float, float] = struct.field(pytree_node=False, default=(1.0, 0.0, 0.0))
    lower: float = struct.field(pytree_node=False, default=0.0)
    upper: float = struct.field(pytree_node=False, default=0.0)
    soft_lower: Optional[float] = struct.field(pytree_node=False, default=None)
    soft_upper: Optional[float] = struct.field(pytree_node=False, default=None)


@struct.dataclass
class RobotModel:
    """Immutable representation of a robot description.

    Links and joints are kept in document order. All fields are static, so a
    model can be closed over by jitted functions without being traced.

    Attributes:
        name: Robot name.
        root_link: Name of the single link that is no joint's child.
        links: Tuple of all links.
        joints: Tuple of all joints, fixed ones included.
    """
    name: str = struct.field(pytree_node=False)
    root_link: str = struct.field(pytree_node=False)
    links: Tuple[Link, ...] = struct.field(pytree_node=False)
    joints: Tuple[Joint, ...] = struct.field(pytree_node=False)

    @property
    def link_names(self) -> Tuple[str, ...]:
        return tuple(link.name for link in self.links)

    @property
    def joint_names(self) -> Tuple[str, ...]:
        return tuple(joint.name for joint in self.joints)

    def get_link(self, name: str) -> Optional[Link]:
        for link in self.links:
            if link.name == name:
                return link
        return None

    def get_joint(self, name: str) -> Optional[Joint]:
        for joint in self.joints:
            if joint.name == name:
                return joint
        return None

    def get_parent_link(self, name: str) -> Optional[str]:
        """Name of the parent link of `name`, None for the root or unknown links."""
        link = self.get_link(name)
        if link is None or link.parent_joint is None:
            return None
        return self.get_joint(link.parent_joint).parent
