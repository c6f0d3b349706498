"""URDF parser for loading robot descriptions into RobotModel structures.

This module provides functionality to parse URDF files or strings and convert
them into immutable RobotModel values that the limit, chain and mesh
utilities query.
"""

import logging
from typing import Optional, Tuple

from lxml import etree

from leatherman.core.robot_model import Geometry, Joint, Link, Origin, RobotModel

logger = logging.getLogger(__name__)


def load_urdf(urdf_path: str) -> RobotModel:
    """Load a URDF file and convert it to a RobotModel.

    Args:
        urdf_path: Path to the URDF file to load.

    Returns:
        RobotModel: The parsed robot description.
    """
    tree = etree.parse(urdf_path)
    return _model_from_element(tree.getroot())


def parse_urdf(urdf: str) -> RobotModel:
    """Parse a URDF document held in a string (e.g. a robot_description parameter)."""
    if isinstance(urdf, str):
        urdf = urdf.encode("utf-8")
    root = etree.fromstring(urdf)
    return _model_from_element(root)


def _model_from_element(root) -> RobotModel:
    if root.tag != "robot":
        raise ValueError(f"Expected a <robot> root element, found <{root.tag}>")

    # First pass: joints and the parent-child relationships they define
    joints = []
    parent_joint_of = {}
    for joint_elem in root.findall("joint"):
        joint = _parse_joint(joint_elem)
        parent_joint_of[joint.child] = joint.name
        joints.append(joint)

    # Second pass: links with their geometry
    links = []
    for link_elem in root.findall("link"):
        name = link_elem.get("name")
        if not name:
            raise ValueError("Found a <link> without a name")
        links.append(Link(
            name=name,
            parent_joint=parent_joint_of.get(name),
            visual=_parse_geometry(link_elem.find("visual")),
            collision=_parse_geometry(link_elem.find("collision")),
        ))

    # Find root link (not a child of any joint)
    root_links = [link.name for link in links if link.parent_joint is None]
    if len(root_links) != 1:
        raise ValueError(f"Expected exactly one root link, found: {root_links}")

    logger.debug("Parsed robot '%s' with %d links and %d joints",
                 root.get("name", ""), len(links), len(joints))

    return RobotModel(
        name=root.get("name", ""),
        root_link=root_links[0],
        links=tuple(links),
        joints=tuple(joints),
    )


def _parse_joint(joint_elem) -> Joint:
    name = joint_elem.get("name")
    if not name:
        raise ValueError("Found a <joint> without a name")

    parent_elem = joint_elem.find("parent")
    child_elem = joint_elem.find("child")
    if parent_elem is None or child_elem is None:
        raise ValueError(f"Joint '{name}' is missing its parent or child link")

    lower, upper = 0.0, 0.0
    limit_elem = joint_elem.find("limit")
    if limit_elem is not None:
        lower = float(limit_elem.get("lower", "0"))
        upper = float(limit_elem.get("upper", "0"))

    soft_lower, soft_upper = None, None
    safety_elem = joint_elem.find("safety_controller")
    if safety_elem is not None:
        soft_lower = float(safety_elem.get("soft_lower_limit", "0"))
        soft_upper = float(safety_elem.get("soft_upper_limit", "0"))

    axis = (1.0, 0.0, 0.0)
    axis_elem = joint_elem.find("axis")
    if axis_elem is not None:
        axis = _parse_triple(axis_elem.get("xyz"), axis)

    return Joint(
        name=name,
        type=joint_elem.get("type", "fixed"),
        parent=parent_elem.get("link"),
        child=child_elem.get("link"),
        origin=_parse_origin(joint_elem.find("origin")),
        axis=axis,
        lower=lower,
        upper=upper,
        soft_lower=soft_lower,
        soft_upper=soft_upper,
    )


def _parse_geometry(elem) -> Optional[Geometry]:
    """Parse a <visual> or <collision> element."""
    if elem is None:
        return None
    geometry_elem = elem.find("geometry")
    shapes = [] if geometry_elem is None else [c for c in geometry_elem if isinstance(c.tag, str)]
    if not shapes:
        return None

    origin = _parse_origin(elem.find("origin"))
    shape = shapes[0]
    if shape.tag == "mesh":
        return Geometry(
            kind="mesh",
            origin=origin,
            filename=shape.get("filename", ""),
            scale=_parse_triple(shape.get("scale"), (1.0, 1.0, 1.0)),
        )
    if shape.tag == "box":
        return Geometry(kind="box", origin=origin,
                        size=_parse_triple(shape.get("size"), (0.0, 0.0, 0.0)))
    if shape.tag == "sphere":
        return Geometry(kind="sphere", origin=origin,
                        radius=float(shape.get("radius", "0")))
    if shape.tag == "cylinder":
        return Geometry(kind="cylinder", origin=origin,
                        radius=float(shape.get("radius", "0")),
                        length=float(shape.get("length", "0")))

    logger.warning("Unsupported geometry <%s>; ignoring it.", shape.tag)
    return None


def _parse_origin(origin_elem) -> Origin:
    if origin_elem is None:
        return Origin()
    return Origin(
        xyz=_parse_triple(origin_elem.get("xyz"), (0.0, 0.0, 0.0)),
        rpy=_parse_triple(origin_elem.get("rpy"), (0.0, 0.0, 0.0)),
    )


def _parse_triple(text: Optional[str], default: Tuple[float, float, float]) -> Tuple[float, float, float]:
    if text is None:
        return default
    values = [float(x) for x in text.split()]
    if len(values) != 3:
        raise ValueError(f"Expected three values, got '{text}'")
    return tuple(values)
