"""Joint limits between two links of a robot description."""

import logging
import math
from typing import List, Optional

from flax import struct

from .core import RobotModel

logger = logging.getLogger(__name__)


@struct.dataclass
class JointLimits:
    """Position limits of one joint; continuous joints span the real line."""
    name: str = struct.field(pytree_node=False)
    min_position: float = struct.field(pytree_node=False)
    max_position: float = struct.field(pytree_node=False)
    continuous: bool = struct.field(pytree_node=False, default=False)


def get_joint_limits(robot: RobotModel, root_name: str, tip_name: str) -> Optional[List[JointLimits]]:
    """Limits of the movable joints between `root_name` and `tip_name`.

    Joints are walked from the tip up to the root and returned in root-to-tip
    order. Soft limits from a safety controller take precedence over the hard
    limits.

    Returns:
        The limits, or None if the tip is unknown or the root is not one of its
        ancestors.
    """
    if robot.get_link(root_name) is None:
        logger.error("Failed to find root link '%s' in the robot description.", root_name)
        return None

    link = robot.get_link(tip_name)
    if link is None:
        logger.error("Failed to find tip link '%s' in the robot description.", tip_name)
        return None

    limits = []
    while link.name != root_name:
        if link.parent_joint is None:
            logger.error("Link '%s' is not an ancestor of '%s'.", root_name, tip_name)
            return None

        joint = robot.get_joint(link.parent_joint)
        if joint.type == "continuous":
            limits.append(JointLimits(joint.name, -math.inf, math.inf, True))
        elif joint.type != "fixed":
            if joint.soft_lower is not None:
                lower, upper = joint.soft_lower, joint.soft_upper
            else:
                lower, upper = joint.lower, joint.upper
            limits.append(JointLimits(joint.name, lower, upper, False))

        link = robot.get_link(joint.parent)

    limits.reverse()
    return limits


def get_joint_limit(
    robot: RobotModel, root_name: str, tip_name: str, joint_name: str
) -> Optional[JointLimits]:
    limits = get_joint_limits(robot, root_name, tip_name)
    if limits is None:
        return None

    for joint_limits in limits:
        if joint_limits.name == joint_name:
            return joint_limits

    logger.error("Joint '%s' is not a movable joint between '%s' and '%s'.",
                 joint_name, root_name, tip_name)
    return None
