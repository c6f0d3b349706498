"""Name-keyed lookups over joint-state messages."""

import logging
from typing import List, Optional, Sequence, Tuple

from .core.messages import JointState, MultiDOFJointState, Point, Pose, Quaternion

logger = logging.getLogger(__name__)


def is_valid_joint_state(state: JointState) -> bool:
    """Check that the parallel arrays of a joint state line up."""
    n = len(state.name)
    if len(state.position) != n:
        return False
    if state.velocity and len(state.velocity) != n:
        return False
    if state.effort and len(state.effort) != n:
        return False
    return True


def find_joint_position(state: JointState, name: str) -> Optional[float]:
    for joint_name, position in zip(state.name, state.position):
        if joint_name == name:
            return position
    return None


def get_joint_positions(state: JointState, names: Sequence[str]) -> Optional[List[float]]:
    """Extract the positions of `names`, in request order.

    Returns:
        The positions, or None if any requested joint is absent.
    """
    positions, missing = get_joint_positions_with_missing(state, names)
    if missing:
        for name in missing:
            logger.warning("Failed to find '%s' in the joint state.", name)
        return None
    return positions


def get_joint_positions_with_missing(
    state: JointState, names: Sequence[str]
) -> Tuple[List[float], List[str]]:
    """Extract the positions of `names` and report the ones that are absent.

    Returns:
        (positions, missing): positions of the found joints and the names of
        the absent ones, both in request order.
    """
    positions = []
    missing = []
    for name in names:
        position = find_joint_position(state, name)
        if position is None:
            missing.append(name)
        else:
            positions.append(position)
    return positions, missing


def find_and_replace_joint_position(name: str, position: float, state: JointState) -> None:
    """Set the position of `name` in place, appending the joint if absent."""
    for i, joint_name in enumerate(state.name):
        if joint_name == name:
            state.position[i] = position
            return
    state.name.append(name)
    state.position.append(position)


def get_pose(state: MultiDOFJointState, frame_id: str, child_frame_id: str) -> Optional[Pose]:
    """Pose of `child_frame_id` relative to `frame_id` in a multi-DOF joint state."""
    if state.header.frame_id != frame_id:
        logger.error("Multi-DOF joint state is expressed in '%s', not '%s'.",
                     state.header.frame_id, frame_id)
        return None

    for joint_name, transform in zip(state.joint_names, state.transforms):
        if joint_name == child_frame_id:
            t, r = transform.translation, transform.rotation
            return Pose(
                position=Point(x=t.x, y=t.y, z=t.z),
                orientation=Quaternion(x=r.x, y=r.y, z=r.z, w=r.w),
            )

    logger.error("Failed to find '%s' in the multi-DOF joint state.", child_frame_id)
    return None
