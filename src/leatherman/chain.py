"""Kinematic chain and tree structures with name-based lookups.

A tree holds one segment per link of a robot description; each segment carries
the joint that connects it to its parent. A chain is the ordered run of
segments from just below a root segment down to a tip segment.
"""

import logging
from typing import Optional, Sequence, Tuple

from flax import struct

from .core import RobotModel

logger = logging.getLogger(__name__)

FIXED = "fixed"


@struct.dataclass
class Segment:
    """A rigid body and the joint attaching it to its parent.

    Attributes:
        name: Segment (link) name.
        joint_name: Name of the parent joint, "" for the root segment.
        joint_type: URDF joint type; "fixed" counts as no joint.
        parent: Parent segment name, None for the root segment.
    """
    name: str = struct.field(pytree_node=False)
    joint_name: str = struct.field(pytree_node=False, default="")
    joint_type: str = struct.field(pytree_node=False, default=FIXED)
    parent: Optional[str] = struct.field(pytree_node=False, default=None)

    @property
    def has_joint(self) -> bool:
        return bool(self.joint_name) and self.joint_type != FIXED


@struct.dataclass
class Chain:
    segments: Tuple[Segment, ...] = struct.field(pytree_node=False, default=())

    @property
    def num_joints(self) -> int:
        return sum(1 for s in self.segments if s.has_joint)

    @property
    def segment_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.segments)


@struct.dataclass
class Tree:
    root: str = struct.field(pytree_node=False)
    segments: Tuple[Segment, ...] = struct.field(pytree_node=False)

    def get_segment(self, name: str) -> Optional[Segment]:
        for segment in self.segments:
            if segment.name == name:
                return segment
        return None

    def get_chain(self, root: str, tip: str) -> Optional[Chain]:
        """Chain from `root` (exclusive) down to `tip` (inclusive).

        Returns None when either segment is unknown or `tip` does not descend
        from `root`.
        """
        if self.get_segment(root) is None:
            return None

        path = []
        segment = self.get_segment(tip)
        while segment is not None and segment.name != root:
            path.append(segment)
            segment = self.get_segment(segment.parent) if segment.parent else None

        if segment is None:
            return None
        return Chain(segments=tuple(reversed(path)))


def tree_from_model(robot: RobotModel) -> Tree:
    """Build the kinematic tree of a robot description, parents before children."""
    segments = []
    queue = [robot.root_link]
    while queue:
        name = queue.pop(0)
        link = robot.get_link(name)
        if link.parent_joint is None:
            segments.append(Segment(name=name))
        else:
            joint = robot.get_joint(link.parent_joint)
            segments.append(Segment(name=name, joint_name=joint.name,
                                    joint_type=joint.type, parent=joint.parent))
        queue.extend(j.child for j in robot.joints if j.parent == name)

    return Tree(root=robot.root_link, segments=tuple(segments))


def get_joint_index(chain: Chain, name: str) -> Optional[int]:
    """Index of joint `name` among the movable joints of the chain."""
    index = 0
    for segment in chain.segments:
        if not segment.has_joint:
            continue
        if segment.joint_name == name:
            return index
        index += 1

    logger.error("Failed to find joint '%s' in the chain.", name)
    return None


def get_segment_index(chain: Chain, name: str) -> Optional[int]:
    for i, segment in enumerate(chain.segments):
        if segment.name == name:
            return i

    logger.debug("Failed to find segment '%s' in the chain.", name)
    return None


def get_segment_of_joint(tree: Tree, joint: str) -> Optional[str]:
    """Name of the segment whose parent joint is `joint`."""
    for segment in tree.segments:
        if segment.joint_name == joint:
            return segment.name

    logger.error("Failed to find the segment of joint '%s'.", joint)
    return None


def get_chain_tip(tree: Tree, segments: Sequence[str], chain_root: str) -> Optional[str]:
    """Among `segments`, find the one whose chain from `chain_root` contains them all."""
    for candidate in segments:
        chain = tree.get_chain(chain_root, candidate)
        if chain is None:
            logger.error("Failed to fetch the chain from '%s' to '%s'.", chain_root, candidate)
            return None

        names = set(chain.segment_names) | {chain_root}
        if all(s in names for s in segments):
            return candidate

    logger.error("None of %s is the tip of a chain rooted at '%s'.", list(segments), chain_root)
    return None
