"""Core data structures for leatherman.

This module provides the value types the utilities consume and produce:
middleware-style messages, the parsed robot description and meshes.
"""

from . import messages
from .mesh import Mesh
from .robot_model import Geometry, Joint, Link, Origin, RobotModel

__all__ = ["messages", "Mesh", "Geometry", "Joint", "Link", "Origin", "RobotModel"]
