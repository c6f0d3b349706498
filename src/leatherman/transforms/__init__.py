"""
Orientation conversions for robotics data.

This module provides conversions between roll-pitch-yaw angles, rotation
matrices and quaternions (rotation module), in array form and in message form.
"""

from . import rotation
from .rotation import (
    matrix_to_quaternion,
    matrix_to_rpy,
    nested_matrix_to_rpy,
    quaternion_msg_to_matrix,
    quaternion_msg_to_rpy,
    quaternion_to_matrix,
    quaternion_to_rpy,
    rpy_to_matrix,
    rpy_to_quaternion,
    rpy_to_quaternion_msg,
)

__all__ = [
    "rotation",
    "matrix_to_quaternion",
    "matrix_to_rpy",
    "nested_matrix_to_rpy",
    "quaternion_msg_to_matrix",
    "quaternion_msg_to_rpy",
    "quaternion_to_matrix",
    "quaternion_to_rpy",
    "rpy_to_matrix",
    "rpy_to_quaternion",
    "rpy_to_quaternion_msg",
]
