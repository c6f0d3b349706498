"""Tests for joint-state lookups."""

import logging

from leatherman.core.messages import (
    Header,
    JointState,
    MultiDOFJointState,
    Quaternion,
    Transform,
    Vector3,
)
from leatherman.joint_states import (
    find_and_replace_joint_position,
    find_joint_position,
    get_joint_positions,
    get_joint_positions_with_missing,
    get_pose,
    is_valid_joint_state,
)


def _state():
    return JointState(name=["a", "b"], position=[1.0, 2.0])


def test_valid_joint_state():
    assert is_valid_joint_state(_state())
    assert is_valid_joint_state(JointState(name=["a"], position=[0.0], velocity=[1.0]))
    assert not is_valid_joint_state(JointState(name=["a", "b"], position=[0.0]))
    assert not is_valid_joint_state(JointState(name=["a"], position=[0.0], effort=[1.0, 2.0]))


def test_find_joint_position():
    assert find_joint_position(_state(), "b") == 2.0
    assert find_joint_position(_state(), "c") is None


def test_get_joint_positions_in_request_order():
    assert get_joint_positions(_state(), ["b", "a"]) == [2.0, 1.0]
    assert get_joint_positions(_state(), []) == []


def test_get_joint_positions_missing(caplog):
    """A single missing joint fails the whole lookup."""
    with caplog.at_level(logging.WARNING, logger="leatherman"):
        assert get_joint_positions(_state(), ["a", "c"]) is None
    assert "'c'" in caplog.text


def test_get_joint_positions_with_missing():
    positions, missing = get_joint_positions_with_missing(_state(), ["a", "c"])
    assert positions == [1.0]
    assert missing == ["c"]


def test_find_and_replace_joint_position():
    state = _state()
    find_and_replace_joint_position("b", 5.0, state)
    assert state.position == [1.0, 5.0]

    find_and_replace_joint_position("c", -1.0, state)
    assert state.name == ["a", "b", "c"]
    assert state.position == [1.0, 5.0, -1.0]


def _multi_dof_state():
    return MultiDOFJointState(
        header=Header(frame_id="map"),
        joint_names=["base", "arm"],
        transforms=[
            Transform(translation=Vector3(1.0, 2.0, 3.0)),
            Transform(translation=Vector3(0.0, 0.0, 1.0), rotation=Quaternion(0.0, 0.0, 1.0, 0.0)),
        ],
    )


def test_get_pose():
    pose = get_pose(_multi_dof_state(), "map", "arm")
    assert (pose.position.x, pose.position.y, pose.position.z) == (0.0, 0.0, 1.0)
    assert (pose.orientation.z, pose.orientation.w) == (1.0, 0.0)


def test_get_pose_failures():
    assert get_pose(_multi_dof_state(), "odom", "arm") is None
    assert get_pose(_multi_dof_state(), "map", "gripper") is None
