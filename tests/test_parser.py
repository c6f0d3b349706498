"""Tests for URDF parser functionality."""

import pytest
from lxml import etree

from leatherman.core import RobotModel
from leatherman.io import load_urdf, parse_urdf


def test_load_three_link_arm(robot):
    """Test loading the arm URDF and verify the RobotModel structure."""
    assert isinstance(robot, RobotModel)
    assert robot.name == "three_link_arm"
    assert robot.root_link == "base_link"

    assert len(robot.link_names) == 6
    for name in ("base_link", "link1", "link2", "link3", "tool", "camera_link"):
        assert name in robot.link_names

    assert robot.joint_names == ("joint1", "joint2", "joint3", "tool_joint", "camera_pan")


def test_joint_details(robot):
    """Limits, safety limits, axes and origins are parsed."""
    joint1 = robot.get_joint("joint1")
    assert joint1.type == "revolute"
    assert (joint1.parent, joint1.child) == ("base_link", "link1")
    assert (joint1.lower, joint1.upper) == (-1.5, 1.5)
    assert (joint1.soft_lower, joint1.soft_upper) == (-1.4, 1.4)
    assert joint1.axis == (0.0, 0.0, 1.0)
    assert joint1.origin.xyz == (0.0, 0.0, 0.1)

    joint2 = robot.get_joint("joint2")
    assert joint2.type == "continuous"
    assert joint2.soft_lower is None

    assert robot.get_joint("tool_joint").type == "fixed"
    assert robot.get_joint("missing") is None


def test_link_geometry(robot):
    """Visual and collision geometry is attached to links."""
    link1 = robot.get_link("link1")
    assert link1.parent_joint == "joint1"
    assert link1.visual.kind == "mesh"
    assert link1.visual.filename == "package://test_arm/meshes/link1.stl"
    assert link1.visual.scale == (0.001, 0.001, 0.001)
    assert link1.collision.kind == "cylinder"
    assert link1.collision.radius == 0.05
    assert link1.collision.length == 0.3

    base = robot.get_link("base_link")
    assert base.parent_joint is None
    assert base.visual.kind == "box"
    assert base.visual.size == (0.2, 0.2, 0.1)
    assert base.collision is None

    assert robot.get_link("tool").visual is None


def test_parent_links(robot):
    assert robot.get_parent_link("link3") == "link2"
    assert robot.get_parent_link("base_link") is None
    assert robot.get_parent_link("missing") is None


def test_parse_urdf_string(urdf_string, robot):
    """Parsing from a string gives the same model as loading the file."""
    assert parse_urdf(urdf_string) == robot


def test_multiple_roots_rejected():
    urdf = '<robot name="r"><link name="a"/><link name="b"/></robot>'
    with pytest.raises(ValueError, match="exactly one root link"):
        parse_urdf(urdf)


def test_not_a_robot():
    with pytest.raises(ValueError, match="<robot>"):
        parse_urdf("<model/>")


def test_malformed_xml():
    with pytest.raises(etree.XMLSyntaxError):
        parse_urdf("<robot>")


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_urdf(str(tmp_path / "missing.urdf"))
