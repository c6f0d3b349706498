"""Tests for resource path parsing and package lookup."""

import os

import pytest

from leatherman.resources import (
    PackageRegistry,
    ResourceKind,
    get_system_path_from_ros_path,
    parse_resource_path,
    resolve_resource,
)


@pytest.mark.parametrize("text, kind, package, path", [
    ("package://test_arm/meshes/link1.stl", ResourceKind.PACKAGE, "test_arm", "meshes/link1.stl"),
    ("package://test_arm", ResourceKind.PACKAGE, "test_arm", ""),
    ("file:///opt/meshes/a.dae", ResourceKind.ABSOLUTE, "", "/opt/meshes/a.dae"),
    ("/opt/meshes/a.dae", ResourceKind.ABSOLUTE, "", "/opt/meshes/a.dae"),
    ("meshes/a.dae", ResourceKind.UNKNOWN, "", "meshes/a.dae"),
])
def test_parse_resource_path(text, kind, package, path):
    resource = parse_resource_path(text)
    assert resource.kind is kind
    assert resource.package == package
    assert resource.path == path
    assert resource.text == text


def test_ros_path(registry, arm_package):
    """The package root is joined with the relative path."""
    path = get_system_path_from_ros_path("package://test_arm/meshes/link1.stl", registry)
    assert path == str(arm_package) + "/meshes/link1.stl"
    assert os.path.isfile(path)


def test_ros_path_failures(registry):
    assert get_system_path_from_ros_path("/abs/mesh.stl", registry) is None
    assert get_system_path_from_ros_path("package://test_arm", registry) is None
    assert get_system_path_from_ros_path("package://unknown/mesh.stl", registry) is None


def test_resolve_resource(registry, arm_package):
    assert resolve_resource("file:///tmp/a.stl", registry) == "/tmp/a.stl"
    assert resolve_resource("/tmp/a.stl", registry) == "/tmp/a.stl"
    assert resolve_resource(parse_resource_path("package://test_arm/x"), registry) == str(arm_package) + "/x"
    assert resolve_resource("relative/a.stl", registry) is None


def test_registry_explicit_registration(tmp_path):
    registry = PackageRegistry()
    assert registry.get_path("my_pkg") == ""
    registry.register("my_pkg", str(tmp_path))
    assert registry.get_path("my_pkg") == str(tmp_path)
    assert registry.get_path("") == ""


def test_registry_ament_prefix(tmp_path):
    """Installed packages live under <prefix>/share/<name>."""
    share = tmp_path / "install" / "share" / "my_pkg"
    share.mkdir(parents=True)
    registry = PackageRegistry(ament_prefix_path=os.pathsep.join(["/nonexistent", str(tmp_path / "install")]))
    assert registry.get_path("my_pkg") == str(share)


def test_registry_ros_package_path(tmp_path):
    """Entries may contain the package or be the package directory themselves."""
    (tmp_path / "src" / "pkg_a").mkdir(parents=True)
    (tmp_path / "pkg_b").mkdir()
    registry = PackageRegistry(ros_package_path=os.pathsep.join([str(tmp_path / "src"), str(tmp_path / "pkg_b")]))
    assert registry.get_path("pkg_a") == str(tmp_path / "src" / "pkg_a")
    assert registry.get_path("pkg_b") == str(tmp_path / "pkg_b")
    assert registry.get_path("pkg_c") == ""


def test_registry_from_environment(tmp_path, monkeypatch):
    (tmp_path / "share" / "env_pkg").mkdir(parents=True)
    monkeypatch.setenv("AMENT_PREFIX_PATH", str(tmp_path))
    monkeypatch.delenv("ROS_PACKAGE_PATH", raising=False)
    assert PackageRegistry.from_environment().get_path("env_pkg") == str(tmp_path / "share" / "env_pkg")
    # no registry falls back to the environment
    assert resolve_resource("package://env_pkg/a.stl") == str(tmp_path / "share" / "env_pkg") + "/a.stl"
