"""Resource paths and package lookup.

A resource reference is classified once, when it is parsed, into a
package-relative path (``package://<pkg>/<rel>``), an absolute filesystem path
(``/abs`` or ``file:///abs``) or an unknown form.
"""

import enum
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

logger = logging.getLogger(__name__)

PACKAGE_PREFIX = "package://"
FILE_PREFIX = "file://"


class ResourceKind(enum.Enum):
    PACKAGE = "package"
    ABSOLUTE = "absolute"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResourcePath:
    """A parsed resource reference.

    Attributes:
        kind: How the reference is resolved.
        package: Package name (package paths only, may be empty if malformed).
        path: Path relative to the package root, or the absolute path.
        text: The original reference.
    """
    kind: ResourceKind
    package: str = ""
    path: str = ""
    text: str = ""


def parse_resource_path(text: str) -> ResourcePath:
    if text.startswith(PACKAGE_PREFIX):
        rest = text[len(PACKAGE_PREFIX):]
        package, sep, path = rest.partition("/")
        if not sep:
            # no segment after the package name
            return ResourcePath(ResourceKind.PACKAGE, package=package, path="", text=text)
        return ResourcePath(ResourceKind.PACKAGE, package=package, path=path, text=text)
    if text.startswith(FILE_PREFIX):
        return ResourcePath(ResourceKind.ABSOLUTE, path=text[len(FILE_PREFIX):], text=text)
    if text.startswith("/"):
        return ResourcePath(ResourceKind.ABSOLUTE, path=text, text=text)
    return ResourcePath(ResourceKind.UNKNOWN, path=text, text=text)


@dataclass
class PackageRegistry:
    """Maps package names to their root directories.

    Explicit registrations win; otherwise the registry searches the ament
    prefixes (``<prefix>/share/<pkg>``) and then the ROS package path entries
    (``<entry>/<pkg>`` or an entry that is itself the package).
    """
    packages: Dict[str, str] = field(default_factory=dict)
    ament_prefix_path: Optional[str] = None
    ros_package_path: Optional[str] = None

    @classmethod
    def from_environment(cls) -> "PackageRegistry":
        return cls(
            ament_prefix_path=os.environ.get("AMENT_PREFIX_PATH", ""),
            ros_package_path=os.environ.get("ROS_PACKAGE_PATH", ""),
        )

    def register(self, name: str, path: str) -> None:
        self.packages[name] = path

    def get_path(self, name: str) -> str:
        """Root directory of package `name`, or "" when it cannot be found."""
        if not name:
            return ""
        if name in self.packages:
            return self.packages[name]

        for prefix in _split(self.ament_prefix_path):
            candidate = os.path.join(prefix, "share", name)
            if os.path.isdir(candidate):
                return candidate

        for entry in _split(self.ros_package_path):
            if os.path.basename(os.path.normpath(entry)) == name and os.path.isdir(entry):
                return entry
            candidate = os.path.join(entry, name)
            if os.path.isdir(candidate):
                return candidate

        return ""


def _split(search_path: Optional[str]):
    if not search_path:
        return []
    return [p for p in search_path.split(os.pathsep) if p]


def get_system_path_from_ros_path(ros_path: str, registry: Optional[PackageRegistry] = None) -> Optional[str]:
    """Resolve ``package://<pkg>/<rel>`` to ``<package root>/<rel>``."""
    resource = parse_resource_path(ros_path)
    if resource.kind is not ResourceKind.PACKAGE:
        logger.error("Not a ROS package path. (Failed to find '%s' in '%s')", PACKAGE_PREFIX, ros_path)
        return None
    return _resolve_package(resource, registry)


def resolve_resource(resource, registry: Optional[PackageRegistry] = None) -> Optional[str]:
    """Resolve a resource reference (string or ResourcePath) to a filesystem path."""
    if isinstance(resource, str):
        resource = parse_resource_path(resource)

    if resource.kind is ResourceKind.ABSOLUTE:
        return resource.path
    if resource.kind is ResourceKind.PACKAGE:
        return _resolve_package(resource, registry)

    logger.error("Unsupported resource reference '%s'", resource.text)
    return None


def _resolve_package(resource: ResourcePath, registry: Optional[PackageRegistry]) -> Optional[str]:
    if not resource.path:
        logger.error("No slash found when searching for package name in '%s'.", resource.text)
        return None

    if registry is None:
        registry = PackageRegistry.from_environment()

    package_path = registry.get_path(resource.package)
    if not package_path:
        logger.error("Failed to get system path for package '%s'", resource.package)
        return None

    return package_path.rstrip("/") + "/" + resource.path
