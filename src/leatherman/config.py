"""
Configuration for leatherman.

Marker defaults and logger levels, loadable from a YAML file:

    viz:
      lifetime: 10.0
      alpha: 0.8
    logging:
      viz: debug
      io.stl: error
"""

from dataclasses import dataclass, field, fields
from typing import Dict, Tuple

import yaml


@dataclass(frozen=True)
class VizConfig:
    """Defaults applied by the marker builders."""

    lifetime: float = 500.0
    """Marker lifetime in seconds"""

    saturation: float = 1.0
    """Saturation of hue-derived colors"""

    value: float = 1.0
    """Value (brightness) of hue-derived colors"""

    alpha: float = 1.0
    """Default opacity"""

    pose_arrow_scale: Tuple[float, float, float] = (0.1, 0.015, 0.015)
    """Arrow length, shaft width and head width of pose markers"""

    pose_sphere_diameter: float = 0.02
    """Diameter of the sphere drawn at a pose"""

    pose_text_size: float = 0.05
    """Height of pose labels"""

    pose_text_offset: float = 0.05
    """Height of pose labels above the pose"""


DEFAULT_VIZ_CONFIG = VizConfig()


@dataclass
class Config:
    viz: VizConfig = field(default_factory=VizConfig)
    logging: Dict[str, str] = field(default_factory=dict)


def load_config(path: str) -> Config:
    """Load a YAML configuration file.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: on unknown `viz` keys or a malformed document.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")

    viz_data = data.get("viz") or {}
    known = {f.name for f in fields(VizConfig)}
    unknown = set(viz_data) - known
    if unknown:
        raise ValueError(f"Unknown viz settings in {path}: {sorted(unknown)}")
    if "pose_arrow_scale" in viz_data:
        viz_data["pose_arrow_scale"] = tuple(viz_data["pose_arrow_scale"])

    levels = data.get("logging") or {}
    return Config(
        viz=VizConfig(**viz_data),
        logging={str(name): str(level) for name, level in levels.items()},
    )
