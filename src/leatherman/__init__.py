"""
leatherman: utility library for robot middleware code.

This library provides orientation conversions, geometric queries, mesh loading,
joint-state, kinematic-chain and joint-limit lookups, color conversion,
visualization marker builders and filesystem helpers.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import core
from . import transforms
from . import io
from . import chain
from . import color
from . import config
from . import files
from . import geometry
from . import joint_states
from . import limits
from . import log
from . import mesh
from . import resources
from . import viz

__version__ = "0.1.0"
__all__ = [
    "core",
    "transforms",
    "io",
    "chain",
    "color",
    "config",
    "files",
    "geometry",
    "joint_states",
    "limits",
    "log",
    "mesh",
    "resources",
    "viz",
]
