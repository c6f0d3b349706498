"""Logger level configuration.

Every leatherman module logs through ``logging.getLogger(__name__)``. An
application creates one LoggerRegistry at startup and uses it to set the
levels of those named loggers (or of another package's loggers); the library
never installs handlers itself.
"""

import logging
from typing import Dict, Mapping, Union

logger = logging.getLogger(__name__)

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


class LoggerRegistry:
    """Sets levels on named loggers under a root hierarchy."""

    def __init__(self, root: str = "leatherman"):
        self.root = root
        self._levels: Dict[str, int] = {}

    @property
    def levels(self) -> Dict[str, int]:
        """Levels applied so far, keyed by full logger name."""
        return dict(self._levels)

    def get_logger(self, name: str = "") -> logging.Logger:
        return logging.getLogger(self._full_name(self.root, name))

    def set_logger_level(self, name: str, level: Union[str, int]) -> bool:
        """Set the level of ``<root>.<name>``."""
        return self._apply(self._full_name(self.root, name), level)

    def set_package_logger_level(self, package: str, name: str, level: Union[str, int]) -> bool:
        """Set the level of ``<package>.<name>``."""
        return self._apply(self._full_name(package, name), level)

    def configure(self, levels: Mapping[str, Union[str, int]]) -> bool:
        """Apply many ``name: level`` pairs; False if any level was rejected."""
        ok = True
        for name, level in levels.items():
            ok = self.set_logger_level(name, level) and ok
        return ok

    def _apply(self, full_name: str, level: Union[str, int]) -> bool:
        if isinstance(level, str):
            value = LEVELS.get(level.lower())
            if value is None:
                logger.error("Unknown logger level '%s' for '%s'.", level, full_name)
                return False
        else:
            value = int(level)

        logging.getLogger(full_name).setLevel(value)
        self._levels[full_name] = value
        logger.debug("Set logger '%s' to %s", full_name, logging.getLevelName(value))
        return True

    @staticmethod
    def _full_name(package: str, name: str) -> str:
        return f"{package}.{name}" if name else package
