"""Filesystem helpers: folders, point and trajectory text files, path strings."""

import contextlib
import logging
import os
import time
from typing import Iterator, List, Optional, Sequence, TextIO

import numpy as np

from .core.messages import JointTrajectory

logger = logging.getLogger(__name__)

POINT_FORMAT = "%1.4f, %1.4f, %1.4f\n"


def create_folder(name: str) -> bool:
    """Create a folder; an existing folder is not an error."""
    try:
        os.mkdir(name, 0o775)
        logger.info("Successfully created the folder: %s", name)
    except FileExistsError:
        if not os.path.isdir(name):
            logger.warning("Failed to create the folder: %s. A file with that name exists.", name)
            return False
        logger.info("Folder is present. Not creating.")
    except OSError as e:
        logger.warning("Failed to create the folder: %s (%s)", name, e)
        return False
    return True


def get_folder_contents(folder_name: str) -> Optional[List[str]]:
    """Entry names of a folder, sorted ascending, without '.' and '..'."""
    try:
        entries = os.listdir(folder_name)
    except OSError as e:
        logger.error("Error opening folder {%s}: %s", folder_name, e)
        return None
    return sorted(e for e in entries if e not in (".", ".."))


def get_time() -> str:
    """Current local time in ctime format, without the year."""
    return time.ctime()[:-5]


def write_points_to_file(filename: str, points: Sequence) -> bool:
    """Append one "x, y, z" row per point."""
    try:
        with open(filename, "a") as f:
            for p in np.asarray(points, dtype=np.float64).reshape(-1, 3):
                f.write(POINT_FORMAT % (p[0], p[1], p[2]))
    except OSError as e:
        logger.error("Failed to open file for writing. {%s}: %s", filename, e)
        return False
    return True


def read_points_in_file(filename: str) -> Optional[List[np.ndarray]]:
    """Read "x, y, z" rows until end of input.

    Blank lines are skipped; any other row that does not hold exactly three
    numbers (an empty field included) fails the whole read.
    """
    points = []
    try:
        with open(filename, "r") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                fields = [x.strip() for x in line.split(",")]
                # one trailing separator is allowed
                if len(fields) > 3 and not fields[-1]:
                    fields.pop()
                try:
                    values = [float(x) for x in fields]
                except ValueError:
                    values = []
                if len(values) != 3:
                    logger.error("Error while parsing list of points: line %d of %s: '%s'",
                                 line_number, filename, line)
                    return None
                points.append(np.array(values))
    except OSError as e:
        logger.error("Failed to open file for reading. {%s}: %s", filename, e)
        return None
    return points


@contextlib.contextmanager
def open_trajectory_file(path: str) -> Iterator[TextIO]:
    """Append-mode text stream for trajectory dumps, flushed and closed on exit."""
    f = open(path, "a")
    try:
        yield f
    finally:
        f.flush()
        f.close()


def write_joint_trajectory_to_file(stream: Optional[TextIO], traj: JointTrajectory) -> bool:
    """Write one line per trajectory point into a caller-owned stream.

    Line layout: "<i>, time_from_start, <t>, " followed by the non-empty
    "positions, ", "velocities, " and "accelerations, " blocks.
    """
    if stream is None:
        logger.error("File stream is None. Not writing.")
        return False

    for i, point in enumerate(traj.points):
        line = ["%d, time_from_start, %1.4f, " % (i, point.time_from_start)]
        for label in ("positions", "velocities", "accelerations"):
            values = getattr(point, label)
            if values:
                line.append(label + ", ")
                line.extend("%1.4f, " % v for v in values)
        line.append("\n")
        stream.write("".join(line))

    stream.flush()
    return True


def get_filename_from_path(path: str, remove_extension: bool = False) -> str:
    filename = path[path.rfind("/") + 1:]
    if remove_extension:
        pos = filename.rfind(".")
        if pos != -1:
            filename = filename[:pos]
    return filename


def get_path_without_filename(path: str) -> str:
    """Directory part of `path`, keeping the final '/'."""
    pos = path.rfind("/")
    if pos == -1:
        return path
    return path[:pos + 1]


def get_extension(filename: str) -> str:
    """Lower-cased text after the last '.', "" when there is none."""
    pos = filename.rfind(".")
    if pos == -1:
        return ""
    return filename[pos + 1:].lower()


def replace_extension(filename: str, extension: str) -> str:
    """Replace the text after the last '.'; "" when there is no extension."""
    pos = filename.rfind(".")
    if pos == -1:
        return ""
    return filename[:pos + 1] + extension
