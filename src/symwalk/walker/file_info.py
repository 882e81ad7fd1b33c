"""Metadata for a single entry seen during a walk."""

import os
import stat
from typing import Any

from symwalk.types import FileType, PathType


class FileInfo:
    """Metadata of a filesystem entry, as returned by a non-dereferencing probe.

    Instances wrap the ``os.stat_result`` of ``os.lstat`` together with the entry's
    base name. When a walk follows a symbolic link, the info handed to the callback
    is the one of the link's resolved target instead.

    Attributes:
        name (str): Base name of the probed path.
        stat (os.stat_result): Raw result of the probe.

    Example:
        >>> info = lstat_info(".")  # doctest: +SKIP
        >>> info.is_dir()  # doctest: +SKIP
        True
    """

    def __init__(self, name: str, stat_result: os.stat_result):
        """Initialize a FileInfo.

        Args:
            name: Base name of the probed path.
            stat_result: The ``os.lstat`` result for the path.
        """
        self.name = name
        self.stat = stat_result

    @property
    def mode(self) -> int:
        return self.stat.st_mode

    @property
    def size(self) -> int:
        return self.stat.st_size

    @property
    def file_type(self) -> FileType:
        mode = self.stat.st_mode
        if stat.S_ISLNK(mode):
            return FileType.SYMLINK
        if stat.S_ISDIR(mode):
            return FileType.DIRECTORY
        if stat.S_ISREG(mode):
            return FileType.FILE
        return FileType.OTHER

    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.stat.st_mode)

    def is_symlink(self) -> bool:
        return stat.S_ISLNK(self.stat.st_mode)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileInfo):
            return False
        return self.name == other.name and self.stat == other.stat

    def __hash__(self) -> int:
        return hash((self.name, self.stat.st_dev, self.stat.st_ino))

    def __repr__(self) -> str:
        return f"FileInfo(name={self.name!r}, file_type={self.file_type.value})"


def lstat_info(path: PathType) -> FileInfo:
    """Probe a path without following a final symbolic link.

    Args:
        path: The path to probe.

    Returns:
        The FileInfo for the path itself.

    Raises:
        OSError: If the path does not exist or cannot be accessed.
    """
    path = os.fspath(path)
    return FileInfo(os.path.basename(os.path.normpath(path)), os.lstat(path))
