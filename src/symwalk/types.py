from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(Enum):
    """Enumeration of file types reported for each entry during a walk.

    The type is taken from a non-dereferencing probe, so a symbolic link is
    reported as SYMLINK unless the walk resolves it to its target.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
        OTHER: Anything else (FIFO, socket, device, ...)
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"
