"""Depth-first directory walking with optional symbolic link following.

This package provides a walk routine in the style of a conventional non-following
directory walk, with an opt-in mode that resolves symbolic links while descending
and reports symlink loops to the caller instead of looping forever.
"""

from importlib.metadata import PackageNotFoundError, version

from symwalk.exceptions import SymlinkLoopError
from symwalk.walker.file_info import FileInfo
from symwalk.walker.options import WalkOptions, follow_symlinks
from symwalk.walker.walk import walk
from symwalk.walker.walk_action import WalkAction

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("symwalk")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "FileInfo",
    "SymlinkLoopError",
    "WalkAction",
    "WalkOptions",
    "follow_symlinks",
    "walk",
]
