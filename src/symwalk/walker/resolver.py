"""Optional resolution of symbolic links into their targets."""

import os
from typing import Tuple

from symwalk.walker.file_info import FileInfo, lstat_info


def optionally_evaluate_symlink(path: str, info: FileInfo, follow_symlinks: bool) -> Tuple[str, FileInfo]:
    """Replace a symbolic link with its fully resolved target.

    Nothing happens when symlinks are not followed or the entry is not a link. Otherwise
    the target is resolved completely and probed again without dereferencing, so the
    caller always works on the metadata of the path it will actually read.

    Args:
        path: The path that was probed.
        info: The non-dereferencing probe result for ``path``.
        follow_symlinks: Whether links should be resolved at all.

    Returns:
        The (possibly resolved) path and its FileInfo.

    Raises:
        OSError: If the link is dangling, loops, or its target cannot be probed.
            The caller still holds the original path and info in that case.
    """
    if not follow_symlinks or not info.is_symlink():
        return path, info
    resolved_path = os.path.realpath(path, strict=True)
    return resolved_path, lstat_info(resolved_path)
