"""Depth-first directory walk that can optionally follow symbolic links.

The walk behaves like a conventional non-following walk by default: every entry,
the root included, is handed to a callback together with its metadata and any error
met while reaching it, parents before children and siblings in sorted order.

When symbolic links are followed, two paths are tracked per entry. The walk path is
built from the root argument and the entry names and is what the callback receives.
The resolved path is what is actually read from disk. Every resolved path is
remembered for the duration of the call, and reaching one a second time is reported
to the callback as a SymlinkLoopError instead of being walked again.

Example:
    >>> def show(path, info, error):  # doctest: +SKIP
    ...     if error is not None:
    ...         return WalkAction.SKIP_DIR
    ...     print(path)
    >>> walk("/srv/data", show, follow_symlinks())  # doctest: +SKIP
    /srv/data
    /srv/data/a
    /srv/data/a/x
    /srv/data/b
"""

import logging
import os
from typing import Callable, Optional, Set, Union

from symwalk.exceptions import SymlinkLoopError
from symwalk.types import PathType
from symwalk.walker.file_info import FileInfo, lstat_info
from symwalk.walker.listing import read_dir_names
from symwalk.walker.options import WalkOption, build_options
from symwalk.walker.resolver import optionally_evaluate_symlink
from symwalk.walker.walk_action import WalkAction

logger = logging.getLogger(__name__)

CallbackResult = Optional[Union[WalkAction, BaseException]]
WalkCallback = Callable[[str, Optional[FileInfo], Optional[Exception]], CallbackResult]


def walk(root: PathType, callback: WalkCallback, *options: WalkOption) -> None:
    """Walk the tree rooted at ``root``, calling ``callback`` for every entry.

    The callback is called as ``callback(path, info, error)``:

    - once for every entry, the root included, with ``error`` set to None, or to
      the listing error for a directory that could not be read;
    - with ``info`` set to None when the entry could not be probed at all;
    - with the link's own info and the resolution error when a symbolic link
      could not be resolved;
    - with a SymlinkLoopError when following links leads back to a path already
      visited during this call.

    Its return value steers the walk. None or WalkAction.CONTINUE carries on.
    WalkAction.SKIP_DIR prunes the current directory, or skips the remaining
    entries of the parent directory when returned for a non-directory. Raising an
    exception, or returning an exception instance, stops the walk immediately.

    Args:
        root: The path to start from.
        callback: Called for every entry as described above.
        *options: Option functions such as ``follow_symlinks()``.

    Raises:
        Exception: Whatever the callback raised or returned to stop the walk,
            unchanged.
        TypeError: If the callback returns anything else than the values above.
    """
    walk_options = build_options(*options)
    root_path = os.fspath(root)
    walker = _Walker(callback, walk_options.follow_symlinks)
    try:
        info = lstat_info(root_path)
    except OSError as e:
        walker.report(root_path, None, e)
        return
    try:
        resolved_path, info = optionally_evaluate_symlink(root_path, info, walk_options.follow_symlinks)
    except OSError as e:
        logger.debug("Could not resolve walk root %s: %s", root_path, e)
        walker.report(root_path, None, e)
        return
    if walk_options.follow_symlinks:
        # Child paths are joined onto this one, so it has to compare equal to what
        # realpath returns for a link back to the root
        resolved_path = os.path.realpath(resolved_path)
    # Skipping the root is not an error to the caller
    walker.walk(root_path, resolved_path, info)


class _Walker:
    """State of one walk call: the callback, the options and the visited resolved paths."""

    def __init__(self, callback: WalkCallback, follow_symlinks: bool) -> None:
        self.callback = callback
        self.follow_symlinks = follow_symlinks
        self.visited: Set[str] = set()

    def report(self, path: str, info: Optional[FileInfo], error: Optional[Exception]) -> Optional[WalkAction]:
        """Call the callback and normalize its result.

        Returns:
            None to continue or WalkAction.SKIP_DIR to prune.

        Raises:
            BaseException: The exception the callback raised or returned.
            TypeError: If the callback returned an unsupported value.
        """
        result = self.callback(path, info, error)
        if result is None or result is WalkAction.CONTINUE:
            return None
        if result is WalkAction.SKIP_DIR:
            return result
        if isinstance(result, BaseException):
            raise result
        raise TypeError(f"walk callback must return None, a WalkAction or an exception, got {result!r}")

    def walk(self, walk_path: str, resolved_path: str, info: FileInfo) -> Optional[WalkAction]:
        if self.follow_symlinks:
            if resolved_path in self.visited:
                logger.debug("Symlink loop at %s (reached as %s)", resolved_path, walk_path)
                return self.report(walk_path, info, SymlinkLoopError(resolved_path))
            self.visited.add(resolved_path)

        if not info.is_dir():
            return self.report(walk_path, info, None)

        read_dir_error: Optional[Exception] = None
        try:
            names = read_dir_names(resolved_path)
        except (OSError, ExceptionGroup) as e:
            logger.debug("Could not list directory %s: %s", resolved_path, e)
            read_dir_error = e
        action = self.report(walk_path, info, read_dir_error)
        # The callback may swallow the listing error, but there is nothing to descend into
        if read_dir_error is not None or action is not None:
            return action

        for name in names:
            child_walk_path = os.path.join(walk_path, name)
            child_resolved_path = os.path.join(resolved_path, name)
            try:
                child_info = lstat_info(child_resolved_path)
            except OSError as e:
                # SKIP_DIR or None both mean: go on with the next sibling
                self.report(child_walk_path, None, e)
                continue
            try:
                child_resolved_path, child_info = optionally_evaluate_symlink(
                    child_resolved_path, child_info, self.follow_symlinks
                )
            except OSError as e:
                logger.debug("Could not resolve symlink %s: %s", child_resolved_path, e)
                self.report(child_walk_path, child_info, e)
                continue
            action = self.walk(child_walk_path, child_resolved_path, child_info)
            # SKIP_DIR from a directory only prunes that directory; from anything
            # else it skips the rest of this directory
            if action is not None and not child_info.is_dir():
                return action

        return None
