"""Options accepted by walk."""

from dataclasses import dataclass, replace
from typing import Callable


@dataclass(frozen=True)
class WalkOptions:
    """Immutable configuration for a single walk.

    Attributes:
        follow_symlinks (bool): Resolve symbolic links and descend into their
            targets, reporting loops to the callback. Defaults to False.
    """

    follow_symlinks: bool = False


WalkOption = Callable[[WalkOptions], WalkOptions]


def follow_symlinks(enabled: bool = True) -> WalkOption:
    """Return an option that makes walk follow symbolic links.

    Example:
        >>> build_options(follow_symlinks()).follow_symlinks
        True
        >>> build_options(follow_symlinks(), follow_symlinks(False)).follow_symlinks
        False
    """

    def apply(options: WalkOptions) -> WalkOptions:
        return replace(options, follow_symlinks=enabled)

    return apply


def build_options(*options: WalkOption) -> WalkOptions:
    """Apply option functions in order, starting from the defaults."""
    walk_options = WalkOptions()
    for option in options:
        walk_options = option(walk_options)
    return walk_options
