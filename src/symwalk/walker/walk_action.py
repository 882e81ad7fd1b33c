"""Walk action enum returned by walk callbacks to steer the traversal."""

from enum import Enum


class WalkAction(str, Enum):
    """Action a walk callback returns to control the traversal.

    Values:
        CONTINUE: Carry on normally (returning None means the same)
        SKIP_DIR: Do not descend into the current directory. Returned for a
            non-directory entry, the remaining entries of its parent directory
            are skipped instead.

    Raising an exception from the callback, or returning an exception instance,
    stops the whole walk and that exception leaves ``walk``.
    """

    CONTINUE = "continue"
    SKIP_DIR = "skip_dir"
