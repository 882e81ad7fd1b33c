"""Error action enum for handling entry errors while building a walk tree."""

from enum import Enum


class ErrorAction(str, Enum):
    """Action to take when the walk reports an error for an entry.

    Values:
        IGNORE: Keep the entry in the tree, marked with its error, and carry on (default behavior)
        RAISE: Stop building the tree and raise the error
    """

    IGNORE = "ignore"
    RAISE = "raise"
