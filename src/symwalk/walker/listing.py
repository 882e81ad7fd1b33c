"""Directory listing used by walk."""

import os
from typing import List, Optional


def combine_errors(primary: Optional[Exception], secondary: Optional[Exception]) -> Optional[Exception]:
    """Combine two possibly-missing errors without losing either.

    Args:
        primary: The error of the main operation, if any.
        secondary: A later error, typically from releasing a resource.

    Returns:
        None if neither is set, the one that is set if only one is, and an
        ExceptionGroup holding both otherwise.

    Example:
        >>> combine_errors(None, None) is None
        True
        >>> error = OSError("read failed")
        >>> combine_errors(error, None) is error
        True
        >>> group = combine_errors(error, OSError("close failed"))
        >>> len(group.exceptions)
        2
    """
    if primary is None:
        return secondary
    if secondary is None:
        return primary
    return ExceptionGroup("multiple errors while listing a directory", [primary, secondary])


def read_dir_names(dir_path: str) -> List[str]:
    """Read the names in a directory, sorted.

    Only names are returned. Each entry is probed separately by the caller so that
    a walk sees exactly the same metadata whether or not it was listed here.
    The directory handle is closed on every path out of this function.

    Args:
        dir_path: The directory to list.

    Returns:
        The entry names, sorted lexicographically.

    Raises:
        OSError: If the directory cannot be opened or read.
        ExceptionGroup: If reading failed and closing the handle failed as well.
    """
    entries = os.scandir(dir_path)
    names: List[str] = []
    error: Optional[Exception] = None
    try:
        names = [entry.name for entry in entries]
    except OSError as e:
        error = e
    finally:
        try:
            entries.close()
        except OSError as e:
            error = combine_errors(error, e)
    if error is not None:
        raise error
    return sorted(names)
