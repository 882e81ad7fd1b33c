import errno


class SymlinkLoopError(OSError):
    """
    Error handed to the walk callback when a resolved path is reached a second time.

    This only happens while following symbolic links. The walk does not abort on its own:
    the callback receives this error for the repeated entry and decides whether to ignore
    it, skip the entry, or stop the walk. Test for it with ``isinstance`` rather than by
    inspecting the message.

    Attributes:
        path (str): The resolved path that was already visited.

    Example:
        >>> error = SymlinkLoopError("/srv/data")
        >>> str(error)
        'found a symlink loop at: /srv/data'
        >>> error.errno == errno.ELOOP
        True
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the error with the resolved path that closes the loop.

        Args:
            path (str): The resolved path that was already visited during this walk.
        """
        super().__init__(errno.ELOOP, f"found a symlink loop at: {path}")
        self.path = path

    def __str__(self) -> str:
        return f"found a symlink loop at: {self.path}"

    def __reduce__(self):  # type: ignore[no-untyped-def]
        return (type(self), (self.path,))
