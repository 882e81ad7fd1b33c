"""Node representation for entries reported by a walk."""

from typing import Any, Optional

from anytree import Node

from symwalk.exceptions import SymlinkLoopError
from symwalk.types import FileType


class WalkNode(Node):  # type: ignore
    """Node class representing one entry reported by a walk.

    Extends anytree.Node with the type of the entry and the error the walk reported
    for it, if any. Inherits tree traversal and manipulation capabilities from
    anytree.Node.

    Attributes:
        name (str): The base name of the entry.
        parent (Optional[WalkNode]): The parent node in the tree.
        walk_path (str): The walk path of the entry, as handed to the callback.
        file_type (Optional[FileType]): The entry type, None if it could not be probed.
        error (Optional[Exception]): The error reported for the entry, if any.
        symlink_target (Optional[str]): Target of an unfollowed symbolic link.
        children (tuple[WalkNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = WalkNode("root", walk_path="root", file_type=FileType.DIRECTORY)
        >>> child = WalkNode("file.txt", parent=root, walk_path="root/file.txt", file_type=FileType.FILE)
        >>> root.is_dir
        True
        >>> child.is_dir
        False
    """

    def __init__(
        self,
        name: str,
        parent: Optional["WalkNode"] = None,
        walk_path: str = "",
        file_type: Optional[FileType] = None,
        error: Optional[Exception] = None,
        symlink_target: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        # anytree reserves "path" for the tuple of ancestors
        self.walk_path = walk_path
        self.file_type = file_type
        self.error = error
        self.symlink_target = symlink_target

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.file_type is FileType.SYMLINK

    @property
    def is_loop(self) -> bool:
        return isinstance(self.error, SymlinkLoopError)
