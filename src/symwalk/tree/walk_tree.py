"""Tree representation of everything a single walk reports.

This module provides the WalkTree class, which runs one walk over a root path and
keeps the reported entries as anytree nodes for counting, iteration and rendering.
"""

import os
from typing import Callable, Dict, Iterator, Optional, Tuple

from anytree import PreOrderIter

from symwalk.tree.error_action import ErrorAction
from symwalk.tree.walk_node import WalkNode
from symwalk.types import PathType
from symwalk.walker.file_info import FileInfo
from symwalk.walker.options import follow_symlinks as follow_symlinks_option
from symwalk.walker.walk import walk
from symwalk.walker.walk_action import WalkAction


class WalkTree:
    """A tree of the entries reported by walking a root path.

    The tree is built lazily on first access by a single call to walk, and can be
    refreshed to reflect filesystem changes. Entries appear in the order the walk
    reports them: parents before children, siblings sorted by name.

    Symbolic Link Behavior:
        By default, symbolic links are reported as symlink nodes and never descended
        into. When follow_symlinks is True, links are replaced by their targets and a
        link leading back to an already visited path becomes a loop node.

    Error Handling:
        Errors reported by the walk can be handled in two ways:
        - IGNORE (default): Keep the entry, marked with its error, and carry on
        - RAISE: Stop the walk and raise the error

    Attributes:
        root_path (str): The root path, as given.
        follow_symlinks (bool): Whether to follow symbolic links during the walk.
        error_action (ErrorAction): How to handle errors reported by the walk.

    Example:
        >>> tree = WalkTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src/
        ├── utils/
        │   └── helpers.py
        └── main.py
    """

    def __init__(
        self,
        root_path: PathType,
        follow_symlinks: bool = False,
        error_action: ErrorAction = ErrorAction.IGNORE,
    ) -> None:
        self.root_path = os.fspath(root_path)
        self.follow_symlinks = follow_symlinks
        self.error_action = error_action
        self._tree: Optional[WalkNode] = None
        self._nodes: Dict[str, WalkNode] = {}

    def get_tree(self) -> Optional[WalkNode]:
        """Get the root node of the tree, walking the root path on first access.

        Returns:
            The root node, or None if the walk reported nothing.

        Raises:
            OSError: If an entry fails and error_action is RAISE.
        """
        if self._tree is None:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        self._tree = None
        self._nodes = {}
        options = [follow_symlinks_option()] if self.follow_symlinks else []
        walk(self.root_path, self._add_entry, *options)

    def _add_entry(self, path: str, info: Optional[FileInfo], error: Optional[Exception]) -> Optional[WalkAction]:
        """Walk callback: record one reported entry as a node."""
        if error is not None and self.error_action == ErrorAction.RAISE:
            raise error

        key = os.path.normpath(path)
        if self._tree is None:
            parent = None
            name = self.root_path.rstrip(os.sep) or self.root_path
        else:
            parent = self._nodes[os.path.normpath(os.path.dirname(path))]
            name = os.path.basename(key)

        symlink_target = None
        if info is not None and info.is_symlink():
            try:
                symlink_target = os.readlink(path)
            except OSError:
                # The link is still shown, just without its target
                pass

        node = WalkNode(
            name,
            parent=parent,
            walk_path=path,
            file_type=info.file_type if info is not None else None,
            error=error,
            symlink_target=symlink_target,
        )
        self._nodes[key] = node
        if self._tree is None:
            self._tree = node
        return None

    def _count(self, predicate: Callable[[WalkNode], bool]) -> int:
        tree = self.get_tree()
        if tree is None:
            return 0
        return sum(1 for node in PreOrderIter(tree) if predicate(node))

    def get_directory_count(self) -> int:
        """Get the number of directories in the tree, excluding the root."""
        tree = self.get_tree()
        return self._count(lambda node: node.is_dir and not node.is_loop and node is not tree)

    def get_file_count(self) -> int:
        """Get the number of entries that are neither directories nor symlinks, loops excluded."""
        return self._count(
            lambda node: node.file_type is not None and not (node.is_dir or node.is_symlink or node.is_loop)
        )

    def get_symlink_count(self) -> int:
        """Get the number of unfollowed symlinks.

        Returns:
            Number of symlink nodes. When follow_symlinks is True, links are replaced
            by their targets, so only links that could not be resolved are counted.
        """
        return self._count(lambda node: node.is_symlink)

    def get_error_count(self) -> int:
        """Get the number of entries the walk reported an error for, loops included."""
        return self._count(lambda node: node.error is not None)

    def iterate_paths(self) -> Iterator[str]:
        """Iterate over the walk paths of all entries, in walk order.

        Yields:
            The walk path of each entry, the root first.
        """
        tree = self.get_tree()
        if tree is not None:
            for node in PreOrderIter(tree):
                yield node.walk_path

    def iterate_errors(self) -> Iterator[Tuple[str, Exception]]:
        """Iterate over the entries the walk reported an error for, in walk order.

        Yields:
            Pairs of (walk_path, error) for each failed entry.
        """
        tree = self.get_tree()
        if tree is not None:
            for node in PreOrderIter(tree):
                if node.error is not None:
                    yield (node.walk_path, node.error)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the walk one line at a time.

        Generates output similar to the Unix 'tree' command, directories first and
        then files, both alphabetically.

        Yields:
            Lines of the tree representation, including the connecting lines.

        Example:
            >>> tree = WalkTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            src/
            ├── utils/
            │   └── helpers.py
            ├── link → ../docs [symlink]
            └── main.py
        """
        tree = self.get_tree()
        if tree is None:
            return

        def describe(node: WalkNode) -> str:
            if node.is_loop:
                return " → [loop detected]"
            if node.error is not None:
                reason = getattr(node.error, "strerror", None) or str(node.error)
                return f" [error: {reason}]"
            if node.is_dir:
                return "/"
            if node.is_symlink:
                if node.symlink_target:
                    return f" → {node.symlink_target} [symlink]"
                return " [symlink]"
            return ""

        def write_node(node: WalkNode, prefix: str = "", is_last: bool = True, is_root: bool = False) -> Iterator[str]:
            if is_root:
                yield f"{node.name}{describe(node)}"
            else:
                connector = "└── " if is_last else "├── "
                yield f"{prefix}{connector}{node.name}{describe(node)}"

            sorted_children = sorted(node.children, key=lambda n: (not n.is_dir, n.name.lower()))
            for i, child in enumerate(sorted_children):
                is_last_child = i == len(sorted_children) - 1
                # Direct children of the root get no leading indentation
                if is_root:
                    new_prefix = ""
                else:
                    new_prefix = prefix + ("    " if is_last else "│   ")
                yield from write_node(child, new_prefix, is_last_child)

        yield from write_node(tree, is_root=True)

    def get_tree_representation(self) -> str:
        """Get the complete tree representation as a string."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Walk the root path again to reflect the current filesystem state."""
        self._build_tree()
