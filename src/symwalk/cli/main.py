"""Command-line interface for symwalk.

This module provides the command-line interface for symwalk, listing every entry
below a path, one per line or as a tree. It handles command-line argument parsing,
error reporting and interruption handling.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution, or an entry failed with -P fail
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # List everything below a directory
    $ symwalk /path/to/dir

    # Follow symbolic links and show a tree
    $ symwalk -L -t /path/to/dir
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from typing import Optional, TextIO

from symwalk.cli.argparser import create_parser, validate_args
from symwalk.exceptions import SymlinkLoopError
from symwalk.tree.error_action import ErrorAction
from symwalk.tree.walk_tree import WalkTree
from symwalk.types import FileType
from symwalk.walker.file_info import FileInfo
from symwalk.walker.options import follow_symlinks
from symwalk.walker.walk import walk
from symwalk.walker.walk_action import WalkAction

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, including debug records when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the directory, file, symlink and error counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Symlinks: {counts['symlinks']}",
            f"Errors: {counts['errors']}",
        ]
    )


def warn(path: str, error: Exception) -> None:
    print(f"Warning: {path}: {error}", file=sys.stderr)


class PathLister:
    """Walk callback that prints each walk path as it is reported and counts entries.

    Loop entries are printed like in the tree rendering, but only count as errors.

    Attributes:
        output: Stream the paths are written to.
        error_action: "ignore", "warn" or "fail".
        counts: Running directory, file, symlink and error counts; the root
            directory is not counted.
    """

    def __init__(self, output: TextIO, error_action: str) -> None:
        self.output = output
        self.error_action = error_action
        self.counts = {"directories": 0, "files": 0, "symlinks": 0, "errors": 0}
        self._seen_root = False

    def __call__(self, path: str, info: Optional[FileInfo], error: Optional[Exception]) -> Optional[WalkAction]:
        is_root = not self._seen_root
        self._seen_root = True
        if error is not None:
            if self.error_action == "fail":
                raise error
            self.counts["errors"] += 1
            if self.error_action == "warn":
                warn(path, error)
            if info is None:
                return None

        print(path, file=self.output)
        if info is None or isinstance(error, SymlinkLoopError):
            return None
        if info.file_type is FileType.DIRECTORY:
            if not is_root:
                self.counts["directories"] += 1
        elif info.file_type is FileType.SYMLINK:
            self.counts["symlinks"] += 1
        else:
            self.counts["files"] += 1
        return None


def run(args: argparse.Namespace) -> Mapping[str, int]:
    """Walk ``args.directory`` and print the result as requested.

    Returns:
        The summary counts.

    Raises:
        Exception: The first entry error when ``args.error_action`` is "fail".
    """
    if args.tree:
        tree = WalkTree(
            args.directory,
            follow_symlinks=args.follow_symlinks,
            error_action=ErrorAction.RAISE if args.error_action == "fail" else ErrorAction.IGNORE,
        )
        for line in tree.stream_tree_representation():
            print(line)
        if args.error_action == "warn":
            for path, error in tree.iterate_errors():
                warn(path, error)
        return {
            "directories": tree.get_directory_count(),
            "files": tree.get_file_count(),
            "symlinks": tree.get_symlink_count(),
            "errors": tree.get_error_count(),
        }

    lister = PathLister(sys.stdout, args.error_action)
    options = [follow_symlinks()] if args.follow_symlinks else []
    walk(args.directory, lister, *options)
    return lister.counts


def main() -> None:
    """Main entry point for the symwalk command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)
        configure_logging(args.verbose)
        logger.debug("Walking %s (follow symlinks: %s)", args.directory, args.follow_symlinks)

        counts = run(args)

        if args.summary == "stdout":
            print("\n" + format_counts(counts))
        elif args.summary == "stderr":
            print(format_counts(counts), file=sys.stderr)
        sys.stdout.flush()

    except BrokenPipeError:
        # Silence the second failure when the interpreter flushes stdout on exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
