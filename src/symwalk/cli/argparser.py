"""Command-line argument parsing for symwalk.

This module defines the command-line interface for symwalk,
handling argument parsing and validation.
"""

import argparse

from symwalk import __version__


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with symwalk's options.
    """
    description = """
    symwalk: Walk a directory tree, optionally following symbolic links.

    Every entry below the given path, the path itself included, is listed one per
    line, parents before children and siblings in sorted order. Paths are printed
    as reached from the given path, even where a followed symbolic link points
    elsewhere on disk.

    Key Features:
    - Optional symbolic link following with loop detection
    - Tree-style visualization
    - Configurable error handling (ignore, warn, fail)
    - Summary counts of directories, files, symlinks and errors
    """

    epilog = """
    Examples:
      # List every entry, symbolic links shown but not followed
      symwalk /path/to/project

      # Follow symbolic links (loops are reported, not followed)
      symwalk -L /path/to/project

      # Show a tree instead of a flat list
      symwalk -t /path/to/project

      # Process with different error handling
      symwalk -P warn /path/to/project    # Continue with warnings (default)
      symwalk -P fail /path/to/project    # Stop at the first error
      symwalk -P ignore /path/to/project  # Skip silently

      # Print summary to stderr
      symwalk -s stderr /path/to/project

      # Display version information and exit
      symwalk --version
    """

    parser = argparse.ArgumentParser(
        prog="symwalk",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"symwalk {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=str,
        help="The path to walk. All paths in the output start with this path.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help=(
            "Follow symbolic links during traversal. By default, symlinks are listed as symlinks "
            "without following."
        ),
    )
    parser.add_argument(
        "-t",
        "--tree",
        action="store_true",
        help="Print a tree visualization instead of one path per line.",
    )
    parser.add_argument(
        "-P",
        "--error-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle entries that cannot be read or resolved (default: warn).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print summary report. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages about the traversal to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.directory.strip():
        raise ValueError("directory must not be empty")
