"""Depth-first directory walking with optional symlink resolution.

This package provides the walk entry point together with the pieces it is built
from: option handling, entry metadata, directory listing and symlink resolution.
"""
