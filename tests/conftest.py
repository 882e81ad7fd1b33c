"""Test configuration and fixtures for symwalk."""

import os

import pytest


class Recorder:
    """Walk callback that records every call and answers from a table of actions."""

    def __init__(self, actions=None):
        self.calls = []
        self.actions = actions or {}

    def __call__(self, path, info, error):
        self.calls.append((path, info, error))
        return self.actions.get(path)

    @property
    def paths(self):
        return [path for path, _, _ in self.calls]

    def errors(self):
        return {path: error for path, _, error in self.calls if error is not None}


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder


@pytest.fixture
def sample_tree(tmp_path):
    """Create r/ holding a/x and b, the layout used throughout the walk tests."""
    root = tmp_path.resolve() / "r"
    (root / "a").mkdir(parents=True)
    (root / "a" / "x").write_text("x")
    (root / "b").write_text("b")
    return root


@pytest.fixture
def symlink_tree(tmp_path):
    """Create a tree with a link to a file, a link to a directory and a loop.

    Layout:
        outside/target.txt
        outside/dir/inner.txt
        r/data/file.txt
        r/data/back -> r                  (loop)
        r/dir_link  -> outside/dir
        r/file_link -> outside/target.txt
    """
    base = tmp_path.resolve()
    outside = base / "outside"
    (outside / "dir").mkdir(parents=True)
    (outside / "dir" / "inner.txt").write_text("inner")
    (outside / "target.txt").write_text("target")
    root = base / "r"
    (root / "data").mkdir(parents=True)
    (root / "data" / "file.txt").write_text("content")
    try:
        os.symlink(root, root / "data" / "back")
        os.symlink(outside / "dir", root / "dir_link")
        os.symlink(outside / "target.txt", root / "file_link")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported on this platform")
    return root
