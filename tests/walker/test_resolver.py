"""Tests for optional symlink resolution."""

import os

import pytest

from symwalk.types import FileType
from symwalk.walker.file_info import lstat_info
from symwalk.walker.resolver import optionally_evaluate_symlink


@pytest.fixture
def links(tmp_path):
    base = tmp_path.resolve()
    (base / "dir").mkdir()
    (base / "file.txt").write_text("data")
    try:
        os.symlink(base / "dir", base / "dir_link")
        os.symlink(base / "file_link_target_missing", base / "dangling")
        os.symlink(base / "dir_link", base / "chained")
        os.symlink(base / "self_loop", base / "self_loop")
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported on this platform")
    return base


def test_not_following_is_a_no_op(links):
    path = str(links / "dir_link")
    info = lstat_info(path)
    assert optionally_evaluate_symlink(path, info, False) == (path, info)


def test_non_symlink_is_a_no_op(links):
    path = str(links / "file.txt")
    info = lstat_info(path)
    assert optionally_evaluate_symlink(path, info, True) == (path, info)


def test_symlink_is_resolved_and_probed_again(links):
    path = str(links / "dir_link")
    resolved_path, resolved_info = optionally_evaluate_symlink(path, lstat_info(path), True)
    assert resolved_path == str(links / "dir")
    assert resolved_info.file_type is FileType.DIRECTORY
    assert resolved_info.name == "dir"


def test_chained_symlinks_are_fully_resolved(links):
    path = str(links / "chained")
    resolved_path, resolved_info = optionally_evaluate_symlink(path, lstat_info(path), True)
    assert resolved_path == str(links / "dir")
    assert resolved_info.is_dir()


def test_dangling_symlink_raises(links):
    path = str(links / "dangling")
    with pytest.raises(FileNotFoundError):
        optionally_evaluate_symlink(path, lstat_info(path), True)


def test_self_referencing_symlink_raises(links):
    path = str(links / "self_loop")
    with pytest.raises(OSError):
        optionally_evaluate_symlink(path, lstat_info(path), True)
