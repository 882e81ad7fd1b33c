"""Unit tests for the argument parser module in symwalk CLI."""

import argparse

import pytest

from symwalk.cli.argparser import create_parser, validate_args


@pytest.fixture
def parser():
    return create_parser()


def test_create_parser(parser):
    assert isinstance(parser, argparse.ArgumentParser)
    assert parser.prog == "symwalk"


def test_parser_defaults(parser):
    args = parser.parse_args(["some/dir"])
    assert args.directory == "some/dir"
    assert args.follow_symlinks is False
    assert args.tree is False
    assert args.error_action == "warn"
    assert args.summary is None
    assert args.verbose is False


def test_parser_keeps_directory_as_given(parser):
    # Walk paths are built from the argument, so it must not be normalized
    assert parser.parse_args(["./some//dir/"]).directory == "./some//dir/"


def test_parser_all_options(parser):
    args = parser.parse_args(["-L", "-t", "-P", "fail", "-s", "stderr", "-v", "dir"])
    assert args.follow_symlinks is True
    assert args.tree is True
    assert args.error_action == "fail"
    assert args.summary == "stderr"
    assert args.verbose is True


def test_parser_long_options(parser):
    args = parser.parse_args(["--follow-symlinks", "--tree", "--error-action", "ignore", "--summary", "stdout", "d"])
    assert args.follow_symlinks is True
    assert args.tree is True
    assert args.error_action == "ignore"
    assert args.summary == "stdout"


def test_parser_rejects_invalid_choices(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["-P", "explode", "dir"])
    assert excinfo.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_parser_requires_directory(parser):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args([])
    assert excinfo.value.code == 2


def test_parser_version(parser, capsys):
    with pytest.raises(SystemExit) as excinfo:
        parser.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("symwalk ")


def test_validate_args_accepts_directory(parser):
    validate_args(parser.parse_args(["dir"]))


def test_validate_args_rejects_blank_directory(parser):
    with pytest.raises(ValueError, match="directory must not be empty"):
        validate_args(parser.parse_args(["  "]))
