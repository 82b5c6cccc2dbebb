"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from resyslib.platform.logging import DEFAULT_LOG_FILE
from resyslib.ui.cli.args import (
    ArgumentParser,
    ConcatArgs,
    DescribeArgs,
    FindArgs,
    IsFileArgs,
    PermissionsArgs,
    PlatformArgs,
    RemoveDirectoriesArgs,
)


@pytest.fixture
def mock_logging(mocker: MockerFixture):
    """Patch configuration loading and logger setup in the parser module."""

    mock_config = mocker.patch("resyslib.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    mock_setup_logger = mocker.patch("resyslib.ui.cli.args.parser.setup_logger")
    return mock_config, mock_setup_logger


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    rmdir_args: Namespace = parser.parse_args(
        ["rmdir", "a", "b", "--only-if-empty", "--with-parent", "--stop-on-error"]
    )
    assert rmdir_args.command == "rmdir"
    assert rmdir_args.paths == ["a", "b"]
    assert rmdir_args.only_if_empty and rmdir_args.with_parent and rmdir_args.stop_on_error

    find_args: Namespace = parser.parse_args(["find", "src", "--pattern", "*.py", "--dirs"])
    assert find_args.pattern == "*.py"
    assert find_args.dirs
    assert not find_args.no_recursive


def test_subcommand_is_required() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args([])


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["--verbose", "--quiet", "is-file", "x"])


def test_perms_requires_exactly_one_action() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["perms"])
    with pytest.raises(SystemExit):
        _ = parser.parse_args(["perms", "--parse", "755", "--show", "file"])


def test_process_args_configures_logging(mock_logging) -> None:
    mock_config, mock_setup_logger = mock_logging

    args = ArgumentParser.process_args(["is-file", "notes.txt"])

    assert args == IsFileArgs(command="is-file", path="notes.txt", quiet=False)
    assert mock_setup_logger.call_args.kwargs["log_file"] == DEFAULT_LOG_FILE
    mock_config.load.assert_called_once()


def test_process_args_uses_configured_log_file(mock_logging, tmp_path: Path) -> None:
    mock_config, mock_setup_logger = mock_logging
    mock_config.load.return_value.log_file = tmp_path / "custom.log"

    _ = ArgumentParser.process_args(["describe", "a.txt"])

    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "custom.log"


@pytest.mark.parametrize(
    ("flags", "level"),
    [(["--verbose"], logging.DEBUG), (["--quiet"], logging.ERROR)],
)
def test_process_args_log_levels(mock_logging, flags: list[str], level: int) -> None:
    _, mock_setup_logger = mock_logging

    args = ArgumentParser.process_args([*flags, "describe", "a.txt"])

    assert isinstance(args, DescribeArgs)
    assert args.quiet is (level == logging.ERROR)
    assert mock_setup_logger.call_args.kwargs["console_level"] == level


def test_process_args_rmdir(mock_logging) -> None:
    args = ArgumentParser.process_args(["rmdir", "one", "two", "--with-parent"])

    assert args == RemoveDirectoriesArgs(
        command="rmdir",
        paths=[Path("one"), Path("two")],
        only_if_empty=False,
        with_parent=True,
        stop_on_error=False,
        quiet=False,
    )


def test_process_args_find(mock_logging) -> None:
    args = ArgumentParser.process_args(["find", "src", "--no-recursive"])

    assert args == FindArgs(
        command="find",
        root=Path("src"),
        pattern="*",
        directories=False,
        recursive=False,
        quiet=False,
    )


def test_process_args_concat(mock_logging) -> None:
    args = ArgumentParser.process_args(["concat", "a.txt", "b.txt", "-o", "out.txt", "--separator", "\n"])

    assert args == ConcatArgs(
        command="concat",
        sources=[Path("a.txt"), Path("b.txt")],
        output=Path("out.txt"),
        separator="\n",
        quiet=False,
    )

    console_only = ArgumentParser.process_args(["concat", "a.txt"])
    assert isinstance(console_only, ConcatArgs)
    assert console_only.output is None


def test_process_args_perms(mock_logging) -> None:
    assert ArgumentParser.process_args(["perms", "--parse", "rwxr-xr-x"]) == PermissionsArgs(
        command="perms", action="parse", value="rwxr-xr-x", path=None, quiet=False
    )
    assert ArgumentParser.process_args(["perms", "--show", "f.txt"]) == PermissionsArgs(
        command="perms", action="show", value=None, path=Path("f.txt"), quiet=False
    )
    assert ArgumentParser.process_args(["perms", "--apply", "644", "f.txt"]) == PermissionsArgs(
        command="perms", action="apply", value="644", path=Path("f.txt"), quiet=False
    )


def test_process_args_platform(mock_logging) -> None:
    assert ArgumentParser.process_args(["platform", "--android"]) == PlatformArgs(
        command="platform", android=True, quiet=False
    )
