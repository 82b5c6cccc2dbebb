"""Tests for permission string parsing and formatting."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from resyslib.features.io import (
    InvalidPermissionStringError,
    apply_permission_string,
    format_permissions,
    parse_permission_string,
    read_permission_string,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("rwxr-xr-x", 0o755),
        ("-rw-r--r--", 0o644),
        ("drwx------", 0o700),
        ("rwsr-xr-x", 0o4755),
        ("rwSr--r--", 0o4644),
        ("rwxrwxrwt", 0o1777),
        ("rw-r--r-T", 0o1644),
        ("rwsr-sr-t", 0o7755),
        ("755", 0o755),
        ("0644", 0o644),
        ("0o4755", 0o4755),
        ("  rw-------  ", 0o600),
    ],
)
def test_parse_accepted_forms(value: str, expected: int) -> None:
    assert parse_permission_string(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "888", "rwxr-xr-", "xwxr-xr-x", "?rwxr-xr-x", "rwxr-xr-xx", "rwzr-xr-x"],
)
def test_parse_rejects_malformed_values(value: str) -> None:
    with pytest.raises(InvalidPermissionStringError) as excinfo:
        _ = parse_permission_string(value)

    assert excinfo.value.value == value
    assert excinfo.value.reason
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (0o755, "rwxr-xr-x"),
        (0o4755, "rwsr-xr-x"),
        (0o1644, "rw-r--r-T"),
        (0o2750, "rwxr-s---"),
        (stat.S_IFREG | 0o644, "rw-r--r--"),
        (0, "---------"),
    ],
)
def test_format_permissions(mode: int, expected: str) -> None:
    assert format_permissions(mode) == expected


def test_apply_then_read_permissions(tmp_path: Path) -> None:
    target = tmp_path / "secret.txt"
    _ = target.write_text("hidden")

    applied = apply_permission_string(target, "rw-------")

    assert applied == 0o600
    assert read_permission_string(target) == "rw-------"
    assert stat.S_IMODE(target.stat().st_mode) == 0o600


def test_apply_rejects_invalid_value_without_touching_file(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    _ = target.write_text("x")
    target.chmod(0o644)

    with pytest.raises(InvalidPermissionStringError):
        _ = apply_permission_string(target, "nonsense")

    assert read_permission_string(target) == "rw-r--r--"
