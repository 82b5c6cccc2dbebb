"""
Summary: Validate Summary/Why header docstring schema for selected modules.
Why: Prevent regression to inconsistent header formats across touched files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER_OPEN: str = '"""'
HEADER_CLOSE: str = '"""'
SUMMARY_PREFIX: str = "Summary: "
WHY_PREFIX: str = "Why: "
HEADER_LENGTH: int = 3

REPO_ROOT: Path = Path(__file__).resolve().parents[1]

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/resyslib/features/collections/hash_map.py"),
    Path("src/resyslib/features/io/domain/file_model.py"),
    Path("src/resyslib/features/io/domain/permissions.py"),
    Path("src/resyslib/features/io/usecases/ports.py"),
    Path("src/resyslib/features/io/usecases/directory_remover.py"),
    Path("src/resyslib/features/io/usecases/file_finder.py"),
    Path("src/resyslib/features/runtime/usecases/ports.py"),
    Path("src/resyslib/features/runtime/adapters/android.py"),
    Path("src/resyslib/platform/logging/handlers.py"),
    Path("tests/test_module_header_schema.py"),
)


def _header_lines(module_path: Path) -> list[str]:
    """Return the opening docstring lines, accepting an inline or separate opener."""

    content_lines = (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines()
    start_index = next(
        (index for index, line in enumerate(content_lines) if line.strip()),
        None,
    )
    assert start_index is not None, f"{module_path} must not be empty"

    lines = content_lines[start_index:]
    if lines[0].strip() == HEADER_OPEN:
        lines = lines[1:]
    else:
        assert lines[0].startswith(HEADER_OPEN), f"{module_path} must start with header docstring"
        lines = [lines[0].removeprefix(HEADER_OPEN), *lines[1:]]

    assert len(lines) >= HEADER_LENGTH, f"{module_path} must provide a complete header"
    return lines[:HEADER_LENGTH]


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_summary_why_schema(module_path: Path) -> None:
    """Ensure module header docstring uses Summary and Why lines."""

    summary_line, why_line, closing_line = _header_lines(module_path)

    assert summary_line.startswith(SUMMARY_PREFIX), (
        f"{module_path} summary line must begin with '{SUMMARY_PREFIX}'"
    )
    assert why_line.startswith(WHY_PREFIX), (
        f"{module_path} why line must begin with '{WHY_PREFIX}'"
    )
    assert closing_line.strip() == HEADER_CLOSE, (
        f"{module_path} header must close with triple quotes"
    )

    assert summary_line.removeprefix(SUMMARY_PREFIX).strip(), (
        f"{module_path} summary text cannot be empty"
    )
    assert why_line.removeprefix(WHY_PREFIX).strip(), (
        f"{module_path} why text cannot be empty"
    )
