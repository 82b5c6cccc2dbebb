"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from resyslib.config.config import Config
from resyslib.config.paths import default_config_path


def test_default_config_does_not_write_file(portable_repo_root: Path) -> None:
    """Loading without a file yields defaults and leaves the disk untouched."""

    config = Config.load()

    assert config.log_file is None
    assert config.console_log_level == "INFO"
    assert config.delete_continue_on_error is True
    assert config.concat_encoding == "utf-8"
    assert config.platform_probe_timeout == 5.0
    assert not default_config_path().exists()
    assert not (portable_repo_root / "config").exists()


def test_save_load_toml(portable_repo_root: Path) -> None:
    """Saved values should round-trip through the TOML file."""

    original = Config(
        log_file=Path("/test/logs/resyslib.log"),
        console_log_level="DEBUG",
        delete_continue_on_error=False,
        concat_encoding="latin-1",
        platform_probe_timeout=1.5,
    )
    written = original.save()
    assert written == default_config_path()

    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/resyslib.log")
    assert loaded.console_log_level == "DEBUG"
    assert loaded.delete_continue_on_error is False
    assert loaded.concat_encoding == "latin-1"
    assert loaded.platform_probe_timeout == 1.5


def test_saved_file_contains_guidance(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    target = Config().save()

    content = target.read_text(encoding="utf-8")
    assert content.startswith("# resyslib Configuration File")
    assert "delete_continue_on_error = true" in content
    assert "\nlog_file =" not in content


def test_empty_log_file_becomes_none(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text('log_file = ""\n', encoding="utf-8")

    assert Config.load().log_file is None


def test_unknown_keys_are_ignored(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text(
        'base_path = "/music"\nconcat_encoding = "utf-16"\n', encoding="utf-8"
    )

    loaded = Config.load()

    assert loaded.concat_encoding == "utf-16"
    assert not hasattr(loaded, "base_path")


def test_invalid_toml_raises(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir(parents=True)
    _ = config_file.write_text("this is = = not toml", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_singleton_behavior(portable_repo_root: Path) -> None:
    """Repeated loads return the cached instance."""

    _ = portable_repo_root
    first = Config.load()
    second = Config.load()
    assert first is second


def test_explicit_source_bypasses_singleton(portable_repo_root: Path, tmp_path: Path) -> None:
    cached = Config.load()
    explicit = tmp_path / "custom.toml"
    _ = explicit.write_text('console_log_level = "WARNING"\n', encoding="utf-8")

    loaded = Config.load(explicit)

    assert loaded is not cached
    assert loaded.console_log_level == "WARNING"
    assert Config.load() is cached
