from pathlib import Path
from typing import Any

from pytest import fixture, raises

from slidemodel.configuring import settings as settings_module
from slidemodel.configuring.settings import Settings
from slidemodel.exceptions import SettingsError


@fixture
def user_config_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    user_config_dir = tmp_path / "user"
    user_config_dir.mkdir()
    monkeypatch.setattr(
        settings_module, "appdirs_user_config_dir", lambda _: str(user_config_dir)
    )
    return user_config_dir


@fixture
def workdir(tmp_path: Path) -> Path:
    workdir = tmp_path / "work"
    workdir.mkdir()
    return workdir


def test_defaults(user_config_dir: Path, workdir: Path) -> None:
    assert Settings.from_yaml(workdir) == Settings(json_indent=2, exclude_none=False)


def test_workdir_overrides_user_config(user_config_dir: Path, workdir: Path) -> None:
    (user_config_dir / "slidemodel.yml").write_text(
        "json_indent: 4\nexclude_none: true\n", encoding="utf8"
    )
    (workdir / "slidemodel.yml").write_text("json_indent: null\n", encoding="utf8")

    assert Settings.from_yaml(workdir) == Settings(json_indent=None, exclude_none=True)


def test_empty_file_is_ignored(user_config_dir: Path, workdir: Path) -> None:
    (workdir / "slidemodel.yml").write_text("", encoding="utf8")

    assert Settings.from_yaml(workdir) == Settings()


def test_invalid_settings(user_config_dir: Path, workdir: Path) -> None:
    (workdir / "slidemodel.yml").write_text("json_indent: wide\n", encoding="utf8")

    with raises(SettingsError):
        Settings.from_yaml(workdir)


def test_unknown_setting(user_config_dir: Path, workdir: Path) -> None:
    (workdir / "slidemodel.yml").write_text("theme: dark\n", encoding="utf8")

    with raises(SettingsError, match="theme"):
        Settings.from_yaml(workdir)


def test_settings_file_must_hold_a_mapping(
    user_config_dir: Path, workdir: Path
) -> None:
    (workdir / "slidemodel.yml").write_text("- 1\n- 2\n", encoding="utf8")

    with raises(SettingsError, match="mapping"):
        Settings.from_yaml(workdir)


def test_malformed_settings_file(user_config_dir: Path, workdir: Path) -> None:
    (user_config_dir / "slidemodel.yml").write_text(
        "json_indent: [\n", encoding="utf8"
    )

    with raises(SettingsError, match="could not parse"):
        Settings.from_yaml(workdir)
