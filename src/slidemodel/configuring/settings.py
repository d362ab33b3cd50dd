from pathlib import Path
from typing import Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import BaseModel, ConfigDict, ValidationError
from yaml import YAMLError

from .. import app_name
from ..exceptions import SettingsError
from ..utils import load_yaml

settings_filename = f"{app_name}.yml"


class Settings(BaseModel):
    """Options of the JSON output of chapters."""

    model_config = ConfigDict(extra="forbid")

    json_indent: int | None = 2
    """Indentation of the JSON output. `None` writes everything on a single line."""

    exclude_none: bool = False
    """Leave out absent optional fields instead of writing them as `null`."""

    @classmethod
    def from_yaml(cls, workdir: Path) -> Self:
        """Merge the settings files of the user config dir and of `workdir`.

        Files that don't exist or are empty are skipped. Values defined in \
        `workdir` take precedence over the ones defined in the user config dir.

        Args:
            workdir: Directory in which to look for a local settings file.

        Raises:
            SettingsError: Raised if a file is not valid YAML, does not hold a \
                mapping, or if the merged content is not valid.

        Returns:
            The resolved settings.
        """
        directories = [Path(appdirs_user_config_dir(app_name)), workdir.resolve()]
        content: dict[str, Any] = {}
        for path in (d / settings_filename for d in directories):
            content.update(_load_settings_file(path))
        try:
            return cls.model_validate(content)
        except ValidationError as e:
            msg = f"invalid settings in {settings_filename} files: {e}"
            raise SettingsError(msg) from e


def _load_settings_file(path: Path) -> dict[str, Any]:
    try:
        document = load_yaml(path)
    except FileNotFoundError:
        return {}
    except YAMLError as e:
        msg = f"could not parse {path}: {e}"
        raise SettingsError(msg) from e
    if document is None:
        return {}
    if not isinstance(document, dict):
        kind = type(document).__name__
        msg = f"{path} should hold a mapping of settings, not a {kind}"
        raise SettingsError(msg)
    return document
