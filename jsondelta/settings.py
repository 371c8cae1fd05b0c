"""User-editable diff settings, loaded from YAML or JSON files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from .exceptions import SettingsError
from .models import DiffOptions
from .utils import get_type_name

SECTION_KEYS = ("diff_settings", "diffSettings")


@dataclass
class DiffSettings:
    """Persisted comparison settings: ignored paths and key order mode."""
    ignored_paths: list[str] = field(default_factory=list)
    ignore_key_order: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> DiffSettings:
        """
        Build settings from a parsed document.

        The values may sit at the top level or under a ``diff_settings`` /
        ``diffSettings`` section, with snake_case or camelCase names.
        """
        if not isinstance(data, dict):
            raise SettingsError(f"Settings must be an object, got {get_type_name(data)}")

        for key in SECTION_KEYS:
            if key in data:
                data = data[key]
                if not isinstance(data, dict):
                    raise SettingsError(f"'{key}' must be an object, got {get_type_name(data)}")
                break

        paths = data.get("ignored_paths", data.get("ignoredPaths", []))
        if paths is None:
            paths = []
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise SettingsError("ignored_paths must be a list of strings")

        ignore_key_order = data.get("ignore_key_order", data.get("ignoreKeyOrder", True))
        if not isinstance(ignore_key_order, bool):
            raise SettingsError(
                f"ignore_key_order must be a boolean, got {get_type_name(ignore_key_order)}"
            )

        settings = cls(ignore_key_order=ignore_key_order)
        for path in paths:
            settings.add_path(path)
        return settings

    def add_path(self, path: str) -> bool:
        """Add a trimmed path; returns False for blanks and duplicates."""
        path = path.strip()
        if not path or path in self.ignored_paths:
            return False
        self.ignored_paths.append(path)
        return True

    def remove_path(self, path: str) -> bool:
        if path not in self.ignored_paths:
            return False
        self.ignored_paths.remove(path)
        return True

    def to_options(self) -> DiffOptions:
        return DiffOptions(
            exclusion_paths=list(self.ignored_paths),
            ignore_order=self.ignore_key_order,
        )

    def to_dict(self) -> dict:
        return {
            "ignored_paths": list(self.ignored_paths),
            "ignore_key_order": self.ignore_key_order,
        }


def load_settings(path: Union[str, Path]) -> DiffSettings:
    """
    Load settings from a YAML or JSON file.

    Raises:
        FileNotFoundError: if the file does not exist
        SettingsError: if the file cannot be parsed or has wrong types
    """
    settings_path = Path(path)
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with open(settings_path, 'r', encoding='utf-8') as f:
        content = f.read()

    # JSON is valid YAML, so one parser covers both
    try:
        data: Any = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsError(f"Failed to parse settings file: {e}", str(settings_path))

    if data is None:
        return DiffSettings()

    try:
        return DiffSettings.from_dict(data)
    except SettingsError as e:
        raise SettingsError(e.message, str(settings_path))
