"""Runtime settings."""

from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from banglit.utils.io import read_yaml


DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {"level": "INFO", "format": "pretty", "file": None},
    "transliteration": {"default_mode": "avro", "rules_file": None},
}


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml, filling in defaults for missing keys.

    Args:
        path: Settings file (default: the bundled banglit/data/settings.yaml)

    Returns:
        Settings dict with "logging" and "transliteration" sections

    Raises:
        FileNotFoundError: If an explicit path does not exist
        ValueError: If the file is not a mapping
    """
    if path is None:
        resource = files("banglit") / "data" / "settings.yaml"
        loaded = yaml.safe_load(resource.read_text(encoding="utf-8"))
    else:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"settings file not found: {path}")
        loaded = read_yaml(path)

    if loaded is not None and not isinstance(loaded, dict):
        raise ValueError(f"settings must be a mapping, got {type(loaded).__name__}")

    settings: dict[str, Any] = {}
    for section, defaults in DEFAULT_SETTINGS.items():
        settings[section] = {**defaults, **((loaded or {}).get(section) or {})}
    return settings
