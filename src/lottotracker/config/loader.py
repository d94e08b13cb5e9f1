"""Load page selectors from YAML or JSON."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, TextIO

import yaml

from .schema import PageSelectors

_READERS: dict[str, tuple[str, Callable[[TextIO], Any], type[Exception]]] = {
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".json": ("JSON", json.load, json.JSONDecodeError),
}


class ConfigLoadError(ValueError):
    """Raised when a selector file cannot be loaded or parsed."""


def load_selectors(path: str | Path) -> PageSelectors:
    """Load selector file from YAML/JSON and validate with Pydantic."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Selector file not found: {config_path}")

    suffix = config_path.suffix.lower()
    if suffix not in _READERS:
        raise ConfigLoadError(
            f"Unsupported config format '{suffix}'. Use .yaml/.yml or .json."
        )

    data = _read(config_path, *_READERS[suffix])
    if not isinstance(data, dict):
        raise ConfigLoadError("Config root must be a JSON/YAML object.")

    return PageSelectors.model_validate(data)


def _read(
    path: Path,
    label: str,
    reader: Callable[[TextIO], Any],
    error_type: type[Exception],
) -> Any:
    with path.open("r", encoding="utf-8") as file:
        try:
            parsed = reader(file)
        except error_type as exc:
            raise ConfigLoadError(f"Invalid {label} in {path}: {exc}") from exc

    return {} if parsed is None else parsed
