"""Config loader.

Pipelines are described in YAML. Several files can be layered (a shared
base plus per-environment overrides) and a final dict of overrides can be
applied from code, for example from command-line options of an
application embedding mungepipe.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Iterable

import yaml

from .schema import AppConfig

PathLike = str | Path


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge mappings recursively; any non-mapping value in ``override`` wins."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _expand_env_vars(value: Any) -> Any:
    """Expand $VAR and ${VAR} in every string of a parsed config tree.

    Unset variables are left as written.
    """
    if isinstance(value, dict):
        return {key: _expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if isinstance(value, str):
        return os.path.expandvars(value)
    return value


def _read_yaml(path: PathLike) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(
    paths: PathLike | Iterable[PathLike],
    overrides: dict[str, Any] | None = None,
) -> AppConfig:
    """Load, merge and validate pipeline configuration.

    Later files override earlier ones and ``overrides`` is applied last.
    Lists such as ``pipeline.steps`` are replaced wholesale, never
    concatenated, so an override file can redefine the whole pipeline.

    Raises
    ------
    ValueError
        If a file does not contain a YAML mapping.
    pydantic.ValidationError
        If the merged configuration is invalid.
    """
    path_list = [paths] if isinstance(paths, (str, Path)) else list(paths)

    data: dict[str, Any] = {}
    for path in path_list:
        data = _deep_merge(data, _read_yaml(path))
    if overrides:
        data = _deep_merge(data, overrides)

    return AppConfig(**_expand_env_vars(data))
