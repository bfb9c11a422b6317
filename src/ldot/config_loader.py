# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Load ``.l.yml`` into a :class:`~ldot.config.Config`."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

import yaml
from pydantic import ValidationError

from .config import Config, ConfigError

CONFIG_FILE_NAME: Final[str] = ".l.yml"
RECOGNISED_KEYS: Final[tuple[str, ...]] = ("source_file_paths", "ignored_file_paths", "linters")


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        return Config().model_dump(include=set(RECOGNISED_KEYS))

    def describe(self) -> str:
        return "Built-in defaults"


class YamlConfigSource:
    """Read the recognised top-level fields from a YAML document."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.name = str(path)

    def load(self) -> Mapping[str, Any]:
        """Return recognised, non-null top-level fields; ``{}`` when the file is absent.

        Raises:
            ConfigError: If the document is not valid YAML or not a mapping.
        """

        if not self.path.exists():
            return {}
        try:
            with self.path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {self.path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration at {self.path} must be a mapping")
        return {key: data[key] for key in RECOGNISED_KEYS if data.get(key) is not None}

    def describe(self) -> str:
        return f"YAML configuration at {self.name}"


def load_config(root: Path | None = None) -> Config:
    """Return the configuration for the project rooted at ``root``.

    Missing files and missing or null fields fall back to the built-in
    defaults.

    Args:
        root: Project root containing ``.l.yml``; defaults to the current
            working directory.

    Returns:
        Config: Validated configuration.

    Raises:
        ConfigError: If the document is malformed or a linter descriptor is invalid.
    """

    project_root = root if root is not None else Path.cwd()
    source = YamlConfigSource(project_root / CONFIG_FILE_NAME)
    payload = {**DefaultConfigSource().load(), **source.load()}
    try:
        return Config.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source.describe()}: {exc}") from exc


__all__ = [
    "CONFIG_FILE_NAME",
    "DefaultConfigSource",
    "YamlConfigSource",
    "load_config",
]
