# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for the lint dispatcher."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .tools.linter import LinterSpec

DEFAULT_SOURCE_FILE_PATHS: Final[tuple[str, ...]] = ("./",)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LinterConfig(BaseModel):
    """Descriptor of one configured linting tool as written in ``.l.yml``."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    name: str
    cmd: str
    extensions: list[str]
    autocorrect_cmd: str | None = None
    cli_option_name: str | None = None
    cli_abbrev: str | None = None

    def to_spec(self) -> LinterSpec:
        """Return a fresh :class:`LinterSpec` built from this descriptor."""

        return LinterSpec(
            name=self.name,
            cmd=self.cmd,
            extensions=tuple(self.extensions),
            autocorrect_cmd=self.autocorrect_cmd,
            cli_option_name=self.cli_option_name,
            cli_abbrev=self.cli_abbrev,
        )


class RunSettings(BaseModel):
    """Per-run switches, set from CLI flags."""

    model_config = ConfigDict(validate_assignment=True)

    changed_only: bool = False
    changed_ref: str = ""
    dry_run: bool = False
    list: bool = False
    autocorrect: bool = False
    debug: bool = False

    def apply(self, overrides: Mapping[str, object]) -> None:
        """Assign every non-``None`` value in ``overrides`` to its setting.

        Args:
            overrides: Mapping of setting names to values; ``None`` means the
                setting was not supplied and keeps its current value.

        Raises:
            KeyError: If ``overrides`` names a setting that does not exist.
        """

        for name, value in overrides.items():
            if name not in type(self).model_fields:
                raise KeyError(name)
            if value is not None:
                setattr(self, name, value)


class Config(BaseModel):
    """Effective configuration: path scopes, linters and run settings."""

    model_config = ConfigDict(validate_assignment=True)

    source_file_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_SOURCE_FILE_PATHS))
    ignored_file_paths: list[str] = Field(default_factory=list)
    linters: list[LinterConfig] = Field(default_factory=list)
    settings: RunSettings = Field(default_factory=RunSettings)

    @field_validator("source_file_paths", "ignored_file_paths", mode="before")
    @classmethod
    def _coerce_path_list(cls, value: object) -> object:
        if isinstance(value, str):
            return [value]
        return value

    def build_linters(self) -> list[LinterSpec]:
        """Return one :class:`LinterSpec` per configured linter, in order."""

        return [linter.to_spec() for linter in self.linters]


__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_SOURCE_FILE_PATHS",
    "LinterConfig",
    "RunSettings",
]
