# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Command-line option definitions and the override mapping table."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

import click

from ..config import RunSettings
from ..tools.linter import LinterSpec

PATHS_PARAM: Final[str] = "paths"
HELP_OPTION_NAMES: Final[tuple[str, ...]] = ("-h", "--help")
VERSION_OPTION: Final[str] = "--version"
LINTER_PARAM_PREFIX: Final[str] = "linter_"


class OverrideKind(StrEnum):
    """Kinds of value a parsed CLI parameter overrides."""

    SETTING = "setting"
    LINTER = "linter"


@dataclass(frozen=True, slots=True)
class OverrideTarget:
    """Where a parsed CLI parameter value is applied.

    Attributes:
        kind: Whether the parameter sets a run setting or toggles a linter.
        key: Setting field name, or the linter's CLI option name.
        index: Position of the linter in configured order (linters only).
    """

    kind: OverrideKind
    key: str
    index: int | None = None


OverrideTable = dict[str, OverrideTarget]


@dataclass(frozen=True, slots=True)
class SettingOption:
    """Static description of one built-in option."""

    name: str
    long: str
    help_text: str
    short: str | None = None
    is_flag: bool = True
    metavar: str | None = None

    @property
    def decls(self) -> list[str]:
        long_decl = f"--{self.long}/--no-{self.long}" if self.is_flag else f"--{self.long}"
        decls = [long_decl]
        if self.short:
            decls.append(f"-{self.short}")
        decls.append(self.name)
        return decls


SETTING_OPTIONS: Final[tuple[SettingOption, ...]] = (
    SettingOption("changed_only", "changed-only", "only run source files with changes", short="c"),
    SettingOption(
        "changed_ref",
        "changed-ref",
        "reference for changes, use with `-c` opt",
        short="r",
        is_flag=False,
        metavar="VALUE",
    ),
    SettingOption("autocorrect", "autocorrect", "autocorrect any correctable violations", short="a"),
    SettingOption("dry_run", "dry-run", "output each linter command to stdout without executing"),
    SettingOption("list", "list", "list source files on stdout", short="l"),
    SettingOption("debug", "debug", "run in debug mode", short="d"),
)


def toggle_long_name(linter: LinterSpec) -> str:
    """Return the long flag name for ``linter`` (``eslint_js`` -> ``eslint-js``)."""

    return str(linter.cli_option_name).strip().lower().replace("_", "-")


@dataclass(slots=True)
class _FlagRegistry:
    """Track option strings already claimed while building parameters."""

    longs: set[str] = field(default_factory=set)
    shorts: set[str] = field(default_factory=set)

    @classmethod
    def with_builtins(cls) -> _FlagRegistry:
        registry = cls()
        registry.longs.update({"help", VERSION_OPTION.removeprefix("--")})
        registry.shorts.add(HELP_OPTION_NAMES[0].removeprefix("-"))
        for option in SETTING_OPTIONS:
            registry.longs.add(option.long)
            if option.short:
                registry.shorts.add(option.short)
        return registry

    def claim_long(self, name: str) -> bool:
        if not name or name in self.longs or f"no-{name}" in self.longs:
            return False
        self.longs.update({name, f"no-{name}"})
        return True

    def claim_short(self, abbrev: str) -> bool:
        if not abbrev or abbrev in self.shorts:
            return False
        self.shorts.add(abbrev)
        return True


def _setting_param(option: SettingOption) -> click.Option:
    if option.is_flag:
        return click.Option(option.decls, is_flag=True, default=None, help=option.help_text)
    return click.Option(option.decls, default=None, type=str, metavar=option.metavar, help=option.help_text)


def _linter_param(linter: LinterSpec, index: int, registry: _FlagRegistry) -> click.Option | None:
    """Return the toggle option for ``linter`` or ``None`` when every flag collides.

    A colliding long name or abbreviation is dropped on its own; earlier
    options keep their flags.
    """

    decls: list[str] = []
    long_name = toggle_long_name(linter)
    if registry.claim_long(long_name):
        decls.append(f"--{long_name}/--no-{long_name}")
    abbrev = str(linter.cli_abbrev)
    if registry.claim_short(abbrev):
        decls.append(f"-{abbrev}")
    if not decls:
        return None
    decls.append(f"{LINTER_PARAM_PREFIX}{index}")
    return click.Option(
        decls,
        default=None,
        is_flag=True,
        help=f"specifically run or don't run {linter.name}",
    )


def build_cli_params(linters: Sequence[LinterSpec]) -> tuple[list[click.Parameter], OverrideTable]:
    """Return click parameters plus the table mapping parameter names to targets.

    Linter toggles come first, in configured order, followed by the built-in
    settings and the positional path arguments.

    Args:
        linters: Configured linters.

    Returns:
        tuple[list[click.Parameter], OverrideTable]: Parameters and their targets.
    """

    registry = _FlagRegistry.with_builtins()
    params: list[click.Parameter] = []
    table: OverrideTable = {}
    for index, linter in enumerate(linters):
        param = _linter_param(linter, index, registry)
        if param is None:
            continue
        params.append(param)
        table[str(param.name)] = OverrideTarget(OverrideKind.LINTER, str(linter.cli_option_name), index)
    for option in SETTING_OPTIONS:
        params.append(_setting_param(option))
        table[option.name] = OverrideTarget(OverrideKind.SETTING, option.name)
    params.append(click.Argument([PATHS_PARAM], nargs=-1, metavar="[FILES]..."))
    return params, table


def apply_overrides(
    params: Mapping[str, object],
    table: Mapping[str, OverrideTarget],
    *,
    settings: RunSettings,
    linters: Sequence[LinterSpec],
) -> None:
    """Apply parsed CLI values to ``settings`` and ``linters``.

    Parameters absent from ``table`` (the positional paths) are ignored, as
    are ``None`` values, which mean the option was not given.

    Args:
        params: Parsed parameter values keyed by parameter name.
        table: Mapping from parameter name to override target.
        settings: Run settings updated in place.
        linters: Linters whose explicit enablement may be set.
    """

    setting_overrides: dict[str, object] = {}
    for param_name, value in params.items():
        target = table.get(param_name)
        if target is None or value is None:
            continue
        if target.kind is OverrideKind.SETTING:
            setting_overrides[target.key] = value
        elif target.index is not None:
            linters[target.index].specifically_enabled = bool(value)
    settings.apply(setting_overrides)


__all__ = [
    "HELP_OPTION_NAMES",
    "OverrideKind",
    "OverrideTable",
    "OverrideTarget",
    "PATHS_PARAM",
    "SETTING_OPTIONS",
    "SettingOption",
    "apply_overrides",
    "build_cli_params",
    "toggle_long_name",
]
