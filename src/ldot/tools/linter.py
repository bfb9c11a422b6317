# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configured linting tools and their command construction."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from ..orchestration.selection import ResolvedScope

ARGUMENT_SEPARATOR: Final[str] = " "
UNSCOPED_ARGUMENT: Final[str] = "."
_NON_WORD_RUN: Final[re.Pattern[str]] = re.compile(r"\W+")


def default_cli_option_name(name: str) -> str:
    """Return the CLI toggle name derived from a linter ``name``.

    Args:
        name: Display name of the linter.

    Returns:
        str: ``name`` lowercased with each run of non-word characters replaced
        by a single underscore.
    """

    return _NON_WORD_RUN.sub("_", name.lower())


def default_cli_abbrev(name: str) -> str:
    """Return the single-letter CLI abbreviation derived from ``name``."""

    return name[:1].lower()


def build_invocation(template: str, files: Sequence[str]) -> str:
    """Return the shell command string running ``template`` against ``files``.

    Args:
        template: Configured command prefix.
        files: Arguments appended in order.

    Returns:
        str: ``template`` followed by the space-joined ``files``.
    """

    return ARGUMENT_SEPARATOR.join((template, *files))


@dataclass(slots=True)
class LinterSpec:
    """One configured linting tool.

    Equality considers identity, command, extensions and CLI toggle metadata
    only; the autocorrect template and enablement state are ignored.
    """

    name: str
    cmd: str
    extensions: tuple[str, ...]
    autocorrect_cmd: str | None = field(default=None, compare=False)
    cli_option_name: str | None = None
    cli_abbrev: str | None = None
    _specifically_enabled: bool | None = field(default=None, init=False, compare=False, repr=False)
    _enabled: bool = field(default=True, init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        self.extensions = tuple(self.extensions)
        if self.cli_option_name is None:
            self.cli_option_name = default_cli_option_name(self.name)
        if self.cli_abbrev is None:
            self.cli_abbrev = default_cli_abbrev(self.name)

    @property
    def specifically_enabled(self) -> bool | None:
        """Return the CLI override: ``True``, ``False`` or ``None`` when unset."""

        return self._specifically_enabled

    @specifically_enabled.setter
    def specifically_enabled(self, value: bool | None) -> None:
        if value is False:
            self._enabled = False
        self._specifically_enabled = value

    @property
    def is_specifically_enabled(self) -> bool:
        """Return whether the linter was explicitly enabled on the command line."""

        return bool(self._specifically_enabled)

    @property
    def enabled(self) -> bool:
        """Return whether the linter runs by default (not explicitly disabled)."""

        return self._enabled

    def applicable_files(self, files: Sequence[str]) -> list[str]:
        """Return the subset of ``files`` whose extension this linter handles.

        Args:
            files: Candidate paths in scope order.

        Returns:
            list[str]: Matching paths, order preserved.
        """

        return [path for path in files if os.path.splitext(path)[1] in self.extensions]

    def command(self, scope: ResolvedScope) -> str | None:
        """Return the lint command for ``scope`` or ``None`` when nothing applies."""

        return self._command_for(self.cmd, scope)

    def autocorrect_command(self, scope: ResolvedScope) -> str | None:
        """Return the autocorrect command for ``scope``.

        Args:
            scope: Resolved file scope for the run.

        Returns:
            str | None: Command string, or ``None`` when no autocorrect template
            is configured or no file in ``scope`` applies.
        """

        if self.autocorrect_cmd is None:
            return None
        return self._command_for(self.autocorrect_cmd, scope)

    def _command_for(self, template: str, scope: ResolvedScope) -> str | None:
        if scope.unscoped:
            return build_invocation(template, (UNSCOPED_ARGUMENT,))
        applicable = self.applicable_files(scope.files)
        if not applicable:
            return None
        return build_invocation(template, applicable)


__all__ = [
    "ARGUMENT_SEPARATOR",
    "LinterSpec",
    "build_invocation",
    "default_cli_abbrev",
    "default_cli_option_name",
]
