# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dispatch configured linters against a resolved scope."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import StrEnum

from ..config import RunSettings
from ..core.logging import ConsoleLogger
from ..core.runtime.process import CommandOptions, run_shell_command
from ..tools.linter import LinterSpec
from .selection import ResolvedScope

CommandRunner = Callable[[str], object]


class RunMode(StrEnum):
    """How a run surfaces linter commands.

    Autocorrect is not a mode: it only selects which template each linter
    renders, so it combines with any of these.
    """

    NORMAL = "normal"
    DRY_RUN = "dry_run"
    LIST = "list"

    @classmethod
    def from_settings(cls, settings: RunSettings) -> RunMode:
        """Return the mode implied by ``settings`` (list wins over dry run)."""

        if settings.list:
            return cls.LIST
        if settings.dry_run:
            return cls.DRY_RUN
        return cls.NORMAL


def run_linter_command(command: str) -> object:
    """Run ``command`` through the default shell, discarding its exit status."""

    return run_shell_command(command, options=CommandOptions(check=False))


class Orchestrator:
    """Select participating linters and run, print or list their commands.

    Linters run one at a time in configured order; child exit statuses are
    never inspected.
    """

    def __init__(
        self,
        linters: Sequence[LinterSpec],
        settings: RunSettings,
        *,
        logger: ConsoleLogger,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create an orchestrator.

        Args:
            linters: Configured linters, in configured order.
            settings: Run settings after CLI overrides.
            logger: Destination for listing, headers and dry-run output.
            runner: Callable executing one shell command string.
        """

        self.linters = list(linters)
        self.settings = settings
        self.logger = logger
        self.runner = runner or run_linter_command

    @property
    def mode(self) -> RunMode:
        return RunMode.from_settings(self.settings)

    @property
    def should_execute(self) -> bool:
        """Return whether commands are spawned rather than only surfaced."""

        return bool(self.linters) and self.mode is RunMode.NORMAL

    @property
    def specifically_enabled_linters(self) -> list[LinterSpec]:
        return [linter for linter in self.linters if linter.is_specifically_enabled]

    @property
    def enabled_linters(self) -> list[LinterSpec]:
        return [linter for linter in self.linters if linter.enabled]

    def participating_linters(self) -> list[LinterSpec]:
        """Return the linters taking part in this run.

        Explicitly enabled linters act as an allowlist: when any exist they are
        the only participants. Otherwise every linter not explicitly disabled
        participates.

        Returns:
            list[LinterSpec]: Participants in configured order.
        """

        return self.specifically_enabled_linters or self.enabled_linters

    def commands(self, scope: ResolvedScope) -> dict[str, str | None]:
        """Return each linter's lint command keyed by CLI option name."""

        return {str(linter.cli_option_name): linter.command(scope) for linter in self.linters}

    def autocorrect_commands(self, scope: ResolvedScope) -> dict[str, str | None]:
        """Return each linter's autocorrect command keyed by CLI option name."""

        return {str(linter.cli_option_name): linter.autocorrect_command(scope) for linter in self.linters}

    def command_for(self, linter: LinterSpec, scope: ResolvedScope) -> str | None:
        """Return the command ``linter`` runs for ``scope`` under the current settings."""

        if self.settings.autocorrect:
            return linter.autocorrect_command(scope)
        return linter.command(scope)

    def run(self, scope: ResolvedScope) -> None:
        """Surface or execute the participating linters for ``scope``.

        Args:
            scope: Scope computed by the selection engine.
        """

        files = scope.files
        self.logger.debug(f"{len(files)} specified source files:")
        for path in files:
            self.logger.debug(f"  {path}")

        mode = self.mode
        if mode is RunMode.LIST:
            self.logger.echo("\n".join(files))
            return

        execute = self.should_execute
        for index, linter in enumerate(self.participating_linters()):
            if index > 0:
                self.logger.echo("\n")
            self.logger.echo(f"Running {linter.name}")
            command = self.command_for(linter, scope)
            if command is None:
                continue
            self.logger.debug(f"  {command}")
            if mode is RunMode.DRY_RUN:
                self.logger.echo(command)
            if execute:
                self.runner(command)


__all__ = [
    "CommandRunner",
    "Orchestrator",
    "RunMode",
    "run_linter_command",
]
