# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Thin wrappers around ``subprocess`` for shell command strings."""

from __future__ import annotations

# Bandit: linter commands are configured by the project owner as shell snippets
# and must run through the default shell exactly as written.
import subprocess  # nosec B404
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Execution options for a shell command.

    ``capture_output`` false means the child inherits stdout and stderr.
    Commands run without a timeout.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = True
    capture_output: bool = False
    text: bool = True


class SubprocessExecutionError(RuntimeError):
    """Raised when a shell command exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: str,
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Shell command string that was executed.
            returncode: Exit status reported by the shell.
            stdout: Captured standard output stream.
            stderr: Captured standard error stream.
        """

        detail = (stderr or "").strip() or "<none>"
        super().__init__(f"Command `{command}` exited with status {returncode}. stderr: {detail}")
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def run_shell_command(
    command: str,
    *,
    options: CommandOptions | None = None,
) -> CompletedProcess[str]:
    """Execute ``command`` through the default shell.

    Args:
        command: Shell command string, executed verbatim.
        options: Execution options; defaults to checked, uncaptured execution.

    Returns:
        CompletedProcess[str]: Subprocess execution metadata.

    Raises:
        SubprocessExecutionError: When ``check`` is true and the shell exits
            with a non-zero status.
    """

    resolved = options or CommandOptions()
    # Bandit: shell execution is the contract for configured linter commands.
    completed: CompletedProcess[str] = subprocess.run(  # nosec B602
        command,
        shell=True,
        cwd=str(resolved.cwd) if resolved.cwd is not None else None,
        env=dict(resolved.env) if resolved.env is not None else None,
        check=False,
        capture_output=resolved.capture_output,
        text=resolved.text,
    )
    if resolved.check and completed.returncode != 0:
        raise SubprocessExecutionError(
            command,
            completed.returncode,
            completed.stdout if isinstance(completed.stdout, str) else None,
            completed.stderr if isinstance(completed.stderr, str) else None,
        )
    return completed


__all__ = [
    "CommandOptions",
    "SubprocessExecutionError",
    "run_shell_command",
]
