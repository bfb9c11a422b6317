# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (logging and errors)."""

from __future__ import annotations

from typing import Final, TextIO

from ..core.logging import ConsoleLogger
from ..runtime.console import console_manager


class CLIError(RuntimeError):
    """Error raised when the command line cannot be parsed."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


def build_cli_logger(*, debug: bool = False, color: bool = True, stream: TextIO | None = None) -> ConsoleLogger:
    """Return a :class:`ConsoleLogger` bound to the shared console manager.

    Args:
        debug: Whether ``[DEBUG]`` output is enabled.
        color: Whether ANSI colour may be used for tracebacks.
        stream: Optional stream receiving output instead of stdout.

    Returns:
        ConsoleLogger: Logger writing verbatim text.
    """

    console = console_manager().get(color=color, stream=stream)
    return ConsoleLogger(console=console, debug_enabled=debug)


__all__: Final = [
    "CLIError",
    "build_cli_logger",
]
