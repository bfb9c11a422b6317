# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for spawning child processes."""

from .process import CommandOptions, SubprocessExecutionError, run_shell_command

__all__ = [
    "CommandOptions",
    "SubprocessExecutionError",
    "run_shell_command",
]
