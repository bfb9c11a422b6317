# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""ldot CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import build_command, cli, main

__all__: Final[list[str]] = ["build_command", "cli", "main"]
