# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console utilities for runtime output."""

from __future__ import annotations

from .manager import RichConsoleManager, console_manager, detect_tty

__all__ = ["RichConsoleManager", "console_manager", "detect_tty"]
