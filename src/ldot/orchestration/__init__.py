# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scope resolution and linter dispatch."""

from __future__ import annotations

from .orchestrator import Orchestrator, RunMode, run_linter_command
from .selection import UNSCOPED, ResolvedScope, Scoped, SelectionEngine, Unscoped

__all__ = [
    "Orchestrator",
    "ResolvedScope",
    "RunMode",
    "Scoped",
    "SelectionEngine",
    "UNSCOPED",
    "Unscoped",
    "run_linter_command",
]
