# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linter definitions."""

from __future__ import annotations

from .linter import LinterSpec, build_invocation

__all__ = ["LinterSpec", "build_invocation"]
