# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Abstractions for locating changed files."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Protocol, runtime_checkable

DEFAULT_SCOPE: Final[str] = "."


@dataclass(frozen=True, slots=True)
class ChangeResult:
    """Outcome of one change-detection query.

    Attributes:
        cmd: Exact invocation used, kept for debug display.
        files: Raw paths reported as changed or newly untracked, in report order.
    """

    cmd: str
    files: tuple[str, ...]


@runtime_checkable
class ChangeSource(Protocol):
    """Protocol implemented by version-control backed change detectors."""

    def changed_files(self, reference: str, path_scopes: Sequence[str]) -> ChangeResult:
        """Return files changed relative to ``reference`` plus untracked files.

        Args:
            reference: Revision to diff against; empty for the implicit baseline.
            path_scopes: Path specs restricting the query.

        Returns:
            ChangeResult: Invocation string and reported paths.
        """
        ...


__all__ = [
    "ChangeResult",
    "ChangeSource",
    "DEFAULT_SCOPE",
]
