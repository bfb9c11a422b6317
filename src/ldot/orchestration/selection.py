# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the file scope a run operates on."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, TypeAlias

from ..core.logging import ConsoleLogger
from ..discovery.base import DEFAULT_SCOPE, ChangeResult, ChangeSource
from ..discovery.filesystem import FileSet, FileSetResolver

CHANGED_LOOKUP_MSG: Final[str] = "Lookup changed source files"
SOURCE_LOOKUP_MSG: Final[str] = "Lookup source files"


@dataclass(frozen=True, slots=True)
class Unscoped:
    """Sentinel scope: every linter runs against its own project default."""

    @property
    def unscoped(self) -> bool:
        return True

    @property
    def files(self) -> FileSet:
        return ()


@dataclass(frozen=True, slots=True)
class Scoped:
    """Explicit scope holding the final, filtered file set."""

    files: FileSet

    @property
    def unscoped(self) -> bool:
        return False


ResolvedScope: TypeAlias = Unscoped | Scoped

UNSCOPED: Final[Unscoped] = Unscoped()


class SelectionEngine:
    """Compute the file scope from explicit paths, change detection and path filters."""

    def __init__(
        self,
        resolver: FileSetResolver,
        change_source: ChangeSource,
        *,
        logger: ConsoleLogger,
    ) -> None:
        """Create an engine.

        Args:
            resolver: Provides path expansion and the memoised whitelist/blacklist.
            change_source: Consulted in changed-only mode.
            logger: Receives debug timings and the change-detection invocation.
        """

        self.resolver = resolver
        self.change_source = change_source
        self.logger = logger
        self.last_change: ChangeResult | None = None

    def resolve(
        self,
        explicit_paths: Sequence[str],
        *,
        changed_only: bool = False,
        reference: str = "",
    ) -> ResolvedScope:
        """Return the scope for a run.

        Without explicit paths and outside changed-only mode the run is
        unscoped. Otherwise the found files are intersected with the whitelist
        and the blacklist is subtracted; changed-only mode never bypasses
        either filter.

        Args:
            explicit_paths: Path specs given on the command line.
            changed_only: Restrict the scope to files git reports as changed.
            reference: Revision handed to change detection.

        Returns:
            ResolvedScope: :data:`UNSCOPED` or a sorted :class:`Scoped` set.
        """

        if not explicit_paths and not changed_only:
            return UNSCOPED
        candidates = list(explicit_paths) or [DEFAULT_SCOPE]
        found = self._changed_files(candidates, reference) if changed_only else self._source_files(candidates)
        allowed = set(found).intersection(self.resolver.whitelist)
        return Scoped(files=tuple(sorted(allowed.difference(self.resolver.blacklist))))

    def _changed_files(self, candidates: Sequence[str], reference: str) -> FileSet:
        with self.logger.bench(CHANGED_LOOKUP_MSG):
            result = self.change_source.changed_files(reference, candidates)
            files = self.resolver.expand_many(result.files)
        self.last_change = result
        self.logger.debug(f"  `{result.cmd}`")
        return files

    def _source_files(self, candidates: Sequence[str]) -> FileSet:
        with self.logger.bench(SOURCE_LOOKUP_MSG):
            return self.resolver.expand_many(candidates)


__all__ = [
    "ResolvedScope",
    "Scoped",
    "SelectionEngine",
    "UNSCOPED",
    "Unscoped",
]
