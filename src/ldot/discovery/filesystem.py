# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem expansion of configured path specs into file sets."""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable, Iterator
from functools import cached_property
from pathlib import Path

FileSet = tuple[str, ...]


def _relativize(candidate: str, root: str) -> str | None:
    """Return ``candidate`` relative to ``root`` or ``None`` when outside it.

    The root itself is reported as ``None`` as well: it is never a member of a
    file set.
    """

    prefix = root.rstrip(os.sep) + os.sep
    if not candidate.startswith(prefix):
        return None
    return candidate[len(prefix) :].replace(os.sep, "/")


def _iter_prefix_matches(absolute: str) -> Iterator[str]:
    """Yield every entry whose path starts with ``absolute`` plus its descendants.

    ``app`` matches ``app``, ``app.rb`` and ``apphelper.rb`` alongside everything
    below each matching directory. Hidden entries are skipped by the wildcards.
    Directories are yielded too; callers keep only files.
    """

    escaped = glob.escape(absolute)
    yield from glob.iglob(f"{escaped}*")
    yield from glob.iglob(f"{escaped}*/**/*", recursive=True)


def expand_path_spec(spec: str, root: Path | str) -> FileSet:
    """Return the sorted set of root-relative paths denoted by ``spec``.

    Matching is by string prefix, so a spec naming a directory also picks up
    siblings that merely start with the same characters. Only files are
    members: a matching directory contributes the files beneath it, not
    itself. A spec matching nothing yields an empty set.

    Args:
        spec: File or directory reference, relative to ``root``.
        root: Working-tree root.

    Returns:
        FileSet: Sorted, deduplicated, root-relative POSIX paths.
    """

    base = os.path.abspath(root)
    absolute = os.path.abspath(os.path.join(base, spec))
    members = {
        relative
        for match in _iter_prefix_matches(absolute)
        if os.path.isfile(match) and (relative := _relativize(os.path.abspath(match), base)) is not None
    }
    return tuple(sorted(members))


def list_root_files(root: Path | str) -> FileSet:
    """Return the non-hidden plain files directly inside ``root``."""

    base = os.path.abspath(root)
    return tuple(
        sorted(
            relative
            for match in glob.iglob(f"{glob.escape(base)}{os.sep}*")
            if os.path.isfile(match) and (relative := _relativize(match, base)) is not None
        )
    )


class FileSetResolver:
    """Combine path specs into whitelist and blacklist file sets for one run.

    The whitelist and blacklist are computed on first access and memoised for
    the lifetime of the resolver.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        source_file_paths: Iterable[str] = ("./",),
        ignored_file_paths: Iterable[str] = (),
    ) -> None:
        """Create a resolver rooted at ``root``.

        Args:
            root: Working-tree root that every path spec is relative to.
            source_file_paths: Configured whitelist path specs.
            ignored_file_paths: Configured blacklist path specs.
        """

        self.root = Path(root)
        self.source_file_paths: tuple[str, ...] = tuple(source_file_paths)
        self.ignored_file_paths: tuple[str, ...] = tuple(ignored_file_paths)

    def expand(self, spec: str) -> FileSet:
        """Return the paths denoted by a single ``spec``."""

        return expand_path_spec(spec, self.root)

    def expand_many(self, specs: Iterable[str]) -> FileSet:
        """Return the sorted, deduplicated union of every spec's expansion.

        Args:
            specs: Path specs to expand.

        Returns:
            FileSet: Combined file set.
        """

        members: set[str] = set()
        for spec in specs:
            members.update(self.expand(spec))
        return tuple(sorted(members))

    def root_files(self) -> FileSet:
        """Return the plain files directly at the working-tree root."""

        return list_root_files(self.root)

    @cached_property
    def whitelist(self) -> FileSet:
        """Return root files plus the expansion of every source path spec."""

        return tuple(sorted(set(self.root_files()).union(self.expand_many(self.source_file_paths))))

    @cached_property
    def blacklist(self) -> FileSet:
        """Return the expansion of every ignored path spec."""

        return self.expand_many(self.ignored_file_paths)


__all__ = [
    "FileSet",
    "FileSetResolver",
    "expand_path_spec",
    "list_root_files",
]
