# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-backed change detection."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final

from ..core.runtime.process import CommandOptions, run_shell_command
from .base import ChangeResult, ChangeSource

GitRunner = Callable[[str, Path], list[str]]

DIFF_COMMAND: Final[str] = "git diff --no-ext-diff --relative --name-only"
UNTRACKED_COMMAND: Final[str] = "git ls-files --others --exclude-standard"
COMMAND_JOINER: Final[str] = " && "


def build_changed_files_command(reference: str, path_scopes: Sequence[str]) -> str:
    """Return the shell invocation listing changed and untracked files.

    Args:
        reference: Revision passed to ``git diff`` verbatim (may be empty).
        path_scopes: Path specs appended after ``--`` to both queries.

    Returns:
        str: Two git queries chained with ``&&``.
    """

    scopes = " ".join(path_scopes)
    queries = (f"{DIFF_COMMAND} {reference}", UNTRACKED_COMMAND)
    return COMMAND_JOINER.join(f"{query} -- {scopes}" for query in queries)


class GitChangeSource(ChangeSource):
    """Collect files reported as changed or untracked by Git."""

    def __init__(self, root: Path, *, runner: GitRunner | None = None) -> None:
        """Create a git change source.

        Args:
            root: Working-tree root the queries run in.
            runner: Optional callable executing a shell command in a directory
                and returning stdout lines. Failures must raise.
        """

        self.root = root
        self._runner = runner or self._default_runner

    def changed_files(self, reference: str, path_scopes: Sequence[str]) -> ChangeResult:
        """Return the invocation used and the paths git reported.

        Args:
            reference: Revision to diff against; empty diffs against the index.
            path_scopes: Path specs restricting both queries.

        Returns:
            ChangeResult: Invocation string and reported paths.

        Raises:
            SubprocessExecutionError: When git exits with a non-zero status.
        """

        cmd = build_changed_files_command(reference, path_scopes)
        files = tuple(line.strip() for line in self._runner(cmd, self.root) if line.strip())
        return ChangeResult(cmd=cmd, files=files)

    @staticmethod
    def _default_runner(cmd: str, root: Path) -> list[str]:
        cp = run_shell_command(cmd, options=CommandOptions(cwd=root, capture_output=True, check=True))
        return (cp.stdout or "").splitlines()


__all__ = [
    "GitChangeSource",
    "GitRunner",
    "build_changed_files_command",
]
