# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Wire configuration, scope resolution and orchestration for one run."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from ..config import Config
from ..core.logging import ConsoleLogger
from ..discovery.base import ChangeSource
from ..discovery.filesystem import FileSetResolver
from ..discovery.git import GitChangeSource
from ..orchestration.orchestrator import CommandRunner, Orchestrator
from ..orchestration.selection import ResolvedScope, SelectionEngine
from ..tools.linter import LinterSpec


@dataclass(slots=True)
class DispatchDependencies:
    """Collaborators replaceable in tests."""

    change_source_factory: Callable[[Path], ChangeSource] = GitChangeSource
    runner: CommandRunner | None = None


@dataclass(slots=True)
class DispatchContext:
    """Bundle the objects built for a single run."""

    engine: SelectionEngine
    orchestrator: Orchestrator


def build_dispatch_context(
    config: Config,
    linters: Sequence[LinterSpec],
    *,
    root: Path,
    logger: ConsoleLogger,
    dependencies: DispatchDependencies | None = None,
) -> DispatchContext:
    """Return the selection engine and orchestrator for ``config``.

    Args:
        config: Effective configuration with CLI overrides applied.
        linters: Linter specs built from ``config``, toggles applied.
        root: Working-tree root.
        logger: Output destination shared by every component.
        dependencies: Optional collaborator overrides.

    Returns:
        DispatchContext: Ready-to-use engine and orchestrator.
    """

    deps = dependencies or DispatchDependencies()
    resolver = FileSetResolver(
        root,
        source_file_paths=config.source_file_paths,
        ignored_file_paths=config.ignored_file_paths,
    )
    engine = SelectionEngine(resolver, deps.change_source_factory(root), logger=logger)
    orchestrator = Orchestrator(linters, config.settings, logger=logger, runner=deps.runner)
    return DispatchContext(engine=engine, orchestrator=orchestrator)


def dispatch(paths: Sequence[str], context: DispatchContext) -> ResolvedScope:
    """Resolve the scope for ``paths`` and run the orchestrator against it.

    Args:
        paths: Explicit path arguments from the command line.
        context: Engine and orchestrator for this run.

    Returns:
        ResolvedScope: The scope the linters were dispatched with.
    """

    settings = context.orchestrator.settings
    scope = context.engine.resolve(
        paths,
        changed_only=settings.changed_only,
        reference=settings.changed_ref,
    )
    context.orchestrator.run(scope)
    return scope


__all__ = [
    "DispatchContext",
    "DispatchDependencies",
    "build_dispatch_context",
    "dispatch",
]
