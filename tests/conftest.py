# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path

import pytest

from ldot.cli.shared import build_cli_logger
from ldot.core.logging import ConsoleLogger
from ldot.discovery.base import ChangeResult
from ldot.discovery.git import build_changed_files_command

WHITELISTED_APP_FILES = ("app/file1.rb", "app/file2.js", "app/file3.scss")


@dataclass(slots=True)
class CapturedLogger:
    """Logger writing into an in-memory buffer."""

    logger: ConsoleLogger
    buffer: StringIO

    @property
    def output(self) -> str:
        return self.buffer.getvalue()


@dataclass(slots=True)
class StubChangeSource:
    """Change source reporting a fixed list of paths."""

    files: tuple[str, ...]
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def changed_files(self, reference: str, path_scopes: Sequence[str]) -> ChangeResult:
        self.calls.append((reference, tuple(path_scopes)))
        return ChangeResult(cmd=build_changed_files_command(reference, path_scopes), files=self.files)


@dataclass(slots=True)
class RecordingRunner:
    """Command runner that records instead of spawning."""

    commands: list[str] = field(default_factory=list)

    def __call__(self, command: str) -> None:
        self.commands.append(command)


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def work_tree(tmp_path: Path) -> Path:
    """Return a small project: ``app/`` with three sources plus ``factory.rb``."""

    root = tmp_path / "project"
    for relative in WHITELISTED_APP_FILES:
        _write(root / relative)
    _write(root / "factory.rb")
    return root


@pytest.fixture
def make_logger() -> Callable[..., CapturedLogger]:
    """Return a factory building captured loggers."""

    def _factory(*, debug: bool = False) -> CapturedLogger:
        buffer = StringIO()
        return CapturedLogger(logger=build_cli_logger(debug=debug, stream=buffer), buffer=buffer)

    return _factory


@pytest.fixture
def captured(make_logger: Callable[..., CapturedLogger]) -> CapturedLogger:
    return make_logger()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def stub_changes() -> Callable[..., StubChangeSource]:
    """Return a factory for change sources reporting fixed paths."""

    def _factory(*files: str) -> StubChangeSource:
        return StubChangeSource(files=tuple(files))

    return _factory
