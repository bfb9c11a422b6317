# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import sys
from functools import cache
from typing import Literal, TextIO

from rich.console import Console


def detect_tty(stream: TextIO | None = None) -> bool:
    """Return ``True`` when ``stream`` (default stdout) is backed by a terminal.

    Args:
        stream: Optional text stream to probe instead of ``sys.stdout``.

    Returns:
        bool: ``True`` when the stream reports TTY support, ``False`` otherwise.
    """

    target = stream if stream is not None else sys.stdout
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


class RichConsoleManager:
    """Provision Rich :class:`Console` instances for plain dispatcher output.

    Consoles never interpret markup, emoji codes or highlighting: file names and
    shell commands must reach the terminal verbatim.
    """

    def __init__(self) -> None:
        """Initialise the manager with an in-memory cache keyed by colour and TTY state."""

        self._cache: dict[tuple[bool, bool], Console] = {}

    def get(self, *, color: bool = True, stream: TextIO | None = None) -> Console:
        """Return a console writing to ``stream`` (default: the current stdout).

        Consoles bound to an explicit stream are not cached; the default console
        resolves ``sys.stdout`` lazily on every write so captured streams work.

        Args:
            color: ``True`` when ANSI colour output may be used.
            stream: Optional text stream receiving output.

        Returns:
            Console: Console configured for the requested stream.
        """

        if stream is not None:
            return self._build(color=color, stream=stream)
        key = (color, detect_tty())
        if key not in self._cache:
            self._cache[key] = self._build(color=color, stream=None)
        return self._cache[key]

    @staticmethod
    def _build(*, color: bool, stream: TextIO | None) -> Console:
        tty = detect_tty(stream)
        color_system: Literal["auto"] | None = "auto" if color and tty else None
        return Console(
            file=stream,
            color_system=color_system,
            no_color=not (color and tty),
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )


@cache
def console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager`.

    Returns:
        RichConsoleManager: Cached console manager.
    """

    return RichConsoleManager()


__all__ = [
    "RichConsoleManager",
    "console_manager",
    "detect_tty",
]
