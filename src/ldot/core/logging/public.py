# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing output helpers, debug messages and benchmarking."""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

DEBUG_PREFIX: Final[str] = "[DEBUG]"
BENCH_START_WIDTH: Final[int] = 30
ROUND_PRECISION: Final[int] = 3
_ROUND_MODIFIER: Final[int] = 10**ROUND_PRECISION


def debug_msg(msg: str) -> str:
    """Return ``msg`` prefixed with the debug marker.

    Args:
        msg: Message body.

    Returns:
        str: ``"[DEBUG] <msg>"``.
    """

    return f"{DEBUG_PREFIX} {msg}"


def bench_start_msg(msg: str) -> str:
    """Return the padded text printed before a benchmarked block runs."""

    return debug_msg(f"{msg}...".ljust(BENCH_START_WIDTH))


def bench_finish_msg(time_in_ms: float) -> str:
    """Return the suffix printed once a benchmarked block completes."""

    return f" ({time_in_ms} ms)"


def rounded_milliseconds(seconds: float) -> float:
    """Convert ``seconds`` to milliseconds truncated to three decimal places.

    Args:
        seconds: Elapsed wall-clock time in seconds.

    Returns:
        float: Milliseconds with at most :data:`ROUND_PRECISION` decimals.
    """

    return int(seconds * 1000 * _ROUND_MODIFIER) / float(_ROUND_MODIFIER)


@dataclass(slots=True)
class ConsoleLogger:
    """Write dispatcher output to a Rich console, gating debug detail."""

    console: Console
    debug_enabled: bool = False

    def echo(self, message: str = "") -> None:
        """Write ``message`` followed by a newline.

        Args:
            message: Text written verbatim.
        """

        self.console.print(Text(message))

    def write(self, message: str) -> None:
        """Write ``message`` without a trailing newline.

        Args:
            message: Text written verbatim.
        """

        self.console.print(Text(message), end="")

    def debug(self, message: str) -> None:
        """Write a ``[DEBUG]`` line when debug output is enabled.

        Args:
            message: Debug payload.
        """

        if self.debug_enabled:
            self.echo(debug_msg(message))

    def fail(self, message: str) -> None:
        """Write an error message.

        Args:
            message: Text describing the failure.
        """

        self.echo(message)

    def print_exception(self) -> None:
        """Render the exception currently being handled with its traceback."""

        self.console.print_exception()

    @contextmanager
    def bench(self, start_msg: str) -> Iterator[None]:
        """Time the enclosed block, reporting the duration in debug mode.

        Args:
            start_msg: Short description of the timed work.

        Yields:
            None: Control returns to the caller for the timed block.
        """

        if not self.debug_enabled:
            yield
            return
        self.write(bench_start_msg(start_msg))
        started = time.monotonic()
        yield
        self.echo(bench_finish_msg(rounded_milliseconds(time.monotonic() - started)))


__all__ = [
    "BENCH_START_WIDTH",
    "ConsoleLogger",
    "DEBUG_PREFIX",
    "bench_finish_msg",
    "bench_start_msg",
    "debug_msg",
    "rounded_milliseconds",
]
