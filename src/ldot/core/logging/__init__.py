# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import (
    ConsoleLogger,
    bench_finish_msg,
    bench_start_msg,
    debug_msg,
    rounded_milliseconds,
)

__all__ = [
    "ConsoleLogger",
    "bench_finish_msg",
    "bench_start_msg",
    "debug_msg",
    "rounded_milliseconds",
]
