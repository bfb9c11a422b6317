# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers: path expansion and change detection."""

from __future__ import annotations

from .base import DEFAULT_SCOPE, ChangeResult, ChangeSource
from .filesystem import FileSet, FileSetResolver, expand_path_spec, list_root_files
from .git import GitChangeSource, build_changed_files_command

__all__ = [
    "ChangeResult",
    "ChangeSource",
    "DEFAULT_SCOPE",
    "FileSet",
    "FileSetResolver",
    "GitChangeSource",
    "build_changed_files_command",
    "expand_path_spec",
    "list_root_files",
]
