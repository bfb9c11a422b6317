# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for path-spec expansion and whitelist/blacklist resolution."""

from pathlib import Path

import pytest

from ldot.discovery.filesystem import FileSetResolver, expand_path_spec, list_root_files

ALL_ENTRIES = ("app/file1.rb", "app/file2.js", "app/file3.scss", "factory.rb")


def test_directory_spec_expands_to_files_beneath_it(work_tree: Path) -> None:
    assert expand_path_spec("app", work_tree) == ("app/file1.rb", "app/file2.js", "app/file3.scss")


@pytest.mark.parametrize("spec", ["", "./", "."])
def test_root_spec_lists_every_entry(work_tree: Path, spec: str) -> None:
    assert expand_path_spec(spec, work_tree) == ALL_ENTRIES


def test_file_spec_matches_single_file(work_tree: Path) -> None:
    assert expand_path_spec("app/file2.js", work_tree) == ("app/file2.js",)


def test_prefix_matching_picks_up_similarly_named_siblings(work_tree: Path) -> None:
    (work_tree / "apphelper.rb").write_text("", encoding="utf-8")

    result = expand_path_spec("app", work_tree)

    assert "apphelper.rb" in result
    assert "app/file1.rb" in result


def test_unmatched_spec_yields_empty_set(work_tree: Path) -> None:
    assert expand_path_spec("missing", work_tree) == ()


def test_expansion_skips_hidden_entries(work_tree: Path) -> None:
    (work_tree / ".l.yml").write_text("linters: []\n", encoding="utf-8")
    (work_tree / "app" / ".secret.rb").write_text("", encoding="utf-8")

    result = expand_path_spec("", work_tree)

    assert ".l.yml" not in result
    assert "app/.secret.rb" not in result


def test_expansion_never_escapes_the_root(tmp_path: Path, work_tree: Path) -> None:
    sibling = tmp_path / "project-other"
    sibling.mkdir()
    (sibling / "outside.rb").write_text("", encoding="utf-8")

    result = expand_path_spec("", work_tree)

    assert not any("outside.rb" in entry for entry in result)
    assert "" not in result


def test_root_files_lists_plain_files_only(work_tree: Path) -> None:
    assert list_root_files(work_tree) == ("factory.rb",)


def test_whitelist_contains_root_files_and_source_paths(work_tree: Path) -> None:
    resolver = FileSetResolver(work_tree, source_file_paths=["app/file1.rb"])

    assert resolver.whitelist == ("app/file1.rb", "factory.rb")
    assert resolver.blacklist == ()


def test_blacklist_expands_ignored_paths(work_tree: Path) -> None:
    vendor = work_tree / "app" / "vendor"
    vendor.mkdir()
    (vendor / "lib.rb").write_text("", encoding="utf-8")

    resolver = FileSetResolver(work_tree, source_file_paths=["app"], ignored_file_paths=["app/vendor"])

    assert "app/vendor/lib.rb" in resolver.whitelist
    assert "app/vendor" not in resolver.whitelist
    assert resolver.blacklist == ("app/vendor/lib.rb",)


def test_file_sets_are_memoised(work_tree: Path) -> None:
    resolver = FileSetResolver(work_tree)
    first = resolver.whitelist

    (work_tree / "late.rb").write_text("", encoding="utf-8")

    assert resolver.whitelist is first
    assert "late.rb" not in resolver.whitelist


def test_expand_many_unions_and_sorts(work_tree: Path) -> None:
    resolver = FileSetResolver(work_tree)

    assert resolver.expand_many(["factory.rb", "app/file3.scss", "factory.rb"]) == (
        "app/file3.scss",
        "factory.rb",
    )


def test_directories_are_never_members(work_tree: Path) -> None:
    (work_tree / "empty").mkdir()
    (work_tree / "app" / "nested").mkdir()

    assert expand_path_spec("empty", work_tree) == ()
    assert "app/nested" not in expand_path_spec("app", work_tree)
    assert "app" not in FileSetResolver(work_tree).whitelist
