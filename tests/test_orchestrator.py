# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for linter participation and dispatch modes."""

from ldot.config import RunSettings
from ldot.orchestration.orchestrator import Orchestrator, RunMode
from ldot.orchestration.selection import UNSCOPED, Scoped
from ldot.tools.linter import LinterSpec

SCOPE = Scoped(files=("app/file1.rb", "app/file2.js", "factory.rb"))


def _linters() -> list[LinterSpec]:
    return [
        LinterSpec(name="RuboCop", cmd="rubocop", extensions=(".rb",), autocorrect_cmd="rubocop -a"),
        LinterSpec(name="ESLint", cmd="eslint", extensions=(".js",)),
        LinterSpec(name="Stylelint", cmd="stylelint", extensions=(".scss",), autocorrect_cmd="stylelint --fix"),
    ]


def _orchestrator(captured, runner, linters=None, **settings: bool) -> Orchestrator:
    return Orchestrator(
        _linters() if linters is None else linters,
        RunSettings(**settings),
        logger=captured.logger,
        runner=runner,
    )


def test_run_mode_precedence() -> None:
    assert RunMode.from_settings(RunSettings()) is RunMode.NORMAL
    assert RunMode.from_settings(RunSettings(autocorrect=True)) is RunMode.NORMAL
    assert RunMode.from_settings(RunSettings(dry_run=True, autocorrect=True)) is RunMode.DRY_RUN
    assert RunMode.from_settings(RunSettings(list=True, dry_run=True)) is RunMode.LIST


def test_all_linters_participate_by_default(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner)

    assert [linter.name for linter in orchestrator.participating_linters()] == ["RuboCop", "ESLint", "Stylelint"]


def test_explicit_enable_acts_as_allowlist(captured, runner) -> None:
    linters = _linters()
    linters[1].specifically_enabled = True
    orchestrator = _orchestrator(captured, runner, linters)

    assert [linter.name for linter in orchestrator.participating_linters()] == ["ESLint"]


def test_explicit_disable_removes_linter(captured, runner) -> None:
    linters = _linters()
    linters[0].specifically_enabled = False
    orchestrator = _orchestrator(captured, runner, linters)

    assert [linter.name for linter in orchestrator.participating_linters()] == ["ESLint", "Stylelint"]


def test_enable_wins_over_disable_of_other_linters(captured, runner) -> None:
    linters = _linters()
    linters[0].specifically_enabled = False
    linters[2].specifically_enabled = True
    orchestrator = _orchestrator(captured, runner, linters)

    assert [linter.name for linter in orchestrator.participating_linters()] == ["Stylelint"]


def test_normal_run_executes_in_order_with_headers(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner)

    orchestrator.run(UNSCOPED)

    assert runner.commands == ["rubocop .", "eslint .", "stylelint ."]
    assert captured.output == "Running RuboCop\n\n\nRunning ESLint\n\n\nRunning Stylelint\n"


def test_linter_without_applicable_files_is_skipped(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner)

    orchestrator.run(SCOPE)

    assert runner.commands == ["rubocop app/file1.rb factory.rb", "eslint app/file2.js"]
    assert "Running Stylelint" in captured.output


def test_dry_run_prints_without_executing(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, dry_run=True)

    orchestrator.run(SCOPE)

    assert runner.commands == []
    assert not orchestrator.should_execute
    lines = captured.output.splitlines()
    assert "rubocop app/file1.rb factory.rb" in lines
    assert "eslint app/file2.js" in lines


def test_list_mode_prints_files_only(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, list=True)

    orchestrator.run(SCOPE)

    assert runner.commands == []
    assert captured.output == "app/file1.rb\napp/file2.js\nfactory.rb\n"


def test_list_mode_with_unscoped_run_prints_blank_line(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, list=True)

    orchestrator.run(UNSCOPED)

    assert captured.output == "\n"


def test_autocorrect_uses_autocorrect_templates(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, autocorrect=True)

    orchestrator.run(UNSCOPED)

    assert runner.commands == ["rubocop -a .", "stylelint --fix ."]
    assert "Running ESLint" in captured.output


def test_autocorrect_dry_run_prints_autocorrect_commands(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, autocorrect=True, dry_run=True)

    orchestrator.run(SCOPE)

    assert runner.commands == []
    assert "rubocop -a app/file1.rb factory.rb" in captured.output.splitlines()


def test_no_linters_never_executes(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner, linters=[])

    orchestrator.run(UNSCOPED)

    assert not orchestrator.should_execute
    assert runner.commands == []
    assert captured.output == ""


def test_command_maps_are_keyed_by_option_name(captured, runner) -> None:
    orchestrator = _orchestrator(captured, runner)

    assert orchestrator.commands(SCOPE) == {
        "rubocop": "rubocop app/file1.rb factory.rb",
        "eslint": "eslint app/file2.js",
        "stylelint": None,
    }
    assert orchestrator.autocorrect_commands(UNSCOPED) == {
        "rubocop": "rubocop -a .",
        "eslint": None,
        "stylelint": "stylelint --fix .",
    }


def test_debug_output_lists_files_and_commands(make_logger, runner) -> None:
    captured = make_logger(debug=True)
    orchestrator = _orchestrator(captured, runner, linters=_linters()[:1])

    orchestrator.run(SCOPE)

    assert captured.output.splitlines() == [
        "[DEBUG] 3 specified source files:",
        "[DEBUG]   app/file1.rb",
        "[DEBUG]   app/file2.js",
        "[DEBUG]   factory.rb",
        "Running RuboCop",
        "[DEBUG]   rubocop app/file1.rb factory.rb",
    ]


def test_runner_failures_do_not_stop_later_linters(captured) -> None:
    executed: list[str] = []

    def failing_runner(command: str) -> int:
        executed.append(command)
        return 1

    orchestrator = _orchestrator(captured, failing_runner)
    orchestrator.run(UNSCOPED)

    assert executed == ["rubocop .", "eslint .", "stylelint ."]
