# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI entry point for the ``l`` lint dispatcher."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Final

import click
import typer
from click.formatting import HelpFormatter
from typer.core import TyperCommand

from .. import __version__
from ..config_loader import load_config
from ..tools.linter import LinterSpec
from .options import (
    HELP_OPTION_NAMES,
    PATHS_PARAM,
    VERSION_OPTION,
    OverrideTable,
    apply_overrides,
    build_cli_params,
)
from .runtime import DispatchDependencies, build_dispatch_context, dispatch
from .shared import CLIError, build_cli_logger

PROG_NAME: Final[str] = "l"
USAGE_ARGS: Final[str] = "[options] [FILES]"
DEBUG_FLAGS: Final[frozenset[str]] = frozenset({"-d", "--debug"})


class DispatchCommand(TyperCommand):
    """Single command with plain, deterministic help output."""

    def format_usage(self, ctx: click.Context, formatter: HelpFormatter) -> None:
        formatter.write_usage(ctx.command_path, USAGE_ARGS)

    def format_help(self, ctx: click.Context, formatter: HelpFormatter) -> None:
        # typer's rich help writes to stdout directly, bypassing ``formatter``.
        click.Command.format_help(self, ctx, formatter)


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    typer.echo(__version__)
    ctx.exit()


def build_command(linters: Sequence[LinterSpec]) -> tuple[DispatchCommand, OverrideTable]:
    """Return the click command for ``linters`` and its override table.

    Args:
        linters: Configured linters; each contributes a toggle pair.

    Returns:
        tuple[DispatchCommand, OverrideTable]: Command and parameter targets.
    """

    params, table = build_cli_params(linters)
    params.append(
        click.Option(
            [VERSION_OPTION],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=_print_version,
            help="Show the version and exit.",
        )
    )
    command = DispatchCommand(
        PROG_NAME,
        params=params,
        help="Run configured linters against the project or the given FILES.",
        context_settings={"help_option_names": list(HELP_OPTION_NAMES)},
    )
    return command, table


def help_text(command: click.Command) -> str:
    """Return the rendered usage and option help for ``command``."""

    return command.get_help(command.make_context(PROG_NAME, [], resilient_parsing=True))


def parse_invocation(command: click.Command, args: Sequence[str]) -> click.Context | int:
    """Parse ``args`` returning the click context, or an exit code for help/version.

    Raises:
        CLIError: When ``args`` contain an unknown option or a malformed value.
    """

    try:
        return command.make_context(PROG_NAME, list(args))
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.UsageError as exc:
        raise CLIError(exc.format_message()) from exc


def main(
    argv: Sequence[str] | None = None,
    *,
    root: Path | None = None,
    dependencies: DispatchDependencies | None = None,
) -> int:
    """Run the dispatcher and return the process exit status.

    Args:
        argv: Command-line arguments excluding the program name.
        root: Working-tree root; defaults to the current directory.
        dependencies: Optional collaborator overrides.

    Returns:
        int: ``0`` on completion (linter failures do not count), ``1`` on a
        parse error or any unhandled failure.
    """

    args = list(sys.argv[1:] if argv is None else argv)
    project_root = root if root is not None else Path.cwd()
    logger = build_cli_logger()
    try:
        config = load_config(project_root)
        linters = config.build_linters()
        command, table = build_command(linters)
        try:
            parsed = parse_invocation(command, args)
        except CLIError as exc:
            logger.echo(f"{exc}\n")
            if DEBUG_FLAGS.intersection(args):
                logger.print_exception()
            else:
                logger.echo(help_text(command))
            return exc.exit_code
        if isinstance(parsed, int):
            return parsed
        apply_overrides(parsed.params, table, settings=config.settings, linters=linters)
        logger.debug_enabled = config.settings.debug
        context = build_dispatch_context(
            config,
            linters,
            root=project_root,
            logger=logger,
            dependencies=dependencies,
        )
        dispatch(list(parsed.params.get(PATHS_PARAM) or ()), context)
    except Exception as exc:  # noqa: BLE001
        logger.fail(f"{type(exc).__name__}: {exc}")
        logger.print_exception()
        return 1
    return 0


def cli() -> None:
    """Console-script entry point."""

    sys.exit(main())


__all__ = [
    "DispatchCommand",
    "PROG_NAME",
    "build_command",
    "cli",
    "help_text",
    "main",
    "parse_invocation",
]
