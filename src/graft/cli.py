"""Graft CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click

from graft import __version__
from graft.errors import GraftError


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    """Attach a rich handler to the ``graft`` logger once per process."""
    from rich.logging import RichHandler

    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logger = logging.getLogger("graft")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))


def _fail(exc: Exception) -> NoReturn:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _split_library(args: tuple[str, ...]) -> tuple[str | None, list[str]]:
    """First non-option argument, and every other argument in order."""
    for index, arg in enumerate(args):
        if not arg.startswith("-"):
            return arg, [*args[:index], *args[index + 1 :]]
    return None, list(args)


@click.group()
@click.version_option(version=__version__, prog_name="graft")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """Graft - add libraries to a project and build it."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose=verbose, quiet=quiet)


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--project", "project_name", default=None, help="Target project name.")
@click.option("--dry-run", "-d", is_flag=True, help="Report changes without writing files.")
@click.option("--skip-install", "-s", is_flag=True, help="Skip package installation.")
@click.option(
    "--package-manager",
    type=click.Choice(["npm", "yarn", "pnpm", "bun"]),
    default=None,
    help="Package manager to use (default: detected from lock files).",
)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
def add(
    args: tuple[str, ...],
    *,
    project_name: str | None,
    dry_run: bool,
    skip_install: bool,
    package_manager: str | None,
    root: Path | None,
) -> None:
    """Add a library to the project.

    The first argument that is not an option is the package specifier, such
    as ``@scope/name@tag``. Options graft does not know, and any further
    arguments, are passed through to the library's schematic in order.
    """
    from graft.actions.add import AddAction
    from graft.configuration import load_configuration
    from graft.inputs import Input

    project_root = root or Path.cwd()
    library, extra_flags = _split_library(args)

    inputs = [
        Input("library", library),
        Input("project", project_name),
    ]
    options = [
        Input("dryRun", dry_run),
        Input("skipInstall", skip_install),
        Input("packageManager", package_manager),
    ]

    try:
        config = load_configuration(project_root)
        result = AddAction(project_root, config).handle(inputs, options, extra_flags)
    except GraftError as exc:
        _fail(exc)

    sys.exit(result.exit_code)


@main.command()
@click.argument("app", required=False)
@click.option("--path", "-p", "ts_path", default=None, help="Path to tsconfig file.")
@click.option("--watch", "-w", is_flag=True, help="Run in watch mode (live-reload).")
@click.option("--webpack", is_flag=True, help="Use webpack for compilation.")
@click.option("--webpack-path", default=None, help="Path to webpack configuration.")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root (default: current directory).",
)
def build(
    app: str | None,
    *,
    ts_path: str | None,
    watch: bool,
    webpack: bool,
    webpack_path: str | None,
    root: Path | None,
) -> None:
    """Build the application."""
    from graft.actions.build import BuildAction
    from graft.configuration import load_configuration
    from graft.inputs import Input

    project_root = root or Path.cwd()

    options = [
        Input("webpack", webpack),
        Input("watch", watch),
        Input("path", ts_path),
        Input("webpackPath", webpack_path),
    ]
    inputs = [Input("app", app)]

    try:
        config = load_configuration(project_root)
        result = BuildAction(project_root, config).handle(inputs, options)
    except GraftError as exc:
        _fail(exc)

    sys.exit(result.exit_code)
