"""``graft build``: compile the project with tsc or webpack."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape

from graft import ui
from graft.actions.base import AbstractAction, ActionResult
from graft.configuration import get_value_or_default
from graft.errors import ConfigurationError, RunnerError
from graft.inputs import get_flag, get_string
from graft.runners import Runner

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

    from graft.configuration import Configuration
    from graft.inputs import Input

logger = logging.getLogger(__name__)


class BuildAction(AbstractAction):
    """Run the TypeScript compiler, or webpack when enabled, through ``npx``."""

    def __init__(
        self,
        project_root: Path,
        config: Configuration,
        *,
        console: Console | None = None,
        runner: Runner | None = None,
    ) -> None:
        super().__init__(project_root, config, console=console)
        self.runner = runner or Runner("npx")

    def compiler_args(self, inputs: Sequence[Input], options: Sequence[Input]) -> list[str]:
        """Command line for the compiler, without the ``npx`` prefix.

        Raises
        ------
        ConfigurationError
            If the resolved tsconfig / webpack config file does not exist.
        """
        app = get_string(inputs, "app")
        if app and app not in self.config.projects:
            logger.warning("Project '%s' is not configured, using top-level options", app)

        use_webpack = get_flag(options, "webpack") or bool(
            get_value_or_default(self.config, "webpack", app)
        )
        if use_webpack:
            config_path = get_string(options, "webpackPath") or get_value_or_default(
                self.config, "webpackConfigPath", app
            )
            args = ["webpack", "--config", config_path]
        else:
            config_path = get_string(options, "path") or get_value_or_default(
                self.config, "tsConfigPath", app
            )
            args = ["tsc", "-p", config_path]

        if not (self.project_root / config_path).is_file():
            msg = f"Could not find {config_path} in {self.project_root}"
            raise ConfigurationError(msg)

        if get_flag(options, "watch"):
            args.append("--watch")
        return args

    def handle(
        self,
        inputs: Sequence[Input],
        options: Sequence[Input],
        extra_flags: Sequence[str] = (),
    ) -> ActionResult:
        args = [*self.compiler_args(inputs, options), *extra_flags]
        self.console.print(ui.BUILD_STARTS.format(compiler=args[0], config=args[2]))

        try:
            self.runner.run(args, cwd=self.project_root)
        except RunnerError as exc:
            self.console.print(f"[red]{escape(str(exc))}[/red]")
            self.console.print(f"[red]{ui.BUILD_FAILED}[/red]")
            return ActionResult(success=False, message=str(exc))

        self.console.print(f"[green]{ui.BUILD_SUCCEEDED}[/green]")
        return ActionResult(success=True, message=ui.BUILD_SUCCEEDED)
