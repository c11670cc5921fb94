"""``graft add``: install a library, then run its add schematic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape

from graft import ui
from graft.actions.base import AbstractAction, ActionResult
from graft.configuration import get_value_or_default
from graft.errors import ConfigurationError, MissingInputError
from graft.inputs import Input, get_flag, get_string
from graft.package_managers import PackageManagerFactory
from graft.project_selector import (
    PromptProjectSelector,
    default_project_name,
    move_default_project_to_start,
    should_ask_for_project,
)
from graft.schematics import CollectionFactory, SchematicOption
from graft.specifier import ParsedSpecifier, parse_specifier

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

    from graft.configuration import Configuration
    from graft.project_selector import ProjectSelector

logger = logging.getLogger(__name__)

SCHEMATIC_NAME = "graft-add"


class AddAction(AbstractAction):
    """Install a package and wire it into the project.

    Steps run strictly in order: find package manager, install, resolve the
    source root (possibly asking the user), execute the collection's
    ``graft-add`` schematic. A failed generation does not uninstall the
    package; re-running ``graft add`` reinstalls idempotently.
    """

    def __init__(
        self,
        project_root: Path,
        config: Configuration,
        *,
        selector: ProjectSelector | None = None,
        console: Console | None = None,
        package_manager_factory: type[PackageManagerFactory] = PackageManagerFactory,
        collection_factory: type[CollectionFactory] = CollectionFactory,
    ) -> None:
        super().__init__(project_root, config, console=console)
        self.selector = selector or PromptProjectSelector(console)
        self.package_manager_factory = package_manager_factory
        self.collection_factory = collection_factory

    def handle(
        self,
        inputs: Sequence[Input],
        options: Sequence[Input],
        extra_flags: Sequence[str] = (),
    ) -> ActionResult:
        skip_install = get_flag(options, "skipInstall") or get_flag(options, "dryRun")

        manager = None
        if not skip_install:
            manager = self.package_manager_factory.find(
                self.project_root,
                get_string(options, "packageManager") or self.config.package_manager,
                console=self._console,
            )

        library = get_string(inputs, "library")
        if library is None:
            msg = "No library specified: `graft add` needs a package name"
            raise MissingInputError(msg)

        specifier = parse_specifier(library)

        if manager is not None:
            manager.add_production([specifier.collection_name], specifier.tag)
        else:
            skipped = ui.LIBRARY_INSTALLATION_SKIPPED.format(name=specifier.collection_name)
            self.console.print(f"[dim]{skipped}[/dim]")

        source_root = self.resolve_source_root([*inputs, *options])
        options = [*options, Input("sourceRoot", source_root)]

        return self.add_library(specifier, options, extra_flags)

    def resolve_source_root(self, inputs: Sequence[Input]) -> str:
        """Source root of the requested project, or of the one the user picks.

        Raises
        ------
        ConfigurationError
            If the selector answers with a project the configuration lacks.
        """
        project_name = get_string(inputs, "project")
        if project_name and project_name not in self.config.projects:
            logger.warning(
                "Project '%s' is not configured, using the default source root", project_name
            )
            unknown = ui.UNKNOWN_PROJECT.format(
                name=project_name, source_root=self.config.source_root
            )
            self.console.print(f"[yellow]{escape(unknown)}[/yellow]")

        source_root: str = get_value_or_default(self.config, "sourceRoot", project_name)

        if not should_ask_for_project(self.config.projects, project_name):
            return source_root

        label = ui.DEFAULT_PROJECT_LABEL
        default_name = default_project_name(self.config, label)
        choices = move_default_project_to_start(self.config, default_name, label)

        answer = self.selector.select(ui.PROJECT_SELECTION_QUESTION, choices)
        project = answer.removesuffix(label)
        if project == self.config.source_root:
            return source_root

        if project not in self.config.projects:
            msg = f"Unknown project selected: {project}"
            raise ConfigurationError(msg)
        return self.config.projects[project].source_root

    def add_library(
        self,
        specifier: ParsedSpecifier,
        options: Sequence[Input],
        extra_flags: Sequence[str] = (),
    ) -> ActionResult:
        """Execute the add schematic of the library's collection."""
        self.console.print(ui.LIBRARY_INSTALLATION_STARTS)

        source_root = get_string(options, "sourceRoot")
        schematic_options = [SchematicOption("sourceRoot", source_root)]
        if get_flag(options, "dryRun"):
            schematic_options.append(SchematicOption("dryRun", True))

        extra_flags_string = " ".join(extra_flags) if extra_flags else None

        try:
            collection = self.collection_factory.create(
                specifier.collection_name, self.project_root
            )
            collection.execute(SCHEMATIC_NAME, schematic_options, extra_flags_string)
        except Exception as exc:
            logger.debug("Schematic %s failed", specifier.collection_name, exc_info=True)
            message = str(exc)
            if message:
                self.console.print(f"[red]{escape(message)}[/red]")
            self.console.print(
                f"[red]{ui.LIBRARY_FAILED.format(name=specifier.collection_name)}[/red]"
            )
            return ActionResult(success=False, message=message)

        done = ui.LIBRARY_ADDED.format(name=specifier.collection_name, source_root=source_root)
        self.console.print(f"[green]{done}[/green]")
        return ActionResult(success=True, message=done)
