"""Package manager detection and installs (npm, yarn, pnpm, bun)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graft import ui
from graft.errors import InstallError, PackageManagerNotFoundError, RunnerError
from graft.runners import Runner

if TYPE_CHECKING:
    from pathlib import Path

    from rich.console import Console

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageManagerCommands:
    """Sub-commands and flags of one package manager CLI."""

    add: str
    save_flag: str


COMMANDS: dict[str, PackageManagerCommands] = {
    "npm": PackageManagerCommands(add="install", save_flag="--save"),
    "yarn": PackageManagerCommands(add="add", save_flag=""),
    "pnpm": PackageManagerCommands(add="add", save_flag="--save-prod"),
    "bun": PackageManagerCommands(add="add", save_flag=""),
}

# Checked in order; the first lock file found decides.
LOCK_FILES: tuple[tuple[str, str], ...] = (
    ("package-lock.json", "npm"),
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
)

DEFAULT_PACKAGE_MANAGER = "npm"


class PackageManager:
    """Installs dependencies into a project with one package manager."""

    def __init__(
        self,
        name: str,
        project_root: Path,
        *,
        runner: Runner | None = None,
        console: Console | None = None,
    ) -> None:
        if name not in COMMANDS:
            msg = f"Unsupported package manager: {name}"
            raise PackageManagerNotFoundError(msg)
        self.name = name
        self.commands = COMMANDS[name]
        self.project_root = project_root
        self.runner = runner or Runner(name)
        self._console = console

    def __repr__(self) -> str:
        return f"PackageManager({self.name!r})"

    @property
    def console(self) -> Console:
        if self._console is None:
            from rich.console import Console

            self._console = Console()
        return self._console

    def add_production(self, names: list[str], tag: str) -> bool:
        """Add *names* at *tag* as production dependencies.

        Raises
        ------
        InstallError
            When the package manager exits non-zero; nothing is retried.
        """
        args = [self.commands.add]
        if self.commands.save_flag:
            args.append(self.commands.save_flag)
        args.extend(f"{name}@{tag}" for name in names)

        packages = ", ".join(names)
        status = ui.PACKAGE_MANAGER_INSTALLATION_IN_PROGRESS.format(
            packages=packages, manager=self.name
        )
        try:
            with self.console.status(status):
                self.runner.run(args, cwd=self.project_root)
        except RunnerError as exc:
            self.console.print(
                f"[red]{ui.PACKAGE_MANAGER_INSTALLATION_FAILED.format(packages=packages)}[/red]"
            )
            raise InstallError(str(exc)) from exc

        self.console.print(
            f"[green]{ui.PACKAGE_MANAGER_INSTALLATION_SUCCEED.format(packages=packages)}[/green]"
        )
        return True


def detect_package_manager(project_root: Path) -> str:
    """Name of the manager whose lock file is present, npm when there is none."""
    for lock_file, name in LOCK_FILES:
        if (project_root / lock_file).exists():
            logger.debug("Found %s, using %s", lock_file, name)
            return name
    return DEFAULT_PACKAGE_MANAGER


class PackageManagerFactory:
    """Builds the :class:`PackageManager` for a project."""

    @staticmethod
    def create(name: str, project_root: Path, *, console: Console | None = None) -> PackageManager:
        return PackageManager(name, project_root, console=console)

    @classmethod
    def find(
        cls,
        project_root: Path,
        preferred: str | None = None,
        *,
        console: Console | None = None,
    ) -> PackageManager:
        """Pick the package manager: explicit *preferred* name, then lock files.

        Raises
        ------
        PackageManagerNotFoundError
            If *preferred* names a manager graft does not know.
        """
        name = preferred or detect_package_manager(project_root)
        logger.info("Using package manager: %s", name)
        return cls.create(name, project_root, console=console)
