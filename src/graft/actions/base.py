"""Shared action plumbing."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from rich.console import Console

    from graft.configuration import Configuration
    from graft.inputs import Input


@dataclass(frozen=True)
class ActionResult:
    """Outcome handed back to the CLI, which decides the exit status."""

    success: bool
    message: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


class AbstractAction(abc.ABC):
    """An action receives the command's inputs, options and pass-through flags."""

    def __init__(
        self,
        project_root: Path,
        config: Configuration,
        *,
        console: Console | None = None,
    ) -> None:
        self.project_root = project_root
        self.config = config
        self._console = console

    @property
    def console(self) -> Console:
        if self._console is None:
            from rich.console import Console

            self._console = Console()
        return self._console

    @abc.abstractmethod
    def handle(
        self,
        inputs: Sequence[Input],
        options: Sequence[Input],
        extra_flags: Sequence[str] = (),
    ) -> ActionResult: ...
