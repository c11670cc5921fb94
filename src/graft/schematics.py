"""Schematic collections: named code generators shipped inside packages."""

from __future__ import annotations

import logging
import re
import shlex
from dataclasses import dataclass
from typing import TYPE_CHECKING

from graft.errors import GenerationError, RunnerError
from graft.runners import Runner

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])([A-Z])")


def dasherize(name: str) -> str:
    """``sourceRoot`` -> ``source-root``; underscores and spaces become dashes."""
    name = _CAMEL_BOUNDARY_RE.sub(r"-\1", name)
    return re.sub(r"[_\s]+", "-", name).lower()


@dataclass(frozen=True)
class SchematicOption:
    """One option forwarded to a schematic."""

    name: str
    value: str | bool | None

    def to_args(self) -> list[str]:
        flag = dasherize(self.name)
        if self.value is None:
            return []
        if self.value is True:
            return [f"--{flag}"]
        if self.value is False:
            return [f"--no-{flag}"]
        return [f"--{flag}={self.value}"]


class Collection:
    """A schematic collection resolved from an installed package."""

    def __init__(self, name: str, project_root: Path, *, runner: Runner | None = None) -> None:
        self.name = name
        self.project_root = project_root
        self.runner = runner or Runner("npx", "schematics")

    def __repr__(self) -> str:
        return f"Collection({self.name!r})"

    def build_args(
        self,
        schematic_name: str,
        options: Sequence[SchematicOption] = (),
        extra_flags: str | None = None,
    ) -> list[str]:
        args = [f"{self.name}:{schematic_name}"]
        for option in options:
            args.extend(option.to_args())
        if extra_flags:
            args.extend(shlex.split(extra_flags))
        return args

    def execute(
        self,
        schematic_name: str,
        options: Sequence[SchematicOption] = (),
        extra_flags: str | None = None,
    ) -> None:
        """Run *schematic_name* from this collection against the project.

        Raises
        ------
        GenerationError
            When the pass-through flags cannot be split or the schematics CLI
            fails; carries the underlying message.
        """
        try:
            args = self.build_args(schematic_name, options, extra_flags)
        except ValueError as exc:
            msg = f"Invalid extra flags {extra_flags!r}: {exc}"
            raise GenerationError(msg) from exc
        logger.debug("Executing schematic %s:%s", self.name, schematic_name)
        try:
            self.runner.run(args, cwd=self.project_root)
        except RunnerError as exc:
            raise GenerationError(str(exc)) from exc


class CollectionFactory:
    """Creates :class:`Collection` objects by package name."""

    @staticmethod
    def create(name: str, project_root: Path) -> Collection:
        return Collection(name, project_root)
