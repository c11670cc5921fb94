"""Thin wrapper around ``subprocess`` for the external tools graft drives."""

from __future__ import annotations

import logging
import shlex
import subprocess
from typing import TYPE_CHECKING

from graft.errors import RunnerError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class Runner:
    """Runs one binary (``npm``, ``npx``, ``schematics``...) with arguments."""

    def __init__(self, binary: str, *prefix: str) -> None:
        self.binary = binary
        self.prefix = tuple(prefix)

    def command_line(self, args: Sequence[str]) -> list[str]:
        return [self.binary, *self.prefix, *args]

    def run(
        self,
        args: Sequence[str],
        *,
        cwd: Path | None = None,
        collect: bool = False,
    ) -> str | None:
        """Run the binary and wait for it.

        With ``collect=True`` stdout is captured and returned, otherwise the
        child writes straight to the terminal and ``None`` is returned.

        Raises
        ------
        RunnerError
            If the binary is missing or exits with a non-zero status.
        """
        argv = self.command_line(args)
        printable = shlex.join(argv)
        logger.debug("Running %s (cwd=%s)", printable, cwd)

        try:
            proc = subprocess.run(  # noqa: S603
                argv,
                cwd=cwd,
                capture_output=collect,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            msg = f"Command not found: {self.binary}"
            raise RunnerError(msg) from exc

        if proc.returncode != 0:
            msg = f"Failed to execute command: {printable} (exit code {proc.returncode})"
            if collect and proc.stderr:
                msg = f"{msg}\n{proc.stderr.strip()}"
            raise RunnerError(msg)

        if collect:
            return proc.stdout
        return None
