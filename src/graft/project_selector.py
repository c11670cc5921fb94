"""Interactive choice of the target project in multi-project workspaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from graft import ui

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rich.console import Console

    from graft.configuration import Configuration, ProjectConfig


class ProjectSelector(Protocol):
    """Asks the user to pick one of *choices* and returns the picked entry."""

    def select(self, question: str, choices: list[str]) -> str: ...


class PromptProjectSelector:
    """Terminal selector: a numbered menu answered through ``rich.prompt.Prompt``.

    The user types the entry's number; the labelled entry itself is returned.
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def select(self, question: str, choices: list[str]) -> str:
        from rich.console import Console
        from rich.markup import escape
        from rich.prompt import Prompt

        console = self._console or Console()
        console.print(question)
        for index, name in enumerate(choices, start=1):
            console.print(escape(ui.PROJECT_CHOICE.format(index=index, name=name)))

        numbers = [str(index) for index in range(1, len(choices) + 1)]
        answer = Prompt.ask("Project number", choices=numbers, default="1", console=console)
        return choices[int(answer) - 1]


class FixedProjectSelector:
    """Non-interactive selector that always returns the same answer.

    With no answer configured it picks the first choice (the default project).
    """

    def __init__(self, answer: str | None = None) -> None:
        self.answer = answer
        self.questions: list[tuple[str, list[str]]] = []

    def select(self, question: str, choices: list[str]) -> str:
        self.questions.append((question, list(choices)))
        if self.answer is None:
            return choices[0]
        return self.answer


def should_ask_for_project(
    projects: Mapping[str, ProjectConfig],
    project_name: str | None,
) -> bool:
    """Ask only when named projects exist and none was requested explicitly."""
    return bool(projects) and not project_name


def default_project_name(config: Configuration, default_label: str) -> str:
    """Label for the default target.

    The default is the first project whose ``sourceRoot`` equals the top-level
    one; without such a project the top-level ``sourceRoot`` stands in for it.
    """
    for name, project in config.projects.items():
        if project.source_root == config.source_root:
            return name + default_label
    return config.source_root + default_label


def move_default_project_to_start(
    config: Configuration,
    default_name: str,
    default_label: str,
) -> list[str]:
    """Project names with the labelled default moved to the front."""
    bare_default = default_name.removesuffix(default_label)
    names = [name for name in config.projects if name != bare_default]
    return [default_name, *names]
