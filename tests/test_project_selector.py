"""Tests for graft.project_selector — default-first project ordering."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

from graft.configuration import Configuration, ProjectConfig
from graft.project_selector import (
    FixedProjectSelector,
    PromptProjectSelector,
    default_project_name,
    move_default_project_to_start,
    should_ask_for_project,
)

if TYPE_CHECKING:
    from rich.console import Console

LABEL = " [ Default ]"


def _config(source_root: str = "src", **projects: str) -> Configuration:
    return Configuration(
        source_root=source_root,
        projects={name: ProjectConfig(source_root=root) for name, root in projects.items()},
    )


class TestShouldAskForProject:
    def test_no_projects(self) -> None:
        assert should_ask_for_project({}, None) is False

    def test_projects_without_name(self) -> None:
        config = _config(api="apps/api/src")
        assert should_ask_for_project(config.projects, None) is True
        assert should_ask_for_project(config.projects, "") is True

    def test_projects_with_name(self) -> None:
        config = _config(api="apps/api/src")
        assert should_ask_for_project(config.projects, "api") is False


class TestDefaultProjectName:
    def test_matching_project(self) -> None:
        config = _config("apps/api/src", admin="apps/admin/src", api="apps/api/src")
        assert default_project_name(config, LABEL) == "api [ Default ]"

    def test_falls_back_to_source_root(self) -> None:
        config = _config("src", admin="apps/admin/src")
        assert default_project_name(config, LABEL) == "src [ Default ]"


class TestMoveDefaultProjectToStart:
    def test_named_default_moves_first(self) -> None:
        config = _config("apps/api/src", admin="apps/admin/src", api="apps/api/src")
        choices = move_default_project_to_start(config, "api [ Default ]", LABEL)
        assert choices == ["api [ Default ]", "admin"]

    def test_source_root_default_prepended(self) -> None:
        config = _config("src", admin="apps/admin/src", web="apps/web/src")
        choices = move_default_project_to_start(config, "src [ Default ]", LABEL)
        assert choices == ["src [ Default ]", "admin", "web"]


class TestSelectors:
    def test_fixed_selector_defaults_to_first(self) -> None:
        selector = FixedProjectSelector()
        assert selector.select("Which?", ["a [ Default ]", "b"]) == "a [ Default ]"
        assert selector.questions == [("Which?", ["a [ Default ]", "b"])]

    def test_fixed_selector_answer(self) -> None:
        assert FixedProjectSelector("b").select("Which?", ["a", "b"]) == "b"

    def test_prompt_selector_numbered_menu(self, console: Console) -> None:
        choices = ["src [ Default ]", "admin"]
        with patch("rich.prompt.Prompt.ask", return_value="2") as ask:
            answer = PromptProjectSelector(console).select("Which?", choices)
        assert answer == "admin"
        ask.assert_called_once_with(
            "Project number", choices=["1", "2"], default="1", console=console
        )
        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "Which?" in output
        assert "1) src [ Default ]" in output
        assert "2) admin" in output

    def test_prompt_selector_default_returns_labelled_entry(self, console: Console) -> None:
        choices = ["api [ Default ]", "admin"]
        with patch("rich.prompt.Prompt.ask", return_value="1"):
            assert PromptProjectSelector(console).select("Which?", choices) == "api [ Default ]"
