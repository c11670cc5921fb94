"""Tests for graft.schematics — option rendering and collection execution."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from graft.errors import GenerationError, RunnerError
from graft.schematics import Collection, CollectionFactory, SchematicOption, dasherize

if TYPE_CHECKING:
    from pathlib import Path


class TestDasherize:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("sourceRoot", "source-root"),
            ("dryRun", "dry-run"),
            ("skip_import", "skip-import"),
            ("flat", "flat"),
            ("spec2File", "spec2-file"),
        ],
    )
    def test_dasherize(self, name: str, expected: str) -> None:
        assert dasherize(name) == expected


class TestSchematicOption:
    def test_string_value(self) -> None:
        assert SchematicOption("sourceRoot", "apps/api/src").to_args() == [
            "--source-root=apps/api/src"
        ]

    def test_true_flag(self) -> None:
        assert SchematicOption("dryRun", True).to_args() == ["--dry-run"]

    def test_false_flag(self) -> None:
        assert SchematicOption("spec", False).to_args() == ["--no-spec"]

    def test_none_skipped(self) -> None:
        assert SchematicOption("sourceRoot", None).to_args() == []


class TestCollection:
    def test_build_args(self, tmp_path: Path) -> None:
        collection = Collection("@nestjs/swagger", tmp_path, runner=MagicMock())
        args = collection.build_args(
            "graft-add",
            [SchematicOption("sourceRoot", "src")],
            "--skip-plugin --name 'my api'",
        )
        assert args == [
            "@nestjs/swagger:graft-add",
            "--source-root=src",
            "--skip-plugin",
            "--name",
            "my api",
        ]

    def test_execute_runs_in_project_root(self, tmp_path: Path) -> None:
        runner = MagicMock()
        Collection("lodash/fp", tmp_path, runner=runner).execute("graft-add")
        runner.run.assert_called_once_with(["lodash/fp:graft-add"], cwd=tmp_path)

    def test_execute_failure(self, tmp_path: Path) -> None:
        runner = MagicMock()
        runner.run.side_effect = RunnerError("template not found")
        collection = Collection("@nestjs/swagger", tmp_path, runner=runner)
        with pytest.raises(GenerationError, match="template not found"):
            collection.execute("graft-add")

    def test_execute_unbalanced_quote(self, tmp_path: Path) -> None:
        runner = MagicMock()
        collection = Collection("lodash", tmp_path, runner=runner)
        with pytest.raises(GenerationError, match="No closing quotation"):
            collection.execute("graft-add", extra_flags="--title=it's")
        runner.run.assert_not_called()

    def test_factory_uses_schematics_cli(self, tmp_path: Path) -> None:
        collection = CollectionFactory.create("@nestjs/swagger", tmp_path)
        assert collection.name == "@nestjs/swagger"
        assert collection.runner.command_line(["x"]) == ["npx", "schematics", "x"]
