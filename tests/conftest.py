"""Shared test fixtures for graft."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def tmp_project(tmp_path: Path) -> Path:
    """Create a minimal npm project structure for testing."""
    (tmp_path / "package.json").write_text('{"name": "demo", "version": "1.0.0"}\n')
    (tmp_path / "src").mkdir()
    return tmp_path


@pytest.fixture()
def console() -> Console:
    """Non-interactive console writing to an in-memory buffer."""
    return Console(file=io.StringIO(), force_terminal=False, width=200)
