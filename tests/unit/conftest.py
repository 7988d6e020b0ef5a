"""Fixtures for agentdeck unit tests."""

from pathlib import Path

import pytest

from agentdeck.core.ir import Layout, Role


@pytest.fixture
def empty_layout() -> Layout:
    return Layout(role=Role.AGENT, widgets=[])


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    """Directory for exported and imported theme files."""
    directory = tmp_path / "themes"
    directory.mkdir()
    return directory
