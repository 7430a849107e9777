"""Shared fixtures for CLI command tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def dupe_note(notes_dir: Path) -> str:
    """Path to duplicates.md as a CLI argument."""
    return str(notes_dir / "duplicates.md")


@pytest.fixture
def example_note(notes_dir: Path) -> str:
    """Path to example.md as a CLI argument."""
    return str(notes_dir / "example.md")
