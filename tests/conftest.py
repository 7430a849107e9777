"""Pytest configuration and shared fixtures for Quoth tests."""

import logging
import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from quoth.lib.markdown_metadata import MarkdownMetadataExtractor
from quoth.models.document import CachedMetadata

NOTES_DIR = Path(__file__).parent / "fixtures" / "notes"


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_env() -> Iterator[dict[str, str]]:
    """Hide QUOTH_* variables from every test and restore them afterwards."""
    original_env = os.environ.copy()
    for name in list(os.environ):
        if name.startswith("QUOTH_"):
            del os.environ[name]
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def reset_quoth_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging() during a test."""
    yield
    root = logging.getLogger("quoth")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def notes_dir() -> Path:
    """Path to the markdown note fixtures."""
    return NOTES_DIR


@pytest.fixture
def example_text() -> str:
    """Note with nested headings and one block anchor (``^ablockid``).

    Zero-based lines:
        0 Pre-heading text.     6 TextC ^ablockid
        1 # First Level         7 ### Third Level One
        2 TextA                 8 TextD
        3 ## Second Level One   9 ## Second Level Three
        4 TextB                10 Text E
        5 ## Second Level Two
    """
    return (NOTES_DIR / "example.md").read_text(encoding="utf-8")


@pytest.fixture
def example_metadata(example_text: str) -> CachedMetadata:
    """Metadata for example.md."""
    return MarkdownMetadataExtractor().extract(example_text)


@pytest.fixture
def dupe_text() -> str:
    """Note whose heading titles repeat at several levels.

    Zero-based lines:
        0 # Section 1   6 ## B           12 Test4
        1 ## A          7 ### 1          13 # Not Unique
        2 ### 1         8 Test3          14 Test5
        3 Test1         9 # Section 2    15 # Not Unique
        4 ### 2        10 ## A           16 Test 6
        5 Test2        11 ### 1
    """
    return (NOTES_DIR / "duplicates.md").read_text(encoding="utf-8")


@pytest.fixture
def dupe_metadata(dupe_text: str) -> CachedMetadata:
    """Metadata for duplicates.md."""
    return MarkdownMetadataExtractor().extract(dupe_text)
