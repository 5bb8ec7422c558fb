"""Pytest configuration and fixtures for agents-link tests."""

import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from agents_link.config.paths import SOURCE_FILE

SAMPLE_SOURCE = "# Test AGENTS.md\n\nThis is a test file.\n"


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep AGENTS_LINK_* variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith("AGENTS_LINK_"):
            monkeypatch.delenv(name)


@pytest.fixture
def temp_project_dir() -> Iterator[Path]:
    """Create a temporary project directory for testing.

    Yields:
        Path to temporary directory
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="agents-link-test-"))
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def source_file(temp_project_dir: Path) -> Path:
    """Create AGENTS.md with sample content in the project directory.

    Args:
        temp_project_dir: Temporary project directory

    Returns:
        Path to created source file
    """
    path = temp_project_dir / SOURCE_FILE
    path.write_text(SAMPLE_SOURCE, encoding="utf-8")
    return path


@pytest.fixture
def no_symlinks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Simulate a filesystem that refuses to create symbolic links."""

    def _deny(*_args: object, **_kwargs: object) -> None:
        raise PermissionError(1, "Operation not permitted")

    monkeypatch.setattr(os, "symlink", _deny)
