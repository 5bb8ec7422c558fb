"""Tests for file system utilities.

Tests cover:
- lstat-style existence checks for dangling links
- Verbatim read/write of raw file content
- Relative link text computation and resolution
- Symlink creation with failure reporting
"""

import os
import sys
from pathlib import Path

import pytest

from agents_link.utils.file_utils import (
    create_relative_symlink,
    delete_file,
    file_contains,
    path_exists,
    read_bytes,
    relative_link_path,
    resolve_link,
    write_bytes,
)

requires_symlinks = pytest.mark.skipif(
    sys.platform == "win32", reason="symlinks need special privileges on Windows"
)

# =============================================================================
# relative_link_path()
# =============================================================================

_LINK_CASES = [
    # (link, expected, description)
    ("CLAUDE.md", "AGENTS.md", "sibling"),
    (".github/copilot-instructions.md", os.path.join("..", "AGENTS.md"), "one level down"),
    (".cursor/rules/AGENTS.md", os.path.join("..", "..", "AGENTS.md"), "two levels down"),
]


@pytest.mark.parametrize(
    "link,expected",
    [(c[0], c[1]) for c in _LINK_CASES],
    ids=[c[2] for c in _LINK_CASES],
)
def test_relative_link_path(tmp_path: Path, link: str, expected: str) -> None:
    """Verify link text is relative to the link's own directory."""
    assert relative_link_path(tmp_path / "AGENTS.md", tmp_path / link) == expected


# =============================================================================
# read_bytes() / write_bytes()
# =============================================================================


def test_write_bytes_creates_parent_directories(tmp_path: Path) -> None:
    """Test that write_bytes creates missing parent directories."""
    path = tmp_path / "a" / "b" / "file.md"
    write_bytes(path, b"content")
    assert path.read_bytes() == b"content"


def test_write_then_read_keeps_bytes(tmp_path: Path) -> None:
    """Test that line endings and non-UTF-8 bytes survive unchanged."""
    path = tmp_path / "file.md"
    write_bytes(path, b"one\r\ntwo\nthr\xe9e")
    assert read_bytes(path) == b"one\r\ntwo\nthr\xe9e"


def test_write_bytes_truncates(tmp_path: Path) -> None:
    """Test that shorter content fully replaces longer content."""
    path = tmp_path / "file.md"
    write_bytes(path, b"a much longer first version")
    write_bytes(path, b"short")
    assert read_bytes(path) == b"short"


def test_read_bytes_missing(tmp_path: Path) -> None:
    """Test that reading a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_bytes(tmp_path / "missing.md")


# =============================================================================
# file_contains()
# =============================================================================


def test_file_contains(tmp_path: Path) -> None:
    """Test substring search in text files."""
    path = tmp_path / "file.md"
    path.write_text("header\nmarker-here\n", encoding="utf-8")

    assert file_contains(path, "marker-here")
    assert not file_contains(path, "absent")


def test_file_contains_tolerates_binary(tmp_path: Path) -> None:
    """Test that undecodable bytes do not raise."""
    path = tmp_path / "file.bin"
    path.write_bytes(b"\x80\x81\xff")
    assert not file_contains(path, "marker")


# =============================================================================
# Symbolic links
# =============================================================================


@requires_symlinks
def test_path_exists_sees_dangling_link(tmp_path: Path) -> None:
    """Test that a dangling link still counts as existing."""
    link = tmp_path / "link.md"
    os.symlink("missing.md", link)

    assert path_exists(link)
    assert not link.exists()


@requires_symlinks
def test_resolve_link_is_lexical(tmp_path: Path) -> None:
    """Test that link destinations resolve without following the target."""
    (tmp_path / "rules").mkdir()
    link = tmp_path / "rules" / "AGENTS.md"
    os.symlink("../AGENTS.md", link)

    assert resolve_link(link) == Path(os.path.normpath(tmp_path / "AGENTS.md"))


@requires_symlinks
def test_create_relative_symlink(tmp_path: Path) -> None:
    """Test that a relative link is created and resolves to the source."""
    source = tmp_path / "AGENTS.md"
    source.write_text("source", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    link = tmp_path / "nested" / "AGENTS.md"

    assert create_relative_symlink(source, link)
    assert os.readlink(link) == os.path.join("..", "AGENTS.md")
    assert link.read_text(encoding="utf-8") == "source"


def test_create_relative_symlink_reports_failure(tmp_path: Path, no_symlinks: None) -> None:
    """Test that a refused symlink returns False instead of raising."""
    link = tmp_path / "CLAUDE.md"

    assert not create_relative_symlink(tmp_path / "AGENTS.md", link)
    assert not path_exists(link)


@requires_symlinks
def test_delete_file_removes_link_not_destination(tmp_path: Path) -> None:
    """Test that deleting a link leaves its destination intact."""
    source = tmp_path / "AGENTS.md"
    source.write_text("source", encoding="utf-8")
    link = tmp_path / "CLAUDE.md"
    os.symlink("AGENTS.md", link)

    assert delete_file(link)
    assert not path_exists(link)
    assert source.read_text(encoding="utf-8") == "source"


def test_delete_file_missing(tmp_path: Path) -> None:
    """Test that deleting a missing path returns False."""
    assert not delete_file(tmp_path / "missing.md")
