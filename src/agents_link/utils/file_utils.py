"""File system utilities for agents-link.

Every existence check here uses lstat semantics: a symbolic link counts as
present even when its destination is missing.
"""

import logging
import os
from pathlib import Path

from agents_link.constants import MANAGED_FILE_ENCODING

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    path.mkdir(parents=True, exist_ok=True)


def path_exists(path: Path) -> bool:
    """Check whether anything (file, directory or link) occupies a path.

    Unlike Path.exists(), this does not follow symbolic links, so a dangling
    link is reported as existing.

    Args:
        path: Path to check

    Returns:
        True if an entry exists at path, False otherwise
    """
    return os.path.lexists(path)


def is_symlink(path: Path) -> bool:
    """Check if path is a symbolic link (without following it).

    Args:
        path: Path to check

    Returns:
        True if path is a symlink, False otherwise
    """
    return path.is_symlink()


def file_exists(path: Path) -> bool:
    """Check if file exists.

    Args:
        path: Path to check

    Returns:
        True if file exists, False otherwise
    """
    return path.exists() and path.is_file()


def read_bytes(path: Path) -> bytes:
    """Read raw file contents.

    No decoding is done, so content in any encoding is returned unchanged.

    Args:
        path: Path to file to read

    Returns:
        File contents as bytes

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    return path.read_bytes()


def write_bytes(path: Path, content: bytes) -> None:
    """Write raw content to a file, truncating any previous content.

    Args:
        path: Path to file to write
        content: Content to write

    Creates parent directories if they don't exist.
    """
    ensure_dir(path.parent)
    path.write_bytes(content)


def file_contains(path: Path, needle: str) -> bool:
    """Check whether a text file contains a string.

    Undecodable bytes are replaced rather than raising, so binary or
    non-UTF-8 files simply do not match.

    Args:
        path: Path to file to search
        needle: String to look for

    Returns:
        True if needle occurs in the file contents

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, encoding=MANAGED_FILE_ENCODING, errors="replace") as f:
        return needle in f.read()


def delete_file(path: Path) -> bool:
    """Delete a file or symbolic link if it exists.

    Symbolic links are removed themselves, never their destination.

    Args:
        path: Path to file to delete

    Returns:
        True if file was deleted, False if it didn't exist
    """
    if path_exists(path):
        path.unlink()
        return True
    return False


def relative_link_path(source: Path, link_path: Path) -> str:
    """Compute the link text that makes link_path point at source.

    The result is relative to the link's own directory so a tree containing
    both can be moved as a unit.

    Args:
        source: File the link should resolve to
        link_path: Location of the link

    Returns:
        Relative path string suitable for os.symlink

    Example:
        >>> relative_link_path(Path("/repo/AGENTS.md"), Path("/repo/.cursor/rules/AGENTS.md"))
        '../../AGENTS.md'
    """
    return os.path.relpath(source, link_path.parent)


def resolve_link(link_path: Path) -> Path:
    """Resolve a symbolic link's destination without touching the destination.

    The link text is joined to the link's directory and normalized
    lexically, so dangling links resolve too.

    Args:
        link_path: Symbolic link to read

    Returns:
        Absolute, normalized destination path

    Raises:
        OSError: If the link cannot be read
    """
    destination = os.readlink(link_path)
    return Path(os.path.normpath(os.path.join(link_path.parent, destination)))


def create_relative_symlink(source: Path, link_path: Path) -> bool:
    """Try to create a relative symbolic link at link_path pointing to source.

    Args:
        source: File the link should resolve to
        link_path: Location of the new link (must not exist)

    Returns:
        True if the link was created, False if the platform refused
    """
    link_text = relative_link_path(source, link_path)
    try:
        os.symlink(link_text, link_path)
    except OSError as e:
        logger.debug(f"Symlink {link_path} -> {link_text} failed: {e}")
        return False

    logger.debug(f"Symlinked {link_path} -> {link_text}")
    return True
