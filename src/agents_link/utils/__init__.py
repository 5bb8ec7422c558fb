"""Utility functions for agents-link."""

from agents_link.utils.console import (
    escape_markup,
    get_console,
    get_error_console,
    print_error,
    print_info,
    print_status,
)
from agents_link.utils.file_utils import (
    create_relative_symlink,
    delete_file,
    ensure_dir,
    file_contains,
    file_exists,
    is_symlink,
    path_exists,
    read_bytes,
    relative_link_path,
    resolve_link,
    write_bytes,
)

__all__ = [
    "escape_markup",
    "get_console",
    "get_error_console",
    "print_error",
    "print_info",
    "print_status",
    "create_relative_symlink",
    "delete_file",
    "ensure_dir",
    "file_contains",
    "file_exists",
    "is_symlink",
    "path_exists",
    "read_bytes",
    "relative_link_path",
    "resolve_link",
    "write_bytes",
]
