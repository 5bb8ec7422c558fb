"""CLI commands for agents-link."""

from agents_link.commands.link_cmds import (
    clean_command,
    init_command,
    print_targets_command,
    sync_command,
)

__all__ = [
    "clean_command",
    "init_command",
    "print_targets_command",
    "sync_command",
]
