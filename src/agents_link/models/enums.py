"""Enum types for agents-link.

This module provides type-safe enumerations for the reconciliation protocol.
Every operation branches exhaustively on TargetState, so adding a member
here means revisiting each operation in ReconcilerService.
"""

from enum import Enum


class TargetState(str, Enum):
    """What currently occupies a target path."""

    ABSENT = "absent"
    SYMLINK_VALID = "symlink_valid"  # Link resolving to AGENTS.md
    SYMLINK_FOREIGN = "symlink_foreign"  # Link resolving anywhere else
    MANAGED_COPY = "managed_copy"  # Regular file carrying the managed marker
    UNMANAGED_FILE = "unmanaged_file"  # Regular file owned by the user

    @property
    def is_symlink(self) -> bool:
        """Whether the target is a symbolic link of either kind."""
        return self in (TargetState.SYMLINK_VALID, TargetState.SYMLINK_FOREIGN)

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all state values."""
        return [s.value for s in cls]


class TargetAction(str, Enum):
    """Outcome of reconciling a single target."""

    LINK_CREATED = "link_created"
    COPY_CREATED = "copy_created"
    ALREADY_LINKED = "already_linked"
    LINK_CONFLICT = "link_conflict"
    ALREADY_PRESENT = "already_present"
    SKIPPED_UNMANAGED = "skipped_unmanaged"
    NOT_FOUND = "not_found"
    NO_SYNC_NEEDED = "no_sync_needed"
    SYNCED = "synced"
    LINK_REMOVED = "link_removed"
    COPY_REMOVED = "copy_removed"
    FAILED = "failed"

    @property
    def changed(self) -> bool:
        """Whether this action modified the filesystem."""
        return self in (
            TargetAction.LINK_CREATED,
            TargetAction.COPY_CREATED,
            TargetAction.SYNCED,
            TargetAction.LINK_REMOVED,
            TargetAction.COPY_REMOVED,
        )

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all action values."""
        return [a.value for a in cls]


class ReportLabel(str, Enum):
    """Label shown by print-targets for each target."""

    SYMLINK = "symlink"
    MANAGED = "managed"
    UNMANAGED = "exists, not managed"
    NOT_CREATED = "not created"

    @classmethod
    def from_state(cls, state: TargetState) -> "ReportLabel":
        """Map a target state to its display label.

        Both symlink states display as "symlink".
        """
        labels = {
            TargetState.SYMLINK_VALID: cls.SYMLINK,
            TargetState.SYMLINK_FOREIGN: cls.SYMLINK,
            TargetState.MANAGED_COPY: cls.MANAGED,
            TargetState.UNMANAGED_FILE: cls.UNMANAGED,
            TargetState.ABSENT: cls.NOT_CREATED,
        }
        return labels[state]
