"""Reconciler service for mirroring AGENTS.md into agent rule files.

For every target path the service classifies what is on disk and applies
one fixed decision per operation:

    state            init             sync           clean
    ---------------  ---------------  -------------  --------------
    absent           link or copy     -              -
    symlink (valid)  -                -              remove link
    symlink (other)  - (conflict)     -              remove link
    managed copy     -                rewrite        remove file
    unmanaged file   -                -              -

Ownership is never recorded anywhere: a target belongs to agents-link if it
is a symbolic link or a regular file carrying MANAGED_MARKER. State is
recomputed from disk on every call.

A failure on one target is returned as a FAILED result and the remaining
targets are still processed. Only a missing source aborts init and sync,
before any target is touched.
"""

import logging
import os
from pathlib import Path

from agents_link.config.paths import SOURCE_FILE, TARGET_FILES
from agents_link.config.settings import get_settings
from agents_link.constants import MANAGED_HEADER_BYTES, MANAGED_MARKER
from agents_link.exceptions import SourceMissingError
from agents_link.models.enums import ReportLabel, TargetAction, TargetState
from agents_link.models.results import TargetReport, TargetResult
from agents_link.utils import (
    create_relative_symlink,
    delete_file,
    ensure_dir,
    file_contains,
    file_exists,
    is_symlink,
    path_exists,
    read_bytes,
    resolve_link,
    write_bytes,
)

logger = logging.getLogger(__name__)


def render_managed_copy(source_content: bytes) -> bytes:
    """Build managed copy content: the managed header followed by the source bytes verbatim."""
    return MANAGED_HEADER_BYTES + source_content


def strip_managed_header(content: bytes) -> bytes:
    """Remove the managed header from managed copy content.

    Content that does not start with the exact header is returned unchanged.
    """
    return content.removeprefix(MANAGED_HEADER_BYTES)


class ReconcilerService:
    """Service for creating, refreshing and removing mirrored target files."""

    def __init__(
        self,
        project_root: Path | None = None,
        force_copy: bool | None = None,
        targets: tuple[str, ...] = TARGET_FILES,
    ):
        """Initialize reconciler service.

        Args:
            project_root: Project root directory (defaults to current directory)
            force_copy: Skip symlinks and always write managed copies
                (defaults to the AGENTS_LINK_FORCE_COPY setting)
            targets: Relative target paths, in reporting order
        """
        root = project_root or Path.cwd()
        self.project_root = Path(os.path.normpath(root.absolute()))
        self.source_path = self.project_root / SOURCE_FILE
        self.force_copy = get_settings().force_copy if force_copy is None else force_copy
        self.targets = targets

    def target_path(self, target: str) -> Path:
        """Get the absolute path for a relative target."""
        return self.project_root / target

    def classify(self, target: str) -> TargetState:
        """Classify what currently occupies a target path.

        Args:
            target: Relative target path

        Returns:
            Current state of the target. A target that disappears while being
            inspected is ABSENT; one that exists but cannot be read is
            UNMANAGED_FILE, so it is never overwritten.
        """
        path = self.target_path(target)
        try:
            if not path_exists(path):
                return TargetState.ABSENT

            if is_symlink(path):
                if resolve_link(path) == self.source_path:
                    return TargetState.SYMLINK_VALID
                return TargetState.SYMLINK_FOREIGN

            if path.is_dir():
                return TargetState.UNMANAGED_FILE

            if file_contains(path, MANAGED_MARKER):
                return TargetState.MANAGED_COPY
            return TargetState.UNMANAGED_FILE
        except FileNotFoundError as e:
            logger.debug(f"{path} vanished during inspection, treating as absent: {e}")
            return TargetState.ABSENT
        except OSError as e:
            logger.debug(f"Could not inspect {path}, treating as unmanaged: {e}")
            return TargetState.UNMANAGED_FILE

    # =========================================================================
    # Operations
    # =========================================================================

    def initialize(self) -> list[TargetResult]:
        """Create a symlink (or managed copy) for every absent target.

        Existing links, managed copies and user files are left untouched.

        Returns:
            One result per target, in target order

        Raises:
            SourceMissingError: If AGENTS.md does not exist
        """
        self._require_source()
        return [self._initialize_target(target) for target in self.targets]

    def sync(self) -> list[TargetResult]:
        """Rewrite every managed copy from the current AGENTS.md.

        Never creates targets and never touches symlinks or user files.

        Returns:
            One result per target, in target order

        Raises:
            SourceMissingError: If AGENTS.md does not exist
        """
        self._require_source()
        return [self._sync_target(target) for target in self.targets]

    def clean(self) -> list[TargetResult]:
        """Remove every symlink and managed copy at a target path.

        Works without AGENTS.md. Any symlink at a target path is removed,
        wherever it points. User files are left untouched.

        Returns:
            One result per target, in target order
        """
        return [self._clean_target(target) for target in self.targets]

    def report(self) -> list[TargetReport]:
        """Describe every target without modifying anything.

        Returns:
            One report per target, in target order
        """
        reports: list[TargetReport] = []
        for target in self.targets:
            state = self.classify(target)
            reports.append(
                {"target": target, "state": state, "label": ReportLabel.from_state(state)}
            )
        return reports

    # =========================================================================
    # Per-target handlers
    # =========================================================================

    def _initialize_target(self, target: str) -> TargetResult:
        state = self.classify(target)

        if state is TargetState.SYMLINK_VALID:
            return self._result(target, state, TargetAction.ALREADY_LINKED)
        if state is TargetState.SYMLINK_FOREIGN:
            return self._result(target, state, TargetAction.LINK_CONFLICT)
        if state is TargetState.MANAGED_COPY:
            return self._result(target, state, TargetAction.ALREADY_PRESENT)
        if state is TargetState.UNMANAGED_FILE:
            return self._result(target, state, TargetAction.SKIPPED_UNMANAGED)

        path = self.target_path(target)
        try:
            ensure_dir(path.parent)
        except OSError as e:
            return self._failed(target, state, e)

        if not self.force_copy and create_relative_symlink(self.source_path, path):
            logger.info(f"Created symlink {target}")
            return self._result(target, state, TargetAction.LINK_CREATED)

        try:
            self._write_managed_copy(path)
        except OSError as e:
            return self._failed(target, state, e)

        logger.info(f"Created managed copy {target}")
        return self._result(target, state, TargetAction.COPY_CREATED)

    def _sync_target(self, target: str) -> TargetResult:
        state = self.classify(target)

        if state is TargetState.ABSENT:
            return self._result(target, state, TargetAction.NOT_FOUND)
        if state in (TargetState.SYMLINK_VALID, TargetState.SYMLINK_FOREIGN):
            return self._result(target, state, TargetAction.NO_SYNC_NEEDED)
        if state is TargetState.UNMANAGED_FILE:
            return self._result(target, state, TargetAction.SKIPPED_UNMANAGED)

        try:
            self._write_managed_copy(self.target_path(target))
        except OSError as e:
            return self._failed(target, state, e)

        logger.info(f"Synced managed copy {target}")
        return self._result(target, state, TargetAction.SYNCED)

    def _clean_target(self, target: str) -> TargetResult:
        state = self.classify(target)

        if state is TargetState.ABSENT:
            return self._result(target, state, TargetAction.NOT_FOUND)
        if state is TargetState.UNMANAGED_FILE:
            return self._result(target, state, TargetAction.SKIPPED_UNMANAGED)

        action = TargetAction.LINK_REMOVED if state.is_symlink else TargetAction.COPY_REMOVED
        try:
            delete_file(self.target_path(target))
        except OSError as e:
            return self._failed(target, state, e)

        logger.info(f"Removed {target} ({state.value})")
        return self._result(target, state, action)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_source(self) -> None:
        if not file_exists(self.source_path):
            raise SourceMissingError(self.source_path)

    def _write_managed_copy(self, path: Path) -> None:
        # Source is read per target so every copy reflects the file on disk
        write_bytes(path, render_managed_copy(read_bytes(self.source_path)))

    def _result(
        self,
        target: str,
        state: TargetState,
        action: TargetAction,
        error: str | None = None,
    ) -> TargetResult:
        return {"target": target, "state": state, "action": action, "error": error}

    def _failed(self, target: str, state: TargetState, error: OSError) -> TargetResult:
        logger.debug(f"Failed to reconcile {target}: {error}")
        return self._result(target, state, TargetAction.FAILED, str(error))


def get_reconciler_service(project_root: Path | None = None) -> ReconcilerService:
    """Get a ReconcilerService instance.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        ReconcilerService instance
    """
    return ReconcilerService(project_root)
