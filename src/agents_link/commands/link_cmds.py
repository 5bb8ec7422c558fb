"""Commands that reconcile AGENTS.md with the target rule files.

Each command runs one ReconcilerService operation and renders one status
line per target. Failures on individual targets are printed to stderr and
do not change the exit status.
"""

import json
import logging
from pathlib import Path

from agents_link.config.messages import (
    COLORS,
    COMMAND_MESSAGES,
    INIT_UNMANAGED_MESSAGE,
    STATUS_GLYPHS,
    TARGET_STATUS_MESSAGES,
)
from agents_link.constants import JSON_INDENT
from agents_link.models.enums import TargetAction
from agents_link.models.results import TargetResult
from agents_link.services.reconciler import get_reconciler_service
from agents_link.utils import escape_markup, print_info, print_status

logger = logging.getLogger(__name__)

# (glyph key, color key) per action
_ACTION_STYLES: dict[TargetAction, tuple[str, str]] = {
    TargetAction.LINK_CREATED: ("ok", "success"),
    TargetAction.COPY_CREATED: ("ok", "success"),
    TargetAction.ALREADY_LINKED: ("ok", "success"),
    TargetAction.ALREADY_PRESENT: ("ok", "success"),
    TargetAction.SYNCED: ("ok", "success"),
    TargetAction.LINK_REMOVED: ("ok", "success"),
    TargetAction.COPY_REMOVED: ("ok", "success"),
    TargetAction.LINK_CONFLICT: ("warning", "warning"),
    TargetAction.SKIPPED_UNMANAGED: ("warning", "warning"),
    TargetAction.NOT_FOUND: ("neutral", "muted"),
    TargetAction.NO_SYNC_NEEDED: ("neutral", "muted"),
    TargetAction.FAILED: ("error", "error"),
}


def init_command(project_root: Path | None = None) -> list[TargetResult]:
    """Create symlinks or managed copies for every absent target.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        Per-target results

    Raises:
        SourceMissingError: If AGENTS.md does not exist
    """
    service = get_reconciler_service(project_root)
    results = service.initialize()

    print_info(f"{COMMAND_MESSAGES['init_start']}\n")
    _render_results(results, unmanaged_message=INIT_UNMANAGED_MESSAGE)
    print_info(f"\n{COMMAND_MESSAGES['done']}")
    return results


def sync_command(project_root: Path | None = None) -> list[TargetResult]:
    """Refresh every managed copy from AGENTS.md.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        Per-target results

    Raises:
        SourceMissingError: If AGENTS.md does not exist
    """
    service = get_reconciler_service(project_root)
    results = service.sync()

    print_info(f"{COMMAND_MESSAGES['sync_start']}\n")
    _render_results(results)
    print_info(f"\n{COMMAND_MESSAGES['done']}")
    return results


def clean_command(project_root: Path | None = None) -> list[TargetResult]:
    """Remove every symlink and managed copy at a target path.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        Per-target results
    """
    service = get_reconciler_service(project_root)
    results = service.clean()

    print_info(f"{COMMAND_MESSAGES['clean_start']}\n")
    _render_results(results)
    print_info(f"\n{COMMAND_MESSAGES['done']}")
    return results


def print_targets_command(project_root: Path | None = None, json_output: bool = False) -> None:
    """Print every target path with its current status label.

    Args:
        project_root: Project root directory (defaults to current directory)
        json_output: Emit a JSON object mapping target to label instead
    """
    service = get_reconciler_service(project_root)
    reports = service.report()

    if json_output:
        print(json.dumps({r["target"]: r["label"].value for r in reports}, indent=JSON_INDENT))
        return

    print_info(f"{COMMAND_MESSAGES['targets_start']}\n")
    for report in reports:
        print_info(escape_markup(f"  {report['target']} [{report['label'].value}]"))


def _render_results(results: list[TargetResult], unmanaged_message: str | None = None) -> None:
    changed = sum(1 for result in results if result["action"].changed)
    logger.debug(f"{changed} of {len(results)} targets changed")

    for result in results:
        action = result["action"]
        glyph_key, color_key = _ACTION_STYLES[action]

        if action is TargetAction.SKIPPED_UNMANAGED and unmanaged_message:
            detail = unmanaged_message
        else:
            detail = TARGET_STATUS_MESSAGES[action.value].format(error=result["error"])

        print_status(
            STATUS_GLYPHS[glyph_key],
            result["target"],
            detail,
            style=COLORS[color_key],
            stderr=action is TargetAction.FAILED,
        )
