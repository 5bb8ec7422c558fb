"""UI messages and strings for agents-link.

This module consolidates all user-facing messages including:
- Help text and version string
- Per-command banners
- Per-target status lines
- Error messages
"""

from agents_link.config.paths import SOURCE_FILE, TARGET_FILES

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = f"Sync {SOURCE_FILE} to AI coding environment rule files"
VERSION_TEXT = "agents-link v{version}"

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = f"""
[bold cyan]agents-link[/bold cyan] - {PROJECT_TAGLINE}

[bold]USAGE:[/bold]
  agents-link <command> \\[options]

[bold]COMMANDS:[/bold]
  [cyan]init[/cyan]            Create symlinks or managed copies from {SOURCE_FILE}
  [cyan]sync[/cyan]            Re-copy content to managed copies
  [cyan]clean[/cyan]           Remove only symlinks and managed copies
  [cyan]print-targets[/cyan]   Print all target file paths

[bold]OPTIONS:[/bold]
  --help, -h      Show this help message
  --version, -v   Show version
  --debug         Enable debug logging

[bold]TARGETS:[/bold]
{chr(10).join(f"  {target}" for target in TARGET_FILES)}

[bold]EXAMPLES:[/bold]
  [dim]$ agents-link init[/dim]
  [dim]$ agents-link sync[/dim]
  [dim]$ agents-link clean[/dim]
  [dim]$ agents-link print-targets --json[/dim]
"""

# =============================================================================
# Command Banners
# =============================================================================

COMMAND_MESSAGES = {
    "init_start": f"Initializing agents-link from {SOURCE_FILE}...",
    "sync_start": f"Syncing from {SOURCE_FILE}...",
    "clean_start": "Cleaning agents-link managed files...",
    "targets_start": "Target files:",
    "done": "Done!",
}

# =============================================================================
# Target Status Lines
# =============================================================================
# Keyed by TargetAction value. Rendered as "  {glyph} {target} ({text})".

TARGET_STATUS_MESSAGES = {
    "link_created": "symlink created",
    "copy_created": "managed copy created",
    "already_linked": "symlink already exists",
    "link_conflict": "symlink exists but points elsewhere",
    "already_present": "managed copy already exists",
    "skipped_unmanaged": "not managed, skipping",
    "not_found": "does not exist",
    "no_sync_needed": "symlink, no sync needed",
    "synced": "synced",
    "link_removed": "symlink removed",
    "copy_removed": "managed copy removed",
    "failed": "failed: {error}",
}

# init words the unmanaged case differently from sync and clean
INIT_UNMANAGED_MESSAGE = "file exists, not managed - skipping"

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "source_missing": f"Error: {SOURCE_FILE} not found in current directory",
    "generic_error": "An error occurred: {error}",
    "cancelled": "Cancelled by user",
}

# =============================================================================
# UI Styling
# =============================================================================

STATUS_GLYPHS = {
    "ok": "✓",
    "warning": "⚠",
    "neutral": "-",
    "error": "✗",
}

COLORS = {
    "primary": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "info": "blue",
    "muted": "dim",
}
