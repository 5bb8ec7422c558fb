"""Path constants for agents-link.

This module defines the canonical source file and the fixed set of target
files kept in sync with it. Every path is relative to the project root, which
is the current working directory at invocation time.
"""

# =============================================================================
# Source
# =============================================================================

SOURCE_FILE = "AGENTS.md"

# =============================================================================
# Targets
# =============================================================================
# Order only affects output. Each target is reconciled independently.

CLAUDE_TARGET = "CLAUDE.md"
CURSOR_RULES_TARGET = ".cursor/rules/AGENTS.md"
CURSOR_LEGACY_TARGET = ".cursorrules"
WINDSURF_RULES_TARGET = ".windsurf/rules/AGENTS.md"
COPILOT_TARGET = ".github/copilot-instructions.md"
ZED_RULES_TARGET = ".rules"

TARGET_FILES: tuple[str, ...] = (
    CLAUDE_TARGET,
    CURSOR_RULES_TARGET,
    CURSOR_LEGACY_TARGET,
    WINDSURF_RULES_TARGET,
    COPILOT_TARGET,
    ZED_RULES_TARGET,
)

# Optional .env file read before settings are loaded
DOTENV_FILE = ".env"
