"""Constants for agents-link.

This module contains:
- VERSION: Package version
- Exit codes used by the command line interface
- The managed marker and header written into every managed copy

For paths and user-facing messages, import from:
- agents_link.config.paths
- agents_link.config.messages

For runtime settings, import from:
- agents_link.config.settings
"""

from agents_link import __version__
from agents_link.config.paths import SOURCE_FILE

# =============================================================================
# Version
# =============================================================================

VERSION = __version__
PROGRAM_NAME = "agents-link"

# =============================================================================
# Managed Copies
# =============================================================================

# Ownership of a managed copy is decided solely by this string. Changing it
# orphans every copy written by earlier versions.
MANAGED_MARKER = (
    "agents-link:managed:e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
)

MANAGED_HEADER = (
    f"<!-- {MANAGED_MARKER} -->\n"
    f"<!-- This file is auto-managed by {PROGRAM_NAME}. Do not edit manually. -->\n"
    f"<!-- Source: {SOURCE_FILE} -->\n"
    "\n"
)

MANAGED_FILE_ENCODING = "utf-8"

# Copies are written as raw bytes so the source body needs no decoding
MANAGED_HEADER_BYTES = MANAGED_HEADER.encode(MANAGED_FILE_ENCODING)

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SOURCE_MISSING = 3
EXIT_INTERRUPTED = 130

# =============================================================================
# Output
# =============================================================================

JSON_INDENT = 2
