"""Custom exceptions for agents-link.

Exception hierarchy:
    AgentsLinkError (base)
    └── SourceMissingError

Only errors that abort a whole command are raised. Failures affecting a
single target are reported through results and never raised.
"""

from pathlib import Path
from typing import Any

from agents_link.constants import EXIT_FAILURE, EXIT_SOURCE_MISSING


class AgentsLinkError(Exception):
    """Base exception for all agents-link errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        exit_code: Process exit status the CLI uses for this error.
    """

    exit_code: int = EXIT_FAILURE

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class SourceMissingError(AgentsLinkError):
    """Raised when AGENTS.md does not exist in the project root.

    Raised by init and sync before any target is touched.
    """

    exit_code = EXIT_SOURCE_MISSING

    def __init__(self, path: Path):
        """Initialize source missing error.

        Args:
            path: Path where the source file was expected.
        """
        super().__init__(f"{path.name} not found in {path.parent}", {"path": str(path)})
        self.path = path
