"""Console output helpers built on Rich.

Consoles are created lazily and resolve sys.stdout/sys.stderr at print time,
so redirected streams (including test runners) receive the output.
"""

from rich.console import Console
from rich.markup import escape

from agents_link.config.messages import COLORS

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get the shared stdout console.

    Returns:
        Rich console writing to standard output
    """
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def get_error_console() -> Console:
    """Get the shared stderr console.

    Returns:
        Rich console writing to standard error
    """
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True, highlight=False)
    return _error_console


def print_info(message: str) -> None:
    """Print an informational message (Rich markup allowed)."""
    get_console().print(message)


def print_error(message: str) -> None:
    """Print an error message in red to standard error.

    The message is escaped, so paths and brackets are shown literally.
    """
    get_error_console().print(f"[{COLORS['error']}]{escape(message)}[/{COLORS['error']}]")


def print_status(glyph: str, subject: str, detail: str, style: str, stderr: bool = False) -> None:
    """Print a single indented status line: "  {glyph} {subject} ({detail})".

    Args:
        glyph: Status symbol
        subject: Item the line is about (escaped)
        detail: Parenthesized detail text (escaped)
        style: Rich style applied to the glyph
        stderr: Write to standard error instead of standard output
    """
    console = get_error_console() if stderr else get_console()
    console.print(
        f"  [{style}]{glyph}[/{style}] {escape(subject)} ({escape(detail)})",
        soft_wrap=True,
    )


def escape_markup(text: str) -> str:
    """Escape text so Rich prints square brackets literally."""
    return escape(text)
