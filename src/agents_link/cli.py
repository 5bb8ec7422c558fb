"""Main CLI entry point for agents-link."""

import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer
from dotenv import load_dotenv

from agents_link.commands import (
    clean_command,
    init_command,
    print_targets_command,
    sync_command,
)
from agents_link.config.messages import (
    ERROR_MESSAGES,
    HELP_TEXT,
    PROJECT_TAGLINE,
    VERSION_TEXT,
)
from agents_link.config.paths import DOTENV_FILE
from agents_link.config.settings import get_settings
from agents_link.constants import EXIT_FAILURE, EXIT_INTERRUPTED, EXIT_OK, VERSION
from agents_link.exceptions import AgentsLinkError, SourceMissingError
from agents_link.utils import get_console, print_error

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / DOTENV_FILE, verbose=False)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Create main Typer app
app = typer.Typer(
    name="agents-link",
    help=PROJECT_TAGLINE,
    add_completion=False,
    rich_markup_mode="rich",
)

console = get_console()


@app.command("init")
def init() -> None:
    """Create symlinks or managed copies from AGENTS.md.

    Targets that already exist (links, managed copies or your own files)
    are never overwritten.
    """
    _run_source_command(init_command)


@app.command("sync")
def sync() -> None:
    """Re-copy AGENTS.md content into managed copies.

    Symlinks need no syncing. Missing targets are not created; run
    'agents-link init' for that.
    """
    _run_source_command(sync_command)


@app.command("clean")
def clean() -> None:
    """Remove only symlinks and managed copies.

    Files without the agents-link marker are left untouched.
    """
    clean_command()


@app.command("print-targets")
def print_targets(
    json_output: bool = typer.Option(False, "--json", help="Output JSON for agent parsing"),
) -> None:
    """Print all target file paths with their status."""
    print_targets_command(json_output=json_output)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version",
        is_eager=True,
    ),
    help_flag: bool | None = typer.Option(
        None,
        "--help",
        "-h",
        help="Show this help message",
        is_eager=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
) -> None:
    """agents-link - keep AGENTS.md mirrored into AI coding tool rule files.

    Get started:
        agents-link init            # Link or copy AGENTS.md to every target
        agents-link print-targets   # Show what each target currently is
    """
    # Handle version flag
    if version_flag:
        console.print(VERSION_TEXT.format(version=VERSION))
        raise typer.Exit(code=EXIT_OK)

    # Handle help flag or no command
    if help_flag or ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit(code=EXIT_OK)

    _configure_logging(debug)


def _run_source_command(command: Callable[..., Any]) -> None:
    """Run a command that needs AGENTS.md, mapping its absence to an exit code."""
    try:
        command()
    except SourceMissingError as e:
        print_error(ERROR_MESSAGES["source_missing"])
        raise typer.Exit(code=e.exit_code)


def _configure_logging(debug: bool) -> None:
    """Configure the agents_link logger for this run.

    Args:
        debug: Force DEBUG level regardless of AGENTS_LINK_LOG_LEVEL
    """
    level_name = "DEBUG" if debug else get_settings().log_level
    level = getattr(logging, level_name, logging.WARNING)

    app_logger = logging.getLogger("agents_link")
    app_logger.setLevel(level)

    # Clear handlers from a previous run so output goes to the current stderr
    app_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running the 'agents-link'
    command. It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        print_error(ERROR_MESSAGES["cancelled"])
        sys.exit(EXIT_INTERRUPTED)
    except AgentsLinkError as e:
        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))
        sys.exit(e.exit_code)
    except Exception as e:
        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        # Show traceback in debug mode
        if "--debug" in sys.argv:
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        exit_code = getattr(e, "exit_code", EXIT_FAILURE)
        sys.exit(exit_code if isinstance(exit_code, int) else EXIT_FAILURE)


if __name__ == "__main__":
    cli_main()
