"""Result types for commands and services.

This module provides TypedDict definitions for service results,
ensuring type-safe dictionary structures with IDE autocompletion support.
"""

from typing import TypedDict

from agents_link.models.enums import ReportLabel, TargetAction, TargetState


class TargetResult(TypedDict):
    """Result of reconciling one target.

    Tracks the state observed before acting and what was done about it.
    """

    target: str  # Path relative to the project root
    state: TargetState
    action: TargetAction
    error: str | None


class TargetReport(TypedDict):
    """Read-only status of one target for print-targets."""

    target: str
    state: TargetState
    label: ReportLabel
