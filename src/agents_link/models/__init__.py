"""Data models for agents-link"""

from .enums import ReportLabel, TargetAction, TargetState
from .results import TargetReport, TargetResult

__all__ = [
    "ReportLabel",
    "TargetAction",
    "TargetState",
    "TargetReport",
    "TargetResult",
]
