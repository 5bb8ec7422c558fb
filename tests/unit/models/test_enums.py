"""Tests for reconciliation enums."""

import pytest

from agents_link.config.messages import TARGET_STATUS_MESSAGES
from agents_link.models.enums import ReportLabel, TargetAction, TargetState


def test_every_action_has_a_status_message() -> None:
    """Test that each action renders to a status line."""
    assert set(TARGET_STATUS_MESSAGES) == set(TargetAction.values())


@pytest.mark.parametrize("value", TargetState.values())
def test_every_state_has_a_label(value: str) -> None:
    """Test that report labels cover every state."""
    assert isinstance(ReportLabel.from_state(TargetState(value)), ReportLabel)


def test_is_symlink() -> None:
    """Test the symlink state grouping."""
    assert [s for s in TargetState if s.is_symlink] == [
        TargetState.SYMLINK_VALID,
        TargetState.SYMLINK_FOREIGN,
    ]


def test_changed_actions() -> None:
    """Test which actions count as filesystem changes."""
    assert TargetAction.LINK_CREATED.changed
    assert TargetAction.SYNCED.changed
    assert TargetAction.COPY_REMOVED.changed
    assert not TargetAction.ALREADY_LINKED.changed
    assert not TargetAction.SKIPPED_UNMANAGED.changed
    assert not TargetAction.FAILED.changed
