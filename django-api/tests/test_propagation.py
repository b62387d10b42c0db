"""Unit tests for auto-propagation of session dates.

Run with: pytest tests/test_propagation.py -v
"""

from dataclasses import replace

import pytest

from scheduling.domain import Package, PackageItem, SessionKey, SessionState
from scheduling.services.expansion import expand_package, expand_selection
from scheduling.services.merge import materialize
from scheduling.services.propagation import (
    propagate,
    related_sessions,
    set_session_field,
    set_session_start,
)


def by_id(sessions: list[SessionState]) -> dict[str, SessionState]:
    return {session.id: session for session in sessions}


class TestSetSessionStart:
    """Tests for the canonical start edit path."""

    def test_propagates_fifteen_day_interval(self, three_session_package):
        """Session 1 at 09:00 places sessions 2 and 3 fifteen days apart."""
        templates = expand_package(three_session_package, {})
        first = SessionKey.from_string("package-pkg-1-0-0")

        sessions = by_id(set_session_start([], templates, first, "2024-01-01T09:00"))

        assert sessions["package-pkg-1-0-0"].start == "2024-01-01T09:00"
        assert sessions["package-pkg-1-0-0"].end == "2024-01-01T09:30"
        assert sessions["package-pkg-1-0-1"].start == "2024-01-16T09:00"
        assert sessions["package-pkg-1-0-1"].end == "2024-01-16T09:30"
        assert sessions["package-pkg-1-0-2"].start == "2024-01-31T09:00"
        assert sessions["package-pkg-1-0-2"].end == "2024-01-31T09:30"

    def test_materializes_unedited_siblings(self, three_session_package):
        """Siblings that had no state entry are still rescheduled."""
        templates = expand_package(three_session_package, {})
        first = templates[0].key
        sessions = set_session_start([], templates, first, "2024-01-01T09:00")
        assert [s.id for s in sessions] == [t.id for t in templates]
        assert all(s.is_scheduled for s in sessions)

    def test_later_session_edit_does_not_propagate(self, three_session_package):
        """Editing session 2 only moves session 2."""
        templates = expand_package(three_session_package, {})
        sessions = by_id(set_session_start([], templates, templates[1].key, "2024-01-05T14:00"))
        assert sessions["package-pkg-1-0-1"].start == "2024-01-05T14:00"
        assert sessions["package-pkg-1-0-1"].end == "2024-01-05T14:30"
        assert sessions["package-pkg-1-0-0"].start == ""
        assert sessions["package-pkg-1-0-2"].start == ""

    def test_invalid_start_clears_end_without_propagating(self, three_session_package):
        """An unparseable start sets no dates on the rest of the group."""
        templates = expand_package(three_session_package, {})
        sessions = by_id(set_session_start([], templates, templates[0].key, "amanhã"))
        assert sessions["package-pkg-1-0-0"].start == "amanhã"
        assert sessions["package-pkg-1-0-0"].end == ""
        assert sessions["package-pkg-1-0-1"].start == ""

    def test_set_session_field_routes_start(self, three_session_package):
        """A start edit through set_session_field propagates."""
        templates = expand_package(three_session_package, {})
        sessions = by_id(set_session_field([], templates, templates[0].key, "start", "2024-01-01T09:00"))
        assert sessions["package-pkg-1-0-2"].start == "2024-01-31T09:00"

    def test_set_session_field_end_is_plain_update(self, three_session_package):
        """End edits are stored as given, even before the start."""
        templates = expand_package(three_session_package, {})
        state = set_session_start([], templates, templates[0].key, "2024-01-01T09:00")
        sessions = by_id(set_session_field(state, templates, templates[0].key, "end", "2024-01-01T08:00"))
        assert sessions["package-pkg-1-0-0"].end == "2024-01-01T08:00"
        assert sessions["package-pkg-1-0-1"].start == "2024-01-16T09:00"


class TestPropagate:
    """Tests for propagate."""

    @pytest.fixture
    def state(self, three_session_package, peeling):
        other = Package(
            id="pkg-2",
            name="Outro",
            items=(PackageItem(order=0, sessions_count=2, recommended_interval="3 dias"),),
        )
        templates = expand_selection(
            ["pkg-1", "pkg-2"],
            [peeling.id],
            {"pkg-1": three_session_package, "pkg-2": other},
            {peeling.id: peeling},
        )
        return materialize([], templates)

    def test_invalid_anchor_is_noop(self, state):
        """An unparseable start leaves every session unchanged."""
        edited = replace(state[0], start="31/02/2024")
        assert propagate(state, edited) == state

    def test_empty_anchor_is_noop(self, state):
        assert propagate(state, state[0]) == state

    def test_non_first_session_is_noop(self, state):
        edited = replace(state[1], start="2024-01-01T09:00")
        assert propagate(state, edited) == state

    def test_other_groups_are_untouched(self, state):
        """Propagation stays within the edited source."""
        edited = replace(state[0], start="2024-01-01T09:00")
        result = by_id(propagate(state, edited))
        assert result["package-pkg-1-0-1"].start == "2024-01-16T09:00"
        assert result["package-pkg-2-0-1"].start == ""
        assert result["procedure-proc-peeling-1"].start == ""

    def test_edited_session_itself_is_untouched(self, state):
        """propagate does not write the anchor entry."""
        edited = replace(state[0], start="2024-01-01T09:00")
        assert propagate(state, edited)[0] == state[0]

    def test_procedure_group(self, state, peeling):
        """Procedure sessions use their own interval."""
        index = next(i for i, s in enumerate(state) if s.id == "procedure-proc-peeling-0")
        edited = replace(state[index], start="2024-05-30T18:15")
        result = by_id(propagate(state, edited))
        assert result["procedure-proc-peeling-1"].start == "2024-06-09T18:15"
        assert result["procedure-proc-peeling-1"].end == "2024-06-09T19:00"

    def test_uses_each_sessions_own_interval(self):
        """Items with different intervals in one package space independently."""
        package = Package(
            id="pkg",
            name="Misto",
            items=(
                PackageItem(order=0, sessions_count=2, recommended_interval="10 dias"),
                PackageItem(order=1, sessions_count=3, recommended_interval="2 dias"),
            ),
        )
        state = materialize([], expand_package(package, {}))
        edited = replace(state[0], start="2024-01-01T09:00")
        result = by_id(propagate(state, edited))
        assert result["package-pkg-0-1"].start == "2024-01-11T09:00"
        # Session 1 of the second item is not a propagation target.
        assert result["package-pkg-1-0"].start == ""
        assert result["package-pkg-1-1"].start == "2024-01-03T09:00"
        assert result["package-pkg-1-2"].start == "2024-01-05T09:00"

    def test_does_not_mutate_input(self, state):
        snapshot = list(state)
        propagate(state, replace(state[0], start="2024-01-01T09:00"))
        assert state == snapshot


class TestRelatedSessions:
    """Tests for related_sessions."""

    def test_returns_same_group_except_self(self, three_session_package, peeling):
        templates = expand_selection(
            ["pkg-1"], [peeling.id], {"pkg-1": three_session_package}, {peeling.id: peeling}
        )
        state = materialize([], templates)
        assert [s.id for s in related_sessions(state, state[1])] == [
            "package-pkg-1-0-0",
            "package-pkg-1-0-2",
        ]
