"""Auto-propagation of session dates from the first session of a group.

When session #1 of a package or procedure gets a start date, sessions 2..N of
the same group are placed ``(n - 1) * interval_days`` calendar days later at
the same time of day, each using its own interval.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from scheduling.domain.models import SessionState, SessionTemplate
from scheduling.domain.value_objects import SessionKey
from scheduling.services.merge import find_session, materialize, update_field
from scheduling.services.temporal import add_days, compute_end, format_local, parse_local

logger = logging.getLogger(__name__)


def related_sessions(
    sessions: Sequence[SessionState], session: SessionState
) -> list[SessionState]:
    """Other sessions of the same group, in list order."""
    return [
        other
        for other in sessions
        if other.group == session.group and other.key != session.key
    ]


def propagate(
    sessions: Sequence[SessionState], edited: SessionState
) -> list[SessionState]:
    """Reschedule sessions 2..N of the edited session's group.

    A no-op unless the edited session is session #1 with a valid start.
    """
    if edited.session_number != 1:
        return list(sessions)
    first_start = parse_local(edited.start)
    if first_start is None:
        return list(sessions)

    result = []
    moved = 0
    for session in sessions:
        if session.group == edited.group and session.session_number > 1:
            offset = (session.session_number - 1) * session.interval_days
            try:
                start = format_local(add_days(first_start, offset))
            except OverflowError:
                result.append(session)
                continue
            session = replace(
                session,
                start=start,
                end=compute_end(start, session.duration_minutes),
            )
            moved += 1
        result.append(session)

    logger.debug("Propagated %s to %d related sessions", edited.id, moved)
    return result


def set_session_start(
    state: Sequence[SessionState],
    templates: Sequence[SessionTemplate],
    key: SessionKey,
    start: str,
) -> list[SessionState]:
    """Set a session's start, derive its end and propagate to its group.

    Every template is materialized first, so siblings that were never
    edited are rescheduled too.
    """
    working = materialize(state, templates)
    edited = find_session(working, key)
    if edited is None:
        return working

    end = compute_end(start, edited.duration_minutes)
    edited = replace(edited, start=start, end=end)
    working = update_field(working, templates, key, "start", start)
    working = update_field(working, templates, key, "end", end)
    return propagate(working, edited)


def set_session_field(
    state: Sequence[SessionState],
    templates: Sequence[SessionTemplate],
    key: SessionKey,
    field: str,
    value: Any,
) -> list[SessionState]:
    """Apply a user edit. Start edits go through ``set_session_start``."""
    if field == "start":
        return set_session_start(state, templates, key, value)
    return update_field(state, templates, key, field, value)
