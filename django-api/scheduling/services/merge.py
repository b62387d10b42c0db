"""Reconciliation of edited session state with freshly expanded templates.

State lists are owned by the caller. Every function here returns a new list
and leaves its inputs untouched.
"""

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from scheduling.domain.models import SessionState, SessionTemplate
from scheduling.domain.value_objects import SessionKey


def materialize(
    state: Sequence[SessionState], templates: Sequence[SessionTemplate]
) -> list[SessionState]:
    """Append an empty state entry for every template that has none yet.

    Existing entries keep their position and values. Entries whose template
    is gone are kept as well; see ``prune``.
    """
    merged = list(state)
    present = {session.key for session in merged}
    for template in templates:
        if template.key not in present:
            merged.append(SessionState.from_template(template))
            present.add(template.key)
    return merged


def update_field(
    state: Sequence[SessionState],
    templates: Sequence[SessionTemplate],
    key: SessionKey,
    field: str,
    value: Any,
) -> list[SessionState]:
    """Set one field on the entry for key, materializing it if needed."""
    updated = list(state)
    for position, session in enumerate(updated):
        if session.key == key:
            updated[position] = replace(session, **{field: value})
            return updated

    for template in templates:
        if template.key == key:
            updated.append(replace(SessionState.from_template(template), **{field: value}))
            break
    return updated


def prune(
    state: Sequence[SessionState], templates: Sequence[SessionTemplate]
) -> list[SessionState]:
    """Drop entries whose template is no longer part of the selection."""
    current = {template.key for template in templates}
    return [session for session in state if session.key in current]


def find_session(state: Sequence[SessionState], key: SessionKey) -> SessionState | None:
    return next((session for session in state if session.key == key), None)
