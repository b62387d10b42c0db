"""Session scheduling service - orchestration for the appointment form.

Services:
- Depend only on interfaces (stores)
- Validate caller input before it reaches the engine
- Return domain models or domain errors

The engine functions underneath never raise; input that cannot be
interpreted at all (session ids, editable fields) is rejected here.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from scheduling.domain.errors import InvalidSessionFieldError, InvalidSessionIdError
from scheduling.domain.models import Package, SessionState, SessionTemplate
from scheduling.domain.value_objects import SessionKey
from scheduling.services.expansion import expand_selection
from scheduling.services.merge import materialize, prune
from scheduling.services.propagation import set_session_field
from scheduling.stores.interfaces import CatalogStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset({"start", "end"})


def unique_ids(ids: Iterable[str]) -> list[str]:
    """Deduplicate ids, keeping the first occurrence of each."""
    return list(dict.fromkeys(ids))


def parse_session_id(session_id: str) -> SessionKey:
    """Parse a serialized session id.

    Raises:
        InvalidSessionIdError: If the id is not a package or procedure session id.
    """
    try:
        return SessionKey.from_string(session_id)
    except ValueError as exc:
        raise InvalidSessionIdError(session_id) from exc


def _referenced_procedure_ids(packages: Iterable[Package]) -> list[str]:
    return [
        item.procedure_id
        for package in packages
        for item in package.items
        if item.procedure_id
    ]


class SessionSchedulingService:
    """Service for the session scheduling panel of appointment creation."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def expand(
        self, package_ids: Iterable[str], procedure_ids: Iterable[str]
    ) -> list[SessionTemplate]:
        """Return the session templates of the current selection, in display order."""
        package_ids = unique_ids(self._store.normalize_id(pid) for pid in package_ids)
        procedure_ids = unique_ids(self._store.normalize_id(pid) for pid in procedure_ids)

        packages = self._store.get_packages(package_ids)
        lookup_ids = unique_ids(
            [*procedure_ids, *_referenced_procedure_ids(packages.values())]
        )
        procedures = self._store.get_procedures(lookup_ids)

        logger.debug(
            "Expanding %d packages (%d found) and %d procedures (%d found)",
            len(package_ids),
            len(packages),
            len(procedure_ids),
            len([pid for pid in procedure_ids if pid in procedures]),
        )
        return expand_selection(package_ids, procedure_ids, packages, procedures)

    def materialize(
        self,
        state: Sequence[SessionState],
        package_ids: Iterable[str],
        procedure_ids: Iterable[str],
    ) -> list[SessionState]:
        """Return state with an entry for every session of the selection."""
        return materialize(state, self.expand(package_ids, procedure_ids))

    def prune(
        self,
        state: Sequence[SessionState],
        package_ids: Iterable[str],
        procedure_ids: Iterable[str],
    ) -> list[SessionState]:
        """Return state without entries that are no longer selected."""
        return prune(state, self.expand(package_ids, procedure_ids))

    def update_session(
        self,
        state: Sequence[SessionState],
        package_ids: Iterable[str],
        procedure_ids: Iterable[str],
        session_id: str,
        field: str,
        value: Any,
    ) -> list[SessionState]:
        """Apply one user edit and return the new state.

        Raises:
            InvalidSessionIdError: If session_id is malformed.
            InvalidSessionFieldError: If field is not editable.
        """
        if field not in EDITABLE_FIELDS:
            logger.info("Rejected edit of non-editable session field %r", field)
            raise InvalidSessionFieldError(field)
        key = parse_session_id(session_id)

        templates = self.expand(package_ids, procedure_ids)
        return set_session_field(state, templates, key, field, value)
