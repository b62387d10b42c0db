"""Expansion of packages and procedures into ordered session templates."""

import logging
from collections.abc import Iterable, Mapping

from scheduling.domain.models import (
    DEFAULT_SESSION_NAME,
    Package,
    PackageItem,
    Procedure,
    SessionPolicy,
    SessionTemplate,
)
from scheduling.domain.value_objects import SessionKey, SourceType
from scheduling.services.intervals import parse_interval_days

logger = logging.getLogger(__name__)

DEFAULT_SESSION_MINUTES = 60
DEFAULT_INTERVAL_TEXT = "7 dias"


def resolve_item_name(item: PackageItem, procedures: Mapping[str, Procedure]) -> str:
    """Manual name, then the referenced procedure's name, then the item's own name."""
    if item.manual_name:
        return item.manual_name
    if item.procedure_id:
        procedure = procedures.get(item.procedure_id)
        if procedure is not None and procedure.name:
            return procedure.name
    return item.name or DEFAULT_SESSION_NAME


def expand_package(
    package: Package | None, procedures: Mapping[str, Procedure]
) -> list[SessionTemplate]:
    """Expand every item of a package, in item order, into its sessions."""
    if package is None:
        return []

    templates = []
    for item in package.items:
        count = item.sessions_count or 0
        interval_text = item.recommended_interval or DEFAULT_INTERVAL_TEXT
        interval_days = parse_interval_days(interval_text)
        duration = item.session_duration_minutes or DEFAULT_SESSION_MINUTES
        display_name = resolve_item_name(item, procedures)
        for index in range(count):
            templates.append(
                SessionTemplate(
                    key=SessionKey(
                        source_type=SourceType.PACKAGE,
                        source_id=package.id,
                        item_index=item.order or 0,
                        session_number=index + 1,
                    ),
                    display_name=display_name,
                    total_sessions=count,
                    duration_minutes=duration,
                    interval_text=interval_text,
                    interval_days=interval_days,
                )
            )
    return templates


def expand_procedure(procedure: Procedure | None) -> list[SessionTemplate]:
    """Expand a procedure into its recommended number of sessions."""
    if procedure is None:
        return []

    policy = procedure.policy or SessionPolicy()
    count = policy.recommended_count or 1
    duration = (
        policy.estimated_session_minutes
        or procedure.estimated_duration
        or DEFAULT_SESSION_MINUTES
    )
    interval_text = policy.interval or DEFAULT_INTERVAL_TEXT
    interval_days = parse_interval_days(interval_text)

    return [
        SessionTemplate(
            key=SessionKey(
                source_type=SourceType.PROCEDURE,
                source_id=procedure.id,
                item_index=0,
                session_number=index + 1,
            ),
            display_name=procedure.name,
            total_sessions=count,
            duration_minutes=duration,
            interval_text=interval_text,
            interval_days=interval_days,
        )
        for index in range(count)
    ]


def expand_selection(
    package_ids: Iterable[str],
    procedure_ids: Iterable[str],
    packages: Mapping[str, Package],
    procedures: Mapping[str, Procedure],
) -> list[SessionTemplate]:
    """Expand the selected packages, then the selected procedures.

    The resulting order is the display order and must not be re-sorted.
    """
    templates: list[SessionTemplate] = []
    for package_id in package_ids:
        templates.extend(expand_package(packages.get(package_id), procedures))
    for procedure_id in procedure_ids:
        templates.extend(expand_procedure(procedures.get(procedure_id)))
    logger.debug("Expanded selection into %d session templates", len(templates))
    return templates
