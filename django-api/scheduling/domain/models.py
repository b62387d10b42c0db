"""Domain models for the session scheduler.

These are pure domain objects with no API input rules.
Django ORM models are in scheduling/models.py (persistence layer).
"""

from dataclasses import dataclass
from typing import Self

from scheduling.domain.value_objects import SessionKey, SourceType

DEFAULT_SESSION_NAME = "Session"


@dataclass(frozen=True)
class SessionPolicy:
    """Recommended multi-session policy of a procedure."""

    recommended_count: int | None = None
    estimated_session_minutes: int | None = None
    interval: str | None = None


@dataclass(frozen=True)
class Procedure:
    """Domain representation of a Procedure."""

    id: str
    name: str
    policy: SessionPolicy | None = None
    estimated_duration: int | None = None


@dataclass(frozen=True)
class PackageItem:
    """One treatment line of a Package."""

    order: int | None
    sessions_count: int | None
    session_duration_minutes: int | None = None
    recommended_interval: str | None = None
    name: str | None = None
    manual_name: str | None = None
    procedure_id: str | None = None


@dataclass(frozen=True)
class Package:
    """Domain representation of a treatment Package."""

    id: str
    name: str
    items: tuple[PackageItem, ...] = ()


@dataclass(frozen=True)
class SessionTemplate:
    """One derived occurrence of a package item or procedure. Carries no dates."""

    key: SessionKey
    display_name: str
    total_sessions: int
    duration_minutes: int
    interval_text: str
    interval_days: int

    @property
    def id(self) -> str:
        return str(self.key)

    @property
    def source_type(self) -> SourceType:
        return self.key.source_type

    @property
    def source_id(self) -> str:
        return self.key.source_id

    @property
    def item_id(self) -> int | None:
        if self.key.source_type is SourceType.PACKAGE:
            return self.key.item_index
        return None

    @property
    def session_number(self) -> int:
        return self.key.session_number

    @property
    def group(self) -> tuple[SourceType, str]:
        return self.key.group


@dataclass(frozen=True)
class SessionState(SessionTemplate):
    """The editable, dated record for one session."""

    start: str = ""
    end: str = ""

    @property
    def is_scheduled(self) -> bool:
        return bool(self.start)

    @classmethod
    def from_template(cls, template: SessionTemplate) -> Self:
        return cls(
            key=template.key,
            display_name=template.display_name,
            total_sessions=template.total_sessions,
            duration_minutes=template.duration_minutes,
            interval_text=template.interval_text,
            interval_days=template.interval_days,
        )
