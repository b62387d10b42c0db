from scheduling.domain.models import (
    Package,
    PackageItem,
    Procedure,
    SessionPolicy,
    SessionState,
    SessionTemplate,
)
from scheduling.domain.value_objects import SessionKey, SourceType

__all__ = [
    "Package",
    "PackageItem",
    "Procedure",
    "SessionPolicy",
    "SessionState",
    "SessionTemplate",
    "SessionKey",
    "SourceType",
]
