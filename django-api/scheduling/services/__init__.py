from scheduling.services.expansion import expand_package, expand_procedure, expand_selection
from scheduling.services.intervals import parse_interval_days
from scheduling.services.merge import materialize, prune, update_field
from scheduling.services.propagation import (
    propagate,
    related_sessions,
    set_session_field,
    set_session_start,
)
from scheduling.services.session_service import SessionSchedulingService
from scheduling.services.temporal import add_days, compute_end, format_local, parse_local

__all__ = [
    "SessionSchedulingService",
    "add_days",
    "compute_end",
    "expand_package",
    "expand_procedure",
    "expand_selection",
    "format_local",
    "materialize",
    "parse_interval_days",
    "parse_local",
    "propagate",
    "prune",
    "related_sessions",
    "set_session_field",
    "set_session_start",
    "update_field",
]
