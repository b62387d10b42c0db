from scheduling.handlers.views import (
    SessionMaterializeView,
    SessionTemplateListView,
    SessionUpdateView,
)

__all__ = ["SessionMaterializeView", "SessionTemplateListView", "SessionUpdateView"]
