from django.urls import path

from scheduling.handlers import SessionMaterializeView, SessionTemplateListView, SessionUpdateView

urlpatterns = [
    path("templates", SessionTemplateListView.as_view(), name="session-templates"),
    path(
        "sessions/materialize",
        SessionMaterializeView.as_view(),
        name="session-materialize",
    ),
    path("sessions/update", SessionUpdateView.as_view(), name="session-update"),
]
