"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from scheduling.domain.errors import DomainError
from scheduling.handlers.serializers import (
    MaterializeRequestSerializer,
    SelectionSerializer,
    SessionStateSerializer,
    SessionTemplateSerializer,
    SessionUpdateRequestSerializer,
)
from scheduling.services.session_service import SessionSchedulingService
from scheduling.stores.django_store import DjangoCatalogStore

logger = logging.getLogger(__name__)


def get_service() -> SessionSchedulingService:
    return SessionSchedulingService(DjangoCatalogStore())


def domain_error_response(error: DomainError) -> Response:
    logger.info("Scheduling request rejected: %s", error)
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status.HTTP_400_BAD_REQUEST,
    )


class SessionTemplateListView(APIView):
    """Handler for POST /api/scheduling/templates"""

    def post(self, request: Request) -> Response:
        serializer = SelectionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        templates = get_service().expand(
            serializer.validated_data["package_ids"],
            serializer.validated_data["procedure_ids"],
        )
        return Response({"templates": SessionTemplateSerializer(templates, many=True).data})


class SessionMaterializeView(APIView):
    """Handler for POST /api/scheduling/sessions/materialize"""

    def post(self, request: Request) -> Response:
        serializer = MaterializeRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        sessions = get_service().materialize(
            serializer.get_sessions(),
            serializer.validated_data["package_ids"],
            serializer.validated_data["procedure_ids"],
        )
        return Response({"sessions": SessionStateSerializer(sessions, many=True).data})


class SessionUpdateView(APIView):
    """Handler for POST /api/scheduling/sessions/update"""

    def post(self, request: Request) -> Response:
        serializer = SessionUpdateRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        try:
            sessions = get_service().update_session(
                serializer.get_sessions(),
                data["package_ids"],
                data["procedure_ids"],
                session_id=data["id"],
                field=data["field"],
                value=data["value"],
            )
        except DomainError as error:
            return domain_error_response(error)
        return Response({"sessions": SessionStateSerializer(sessions, many=True).data})
