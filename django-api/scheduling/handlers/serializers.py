"""Serializers between API payloads and session domain models."""

from collections.abc import Mapping

from rest_framework import serializers

from scheduling.domain import SessionKey, SessionState


class SessionTemplateSerializer(serializers.Serializer):
    """Serializer for SessionTemplate domain model."""

    id = serializers.CharField()
    source_type = serializers.CharField(source="source_type.value", read_only=True)
    source_id = serializers.CharField(read_only=True)
    item_id = serializers.IntegerField(read_only=True)
    session_number = serializers.IntegerField(read_only=True)
    total_sessions = serializers.IntegerField(min_value=0)
    duration_minutes = serializers.IntegerField(min_value=0)
    interval_text = serializers.CharField(allow_blank=True)
    interval_days = serializers.IntegerField(min_value=1)
    display_name = serializers.CharField(allow_blank=True)

    def validate_id(self, value: str) -> str:
        try:
            SessionKey.from_string(value)
        except ValueError:
            raise serializers.ValidationError("Invalid session ID format")
        return value


class SessionStateSerializer(SessionTemplateSerializer):
    """Serializer for SessionState domain model."""

    start = serializers.CharField(allow_blank=True, required=False, default="")
    end = serializers.CharField(allow_blank=True, required=False, default="")


def session_state_from_data(data: Mapping) -> SessionState:
    """Build a SessionState from SessionStateSerializer.validated_data."""
    return SessionState(
        key=SessionKey.from_string(data["id"]),
        display_name=data["display_name"],
        total_sessions=data["total_sessions"],
        duration_minutes=data["duration_minutes"],
        interval_text=data["interval_text"],
        interval_days=data["interval_days"],
        start=data.get("start", ""),
        end=data.get("end", ""),
    )


class SelectionSerializer(serializers.Serializer):
    """Selected package and procedure ids, in selection order."""

    package_ids = serializers.ListField(child=serializers.CharField(), default=list)
    procedure_ids = serializers.ListField(child=serializers.CharField(), default=list)


class MaterializeRequestSerializer(SelectionSerializer):
    sessions = SessionStateSerializer(many=True, required=False)

    def get_sessions(self) -> list[SessionState]:
        return [
            session_state_from_data(item)
            for item in self.validated_data.get("sessions", [])
        ]


class SessionUpdateRequestSerializer(MaterializeRequestSerializer):
    """A single edit to one session field."""

    id = serializers.CharField()
    field = serializers.CharField()
    value = serializers.CharField(allow_blank=True)
