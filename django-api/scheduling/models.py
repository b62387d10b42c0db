"""Django ORM models (persistence layer).

The scheduler only reads this catalog. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Procedure(models.Model):
    """Persistence model for a treatment procedure."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    estimated_duration = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Overall estimated duration in minutes.",
    )
    recommended_session_count = models.PositiveIntegerField(null=True, blank=True)
    estimated_session_minutes = models.PositiveIntegerField(null=True, blank=True)
    session_interval = models.CharField(
        max_length=100,
        blank=True,
        help_text='Free text, e.g. "15 dias".',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Package(models.Model):
    """Persistence model for a treatment package (protocol)."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class PackageItem(models.Model):
    """Persistence model for one treatment line of a package."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    package = models.ForeignKey(Package, on_delete=models.CASCADE, related_name="items")
    procedure = models.ForeignKey(
        Procedure,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="package_items",
    )
    order = models.PositiveIntegerField(default=0)
    name = models.CharField(max_length=255, blank=True)
    manual_name = models.CharField(max_length=255, blank=True)
    sessions_count = models.PositiveIntegerField(default=1)
    session_duration_minutes = models.PositiveIntegerField(null=True, blank=True)
    recommended_interval = models.CharField(max_length=100, blank=True)

    class Meta:
        ordering = ["order"]
        constraints = [
            models.UniqueConstraint(
                fields=["package", "order"], name="scheduling_item_unique_pkg_order"
            ),
        ]

    def __str__(self) -> str:
        return self.manual_name or self.name or f"{self.package.name} #{self.order}"
