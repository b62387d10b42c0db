import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Package",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Procedure",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(max_length=255)),
                (
                    "estimated_duration",
                    models.PositiveIntegerField(
                        blank=True, help_text="Overall estimated duration in minutes.", null=True
                    ),
                ),
                ("recommended_session_count", models.PositiveIntegerField(blank=True, null=True)),
                ("estimated_session_minutes", models.PositiveIntegerField(blank=True, null=True)),
                (
                    "session_interval",
                    models.CharField(
                        blank=True, help_text='Free text, e.g. "15 dias".', max_length=100
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="PackageItem",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("order", models.PositiveIntegerField(default=0)),
                ("name", models.CharField(blank=True, max_length=255)),
                ("manual_name", models.CharField(blank=True, max_length=255)),
                ("sessions_count", models.PositiveIntegerField(default=1)),
                ("session_duration_minutes", models.PositiveIntegerField(blank=True, null=True)),
                ("recommended_interval", models.CharField(blank=True, max_length=100)),
                (
                    "package",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="scheduling.package",
                    ),
                ),
                (
                    "procedure",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="package_items",
                        to="scheduling.procedure",
                    ),
                ),
            ],
            options={
                "ordering": ["order"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("package", "order"), name="scheduling_item_unique_pkg_order"
                    )
                ],
            },
        ),
    ]
