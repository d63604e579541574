import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("properties", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("room_number", models.CharField(max_length=20)),
                ("type", models.CharField(choices=[("private", "Private"), ("shared", "Shared")], max_length=16)),
                (
                    "bathroom_type",
                    models.CharField(choices=[("private", "Private"), ("shared", "Shared")], max_length=16),
                ),
                ("description_es", models.TextField(blank=True, default="")),
                ("description_en", models.TextField(blank=True, default="")),
                ("images", models.JSONField(blank=True, default=list)),
                ("amenities", models.JSONField(blank=True, default=list)),
                ("available", models.BooleanField(default=True)),
                ("semester", models.CharField(blank=True, max_length=40, null=True)),
                ("available_from", models.DateField(blank=True, null=True)),
                ("available_to", models.DateField(blank=True, null=True)),
                ("has_private_kitchen", models.BooleanField(default=False)),
                ("is_entire_place", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "property",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="rooms",
                        to="properties.property",
                    ),
                ),
            ],
            options={
                "db_table": "rooms",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["semester"], name="rooms_semester_idx"),
                    models.Index(fields=["available"], name="rooms_available_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("property", "room_number"), name="unique_room_number_per_property"),
                ],
            },
        ),
    ]
