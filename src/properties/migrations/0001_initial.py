import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Property",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name_es", models.CharField(max_length=200)),
                ("name_en", models.CharField(blank=True, default="", max_length=200)),
                ("slug", models.SlugField(max_length=120, unique=True)),
                ("location_es", models.CharField(blank=True, default="", max_length=200)),
                ("location_en", models.CharField(blank=True, default="", max_length=200)),
                ("address", models.CharField(blank=True, default="", max_length=255)),
                ("latitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ("longitude", models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                (
                    "zone",
                    models.CharField(
                        choices=[("tres-cruces", "Tres Cruces"), ("centro", "Centro"), ("cholula", "Cholula")],
                        max_length=20,
                    ),
                ),
                (
                    "university",
                    models.CharField(
                        blank=True,
                        choices=[("BUAP", "BUAP"), ("Centro", "Centro"), ("UDLAP", "UDLAP")],
                        default="",
                        max_length=20,
                    ),
                ),
                ("description_es", models.TextField(blank=True, default="")),
                ("description_en", models.TextField(blank=True, default="")),
                ("images", models.JSONField(blank=True, default=list)),
                ("bathroom_types", models.JSONField(blank=True, default=list)),
                ("common_areas", models.JSONField(blank=True, default=list)),
                ("available", models.BooleanField(default=True)),
                ("available_from", models.DateField(blank=True, null=True)),
                ("google_place_id", models.CharField(blank=True, max_length=255, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="properties",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "properties",
                "verbose_name_plural": "properties",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["zone"], name="properties_zone_idx"),
                    models.Index(fields=["university"], name="properties_university_idx"),
                    models.Index(fields=["available"], name="properties_available_idx"),
                    models.Index(fields=["created_at"], name="properties_created_idx"),
                ],
            },
        ),
    ]
