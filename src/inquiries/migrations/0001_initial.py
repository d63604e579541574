import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("properties", "0001_initial"),
        ("rooms", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Inquiry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=150)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, max_length=50, null=True)),
                ("message", models.TextField()),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("contact", "Contact"),
                            ("application", "Application"),
                            ("list-property", "List property"),
                        ],
                        default="contact",
                        max_length=20,
                    ),
                ),
                ("university", models.CharField(blank=True, max_length=120, null=True)),
                ("country", models.CharField(blank=True, max_length=80, null=True)),
                ("semester", models.CharField(blank=True, max_length=40, null=True)),
                ("move_in_date", models.DateField(blank=True, null=True)),
                ("move_out_date", models.DateField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("new", "New"),
                            ("contacted", "Contacted"),
                            ("documents", "Documents"),
                            ("reviewing", "Reviewing"),
                            ("approved", "Approved"),
                            ("payment", "Payment"),
                            ("confirmed", "Confirmed"),
                            ("rejected", "Rejected"),
                            ("archived", "Archived"),
                        ],
                        default="new",
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("responded_at", models.DateTimeField(blank=True, null=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "property",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inquiries",
                        to="properties.property",
                    ),
                ),
                (
                    "room",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inquiries",
                        to="rooms.room",
                    ),
                ),
                (
                    "student",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="inquiries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "inquiries",
                "verbose_name_plural": "inquiries",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status"], name="inquiries_status_idx"),
                    models.Index(fields=["type"], name="inquiries_type_idx"),
                    models.Index(fields=["email"], name="inquiries_email_idx"),
                ],
            },
        ),
    ]
