import uuid

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
            name="Profile",
            fields=[
                (
                    "user",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="profile",
                        serialize=False,
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
                ("username", models.CharField(blank=True, max_length=150, null=True, verbose_name="Username")),
                ("full_name", models.CharField(blank=True, max_length=200, null=True, verbose_name="Full name")),
                ("email", models.EmailField(blank=True, max_length=254, null=True, verbose_name="Email")),
                (
                    "is_admin",
                    models.BooleanField(
                        default=False,
                        help_text="Grants access to the cross-user admin page.",
                        verbose_name="Admin",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
            ],
            options={
                "verbose_name": "Profile",
                "verbose_name_plural": "Profiles",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Mood",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "mood",
                    models.CharField(
                        choices=[
                            ("happy", "Happy"),
                            ("sad", "Sad"),
                            ("neutral", "Neutral"),
                            ("stressed", "Stressed"),
                            ("focused", "Focused"),
                            ("calm", "Calm"),
                            ("anxious", "Anxious"),
                            ("excited", "Excited"),
                            ("tired", "Tired"),
                        ],
                        max_length=32,
                        verbose_name="Mood",
                    ),
                ),
                (
                    "note",
                    models.TextField(
                        blank=True,
                        help_text="Optional free text; stored as NULL when empty.",
                        null=True,
                        verbose_name="Note",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="moods",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="User",
                    ),
                ),
            ],
            options={
                "verbose_name": "Mood",
                "verbose_name_plural": "Moods",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["user", "-created_at"], name="idx_mood_user_created"),
                ],
            },
        ),
    ]
