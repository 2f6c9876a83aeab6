from __future__ import annotations

import uuid
from typing import Any, cast

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Profile(models.Model):
    """User metadata kept apart from the auth identity (incl. the admin flag)."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        primary_key=True,
        related_name="profile",
        verbose_name=_("User"),
    )
    username = models.CharField(
        max_length=150,
        null=True,
        blank=True,
        verbose_name=_("Username"),
    )
    full_name = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        verbose_name=_("Full name"),
    )
    email = models.EmailField(null=True, blank=True, verbose_name=_("Email"))
    is_admin = models.BooleanField(
        default=False,
        verbose_name=_("Admin"),
        help_text=_("Grants access to the cross-user admin page."),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("Created at"))

    class Meta:
        ordering = ["-created_at"]
        verbose_name = _("Profile")
        verbose_name_plural = _("Profiles")

    @property
    def display_name(self) -> str:
        """Full name, else email, else a placeholder."""
        return self.full_name or self.email or str(_("Unnamed User"))

    def __str__(self) -> str:
        return self.full_name or self.username or str(self.user_id)


class Mood(models.Model):
    """Single mood check-in for a user. Never updated after insert."""

    class Label(models.TextChoices):
        HAPPY = "happy", _("Happy")
        SAD = "sad", _("Sad")
        NEUTRAL = "neutral", _("Neutral")
        STRESSED = "stressed", _("Stressed")
        FOCUSED = "focused", _("Focused")
        CALM = "calm", _("Calm")
        ANXIOUS = "anxious", _("Anxious")
        EXCITED = "excited", _("Excited")
        TIRED = "tired", _("Tired")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="moods",
        verbose_name=_("User"),
    )
    mood = models.CharField(
        max_length=32,
        choices=Label.choices,
        verbose_name=_("Mood"),
    )
    note = models.TextField(
        null=True,
        blank=True,
        verbose_name=_("Note"),
        help_text=_("Optional free text; stored as NULL when empty."),
    )
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("Created at"))

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["user", "-created_at"], name="idx_mood_user_created"),
        ]
        verbose_name = _("Mood")
        verbose_name_plural = _("Moods")

    @property
    def mood_label(self) -> str:
        """Human-readable label; unknown values are shown as stored."""
        # get_mood_display() falls back to the raw value for labels outside the choices.
        return cast(Any, self).get_mood_display()

    def __str__(self) -> str:
        return f"{self.user} @ {self.created_at}: {self.mood}"
