from __future__ import annotations

import logging

from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile

logger = logging.getLogger(__name__)


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_profile_for_new_user(sender, instance, created: bool, raw: bool = False, **kwargs) -> None:
    """Every new auth user gets a profile row (admin flag off)."""
    if not created or raw:
        return
    Profile.objects.get_or_create(
        user=instance,
        defaults={
            "username": instance.get_username() or None,
            "email": getattr(instance, "email", "") or None,
        },
    )
    logger.info("Created profile for user %s", instance.pk)
