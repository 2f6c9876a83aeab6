from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from moods import backend
from moods.backend import BackendError


class Command(BaseCommand):
    """Set or clear the admin flag on a user's profile.

    Examples:
        python manage.py grant_admin alice
        python manage.py grant_admin alice --revoke
    """

    help = "Grant (or revoke) access to the admin page for a user."

    def add_arguments(self, parser):
        parser.add_argument("username", type=str, help="Username of the account.")
        parser.add_argument("--revoke", action="store_true", help="Clear the admin flag instead.")

    def handle(self, *args, **opts):
        username: str = opts["username"]
        is_admin = not opts["revoke"]

        User = get_user_model()
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise CommandError(f"No user named '{username}'.") from None

        try:
            changed = backend.update("profiles", {"is_admin": is_admin}, eq={"user_id": user.pk})
            if not changed:
                # Profile missing (user predates the signal): create it with the flag.
                backend.insert("profiles", {
                    "user_id": user.pk,
                    "username": user.get_username(),
                    "email": user.email or None,
                    "is_admin": is_admin,
                })
        except BackendError as exc:
            raise CommandError(str(exc)) from exc

        state = "granted" if is_admin else "revoked"
        self.stdout.write(self.style.SUCCESS(f"[admin] Admin {state} for '{username}'."))
