# moods/management/commands/seed_moods.py
from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Iterable, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from moods import backend
from moods.models import Mood


@dataclass(frozen=True)
class BiasConfig:
    """Weights for drawing mood labels depending on bias."""
    # order must match LABELS below
    weights: tuple[int, ...]


# Label axis from the model choices
LABELS: tuple[str, ...] = tuple(value for value, _ in Mood.Label.choices)
# happy, sad, neutral, stressed, focused, calm, anxious, excited, tired

# Simple, hand-tuned weights for the demo
BIAS_WEIGHTS = {
    "neg": BiasConfig(weights=(2, 8, 4, 9, 2, 2, 8, 1, 7)),
    "neutral": BiasConfig(weights=(5, 4, 8, 4, 5, 5, 4, 4, 5)),
    "pos": BiasConfig(weights=(10, 1, 4, 2, 8, 8, 1, 8, 3)),
}

SAMPLE_NOTES: tuple[str, ...] = (
    "Long day at work",
    "Went for a run",
    "Slept badly",
    "Coffee with a friend",
    "Deadline tomorrow",
)


def _iter_days(days: int, end: datetime) -> Iterable[datetime]:
    """Yield one local timestamp per day from (end - days + 1) .. end."""
    for offset in range(days - 1, -1, -1):
        yield end - timedelta(days=offset)


def _pick_mood(bias: str) -> str:
    """Draw a label using the configured bias weights."""
    conf = BIAS_WEIGHTS[bias]
    return random.choices(LABELS, weights=conf.weights, k=1)[0]


class Command(BaseCommand):
    """Seed demo users and mood check-ins for local/dev demos.

    Examples:
        python manage.py seed_moods --users 8 --days 30 --per-day 2 --seed 42 --bias neg
        python manage.py seed_moods --admin
        python manage.py seed_moods --reset-only

    Safety:
        - Only touches users whose username starts with the given prefix (default 'demo').
        - Check-ins are append-only; use --clear to start over.
    """

    help = "Seed demo users and mood check-ins."

    def add_arguments(self, parser):
        # Core seeding controls
        parser.add_argument("--users", type=int, default=8, help="Number of demo users to ensure/create (default: 8).")
        parser.add_argument("--password", type=str, default="demo1234", help="Password for created demo users.")
        parser.add_argument("--days", type=int, default=14, help="Number of days to seed (default: 14).")
        parser.add_argument("--per-day", type=int, default=1, help="Check-ins per user and day (default: 1).")
        parser.add_argument(
            "--bias",
            type=str,
            choices=("neg", "neutral", "pos"),
            default="neutral",
            help="Distribution bias for mood labels (default: neutral).",
        )

        # Determinism
        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Random seed for reproducible results (optional).",
        )

        # Admin flag (out-of-band)
        parser.add_argument(
            "--admin",
            action="store_true",
            help="Mark the first demo user as admin.",
        )

        # Safety / cleanup
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Delete check-ins of demo users before seeding (keeps users).",
        )
        parser.add_argument(
            "--users-only",
            action="store_true",
            help="Create/ensure users but do not generate check-ins.",
        )
        parser.add_argument(
            "--delete-users",
            action="store_true",
            help="Delete demo users (non-superusers) with the chosen prefix.",
        )
        parser.add_argument(
            "--reset-only",
            action="store_true",
            help="Delete demo users and their check-ins, then exit.",
        )

        parser.add_argument(
            "--username-prefix",
            type=str,
            default="demo",
            help="Username prefix for demo users (default: 'demo').",
        )

    @transaction.atomic
    def handle(self, *args, **opts):
        # Seed RNG for reproducibility if requested
        seed: Optional[int] = opts.get("seed")
        if seed is not None:
            random.seed(seed)
            self.stdout.write(self.style.NOTICE(f"[seed] Using random seed {seed}"))

        users: int = int(opts["users"])
        password: str = str(opts["password"])
        days: int = int(opts["days"])
        per_day: int = max(1, int(opts["per_day"]))
        bias: str = str(opts["bias"])
        make_admin: bool = bool(opts["admin"])
        do_clear: bool = bool(opts["clear"])
        users_only: bool = bool(opts["users_only"])
        delete_users: bool = bool(opts["delete_users"])
        reset_only: bool = bool(opts["reset_only"])
        prefix: str = str(opts["username_prefix"]).strip() or "demo"

        User = get_user_model()

        # Clear check-ins? (seeding tool only; the app itself never deletes moods)
        if do_clear or reset_only:
            deleted, _ = Mood.objects.filter(user__username__startswith=prefix).delete()
            self.stdout.write(self.style.WARNING(f"[clear] Deleted {deleted} check-ins for users '{prefix}*'."))

        # Delete users? (profiles cascade)
        if delete_users or reset_only:
            uqs = User.objects.filter(username__startswith=prefix, is_superuser=False)
            ucount = uqs.count()
            uqs.delete()
            self.stdout.write(self.style.WARNING(f"[users] Deleted {ucount} users '{prefix}*' (non-superusers)."))

        if reset_only:
            self.stdout.write(self.style.SUCCESS("[done] Reset-only completed."))
            return

        # Ensure demo users exist; profiles come from the post_save signal
        ensured_users = []
        for i in range(1, users + 1):
            username = f"{prefix}{i:02d}"
            u, created = User.objects.get_or_create(
                username=username,
                defaults={"is_active": True, "email": f"{username}@example.com"},
            )
            if created or not u.has_usable_password():
                u.set_password(password)
                u.save(update_fields=["password"])
            backend.update("profiles", {"full_name": f"Demo User {i:02d}"}, eq={"user_id": u.pk})
            ensured_users.append(u)
        self.stdout.write(self.style.NOTICE(f"[users] Ensured {len(ensured_users)} users with prefix '{prefix}'."))

        if make_admin and ensured_users:
            backend.update("profiles", {"is_admin": True}, eq={"user_id": ensured_users[0].pk})
            self.stdout.write(self.style.NOTICE(f"[admin] {ensured_users[0].username} is now admin."))

        if users_only:
            self.stdout.write(self.style.SUCCESS("[done] Users created/ensured (no check-ins generated)."))
            return

        # Generate check-ins, spread over the day
        now = timezone.localtime() if settings.USE_TZ else datetime.now()
        count_created = 0
        for u in ensured_users:
            for day in _iter_days(days=days, end=now):
                for _slot in range(per_day):
                    mood = backend.insert("moods", {
                        "user_id": u.pk,
                        "mood": _pick_mood(bias),
                        "note": random.choice(SAMPLE_NOTES) if random.random() < 0.4 else None,
                    })
                    # created_at is assigned on insert; backdate demo rows
                    stamp = datetime.combine(day.date(), time(random.randint(7, 22), random.randint(0, 59)))
                    if settings.USE_TZ:
                        stamp = timezone.make_aware(stamp)
                    Mood.objects.filter(pk=mood.pk).update(created_at=min(stamp, now))
                    count_created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"[done] Check-ins created: {count_created} "
                f"(users={len(ensured_users)}, days={days}, per_day={per_day}, bias={bias})"
            )
        )
