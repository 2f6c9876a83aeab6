from __future__ import annotations

from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.management import CommandError, call_command

from moods.models import Mood, Profile


def test_seed_moods_creates_users_and_checkins() -> None:
    out = StringIO()
    call_command("seed_moods", "--users", "3", "--days", "4", "--per-day", "2", "--seed", "7", "--admin", stdout=out)

    User = get_user_model()
    demo = User.objects.filter(username__startswith="demo")
    assert demo.count() == 3
    assert Mood.objects.filter(user__in=demo).count() == 3 * 4 * 2
    labels = {value for value, _ in Mood.Label.choices}
    assert set(Mood.objects.values_list("mood", flat=True)) <= labels
    assert Profile.objects.get(user__username="demo01").is_admin is True
    assert Profile.objects.filter(is_admin=True).count() == 1
    assert "[done]" in out.getvalue()


def test_seed_moods_reset_only_keeps_other_users(make_user) -> None:
    keeper = make_user(username="keeper")
    call_command("seed_moods", "--users", "2", "--days", "1", stdout=StringIO())
    call_command("seed_moods", "--reset-only", stdout=StringIO())

    User = get_user_model()
    assert not User.objects.filter(username__startswith="demo").exists()
    assert User.objects.filter(pk=keeper.pk).exists()


def test_grant_and_revoke_admin(make_user) -> None:
    u = make_user(username="alice")
    call_command("grant_admin", "alice", stdout=StringIO())
    assert Profile.objects.get(user=u).is_admin is True
    call_command("grant_admin", "alice", "--revoke", stdout=StringIO())
    assert Profile.objects.get(user=u).is_admin is False


def test_grant_admin_recreates_missing_profile(make_user) -> None:
    u = make_user(username="legacy")
    Profile.objects.filter(user=u).delete()
    call_command("grant_admin", "legacy", stdout=StringIO())
    assert Profile.objects.get(user=u).is_admin is True


def test_grant_admin_unknown_user() -> None:
    with pytest.raises(CommandError):
        call_command("grant_admin", "nobody", stdout=StringIO())


def test_seed_moods_without_time_zone_support(settings) -> None:
    settings.USE_TZ = False
    call_command("seed_moods", "--users", "1", "--days", "2", "--seed", "3", stdout=StringIO())
    stamps = list(Mood.objects.values_list("created_at", flat=True))
    assert len(stamps) == 2
    assert all(s.tzinfo is None for s in stamps)
