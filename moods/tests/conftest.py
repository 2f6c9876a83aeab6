# moods/tests/conftest.py
from __future__ import annotations

import itertools
from datetime import timedelta
from typing import Any, Callable

import pytest
from django.contrib.auth import get_user_model
from django.test import Client
from django.utils import timezone

from moods.models import Mood, Profile


@pytest.fixture(autouse=True)
def _enable_db_access_for_all_tests(db) -> None:  # noqa: PT004
    """Grant DB access to all tests by default (pytest-django)."""
    pass


@pytest.fixture
def make_user() -> Callable[..., Any]:
    """Factory fixture creating users with unique usernames (profile via signal)."""
    seq = itertools.count(1)
    User = get_user_model()

    def _create(**kwargs):
        i = next(seq)
        username = kwargs.pop("username", f"user{i}")
        password = kwargs.pop("password", "pw")
        email = kwargs.pop("email", f"{username}@example.com")
        is_admin = kwargs.pop("is_admin", False)
        full_name = kwargs.pop("full_name", None)
        user = User.objects.create_user(username=username, password=password, email=email, **kwargs)
        if is_admin or full_name:
            Profile.objects.filter(user=user).update(is_admin=is_admin, full_name=full_name)
        return user

    return _create


@pytest.fixture
def user(make_user):
    return make_user(username="tester", full_name="Test Person")


@pytest.fixture
def auth_client(user) -> Client:
    """Logged-in Django test client for `user`."""
    client = Client()
    client.login(username="tester", password="pw")
    return client


@pytest.fixture
def admin_user(make_user):
    return make_user(username="boss", is_admin=True, full_name="The Boss")


@pytest.fixture
def admin_client(admin_user) -> Client:
    client = Client()
    client.login(username="boss", password="pw")
    return client


@pytest.fixture
def make_mood():
    """Factory for Mood rows with a controlled created_at (minutes before now)."""

    def _make(*, user, mood: str = "neutral", note: str | None = None, minutes_ago: int = 0) -> Mood:
        m = Mood.objects.create(user=user, mood=mood, note=note)
        stamp = timezone.now() - timedelta(minutes=minutes_ago)
        Mood.objects.filter(pk=m.pk).update(created_at=stamp)
        m.refresh_from_db()
        return m

    return _make
