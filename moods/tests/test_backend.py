from __future__ import annotations

from unittest import mock

import pytest
from django.db import DatabaseError

from moods import backend
from moods.backend import MULTIPLE_ROWS, NO_ROWS, UNKNOWN_TABLE, BackendError
from moods.models import Mood, Profile


def test_select_filters_orders_and_limits(make_user, make_mood) -> None:
    alice = make_user(username="alice")
    bob = make_user(username="bob")
    for i in range(5):
        make_mood(user=alice, mood="happy", minutes_ago=i)
    make_mood(user=bob, mood="sad")

    rows = backend.select("moods", eq={"user_id": alice.pk}, order_by="created_at", descending=True, limit=3)

    assert len(rows) == 3
    assert all(r.user_id == alice.pk for r in rows)
    stamps = [r.created_at for r in rows]
    assert stamps == sorted(stamps, reverse=True)


def test_select_unbounded_without_limit(make_user) -> None:
    for i in range(4):
        make_user(username=f"p{i}")
    assert len(backend.select("profiles")) == 4


def test_single_returns_the_row(make_user) -> None:
    u = make_user(username="solo")
    profile = backend.single("profiles", eq={"user_id": u.pk})
    assert isinstance(profile, Profile)
    assert profile.user_id == u.pk


def test_single_no_rows_has_specific_code() -> None:
    with pytest.raises(BackendError) as info:
        backend.single("profiles", eq={"user_id": 999_999})
    assert info.value.code == NO_ROWS


def test_single_multiple_rows(make_user, make_mood) -> None:
    u = make_user()
    make_mood(user=u)
    make_mood(user=u)
    with pytest.raises(BackendError) as info:
        backend.single("moods", eq={"user_id": u.pk})
    assert info.value.code == MULTIPLE_ROWS


def test_unknown_table() -> None:
    with pytest.raises(BackendError) as info:
        backend.select("users")
    assert info.value.code == UNKNOWN_TABLE


def test_unknown_column_is_wrapped() -> None:
    with pytest.raises(BackendError):
        backend.select("moods", eq={"nope": 1})


def test_insert_assigns_id_and_timestamp(make_user) -> None:
    u = make_user()
    m = backend.insert("moods", {"user_id": u.pk, "mood": "calm", "note": None})
    assert m.pk is not None
    assert m.created_at is not None
    stored = Mood.objects.get(pk=m.pk)
    assert stored.note is None


def test_insert_rejects_unknown_label(make_user) -> None:
    u = make_user()
    with pytest.raises(BackendError):
        backend.insert("moods", {"user_id": u.pk, "mood": "angry"})
    assert Mood.objects.count() == 0


def test_database_errors_are_wrapped(make_user) -> None:
    u = make_user()
    with mock.patch.object(Mood, "save", side_effect=DatabaseError("down")):
        with pytest.raises(BackendError) as info:
            backend.insert("moods", {"user_id": u.pk, "mood": "calm"})
    assert isinstance(info.value.__cause__, DatabaseError)


def test_update_profiles(make_user) -> None:
    u = make_user()
    changed = backend.update("profiles", {"full_name": "New Name"}, eq={"user_id": u.pk})
    assert changed == 1
    assert Profile.objects.get(user=u).full_name == "New Name"


def test_moods_are_immutable(make_user, make_mood) -> None:
    u = make_user()
    m = make_mood(user=u, mood="sad")
    with pytest.raises(BackendError):
        backend.update("moods", {"mood": "happy"}, eq={"id": m.pk})
    m.refresh_from_db()
    assert m.mood == "sad"


def test_integer_overflow_is_wrapped() -> None:
    with mock.patch.object(Mood._default_manager, "all", side_effect=OverflowError("int too large")):
        with pytest.raises(BackendError) as info:
            backend.select("moods", eq={"user_id": 10**30})
    assert isinstance(info.value.__cause__, OverflowError)
