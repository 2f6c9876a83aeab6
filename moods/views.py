from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Optional, Sequence

from django.conf import settings
from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.translation import gettext as _

from . import backend
from .backend import NO_ROWS, BackendError
from .forms import CheckInForm, ProfileForm, SignUpForm
from .models import Mood, Profile
from .suggestions import mood_glyph, mood_style, top_suggestions

logger = logging.getLogger(__name__)


# =============================================================================
# Query limits
# =============================================================================

DASHBOARD_HISTORY_LIMIT: int = 10
ADMIN_ALL_MOODS_LIMIT: int = 50
ADMIN_USER_MOODS_LIMIT: int = 20

ALL_USERS = "all"

# Largest value a 64-bit integer primary key can hold
MAX_USER_ID: int = 2**63 - 1


# =============================================================================
# Helpers
# =============================================================================

def _fetch_profile(user_id: Any) -> Optional[Profile]:
    """Single-row profile lookup. A missing row is not an error.

    Returns:
        The profile, or None when it does not exist or the lookup failed
        (failures other than NO_ROWS are logged).
    """
    try:
        return backend.single("profiles", eq={"user_id": user_id})
    except BackendError as exc:
        if exc.code != NO_ROWS:
            logger.error("Error fetching profile for user %s: %s", user_id, exc)
        return None


def _fetch_moods(user_id: Any = None, *, limit: int) -> list[Mood]:
    """Newest-first mood rows, for one user or across all users."""
    eq = {"user_id": user_id} if user_id is not None else None
    return backend.select("moods", eq=eq, order_by="created_at", descending=True, limit=limit)


def _mood_rows(moods: Sequence[Mood], owners: Optional[dict[Any, Profile]] = None) -> list[dict[str, Any]]:
    """Flatten mood rows into template-friendly dicts (icon/css resolved)."""
    rows: list[dict[str, Any]] = []
    for m in moods:
        icon, css = mood_style(m.mood)
        row = {
            "id": m.id,
            "mood": m.mood,
            "label": m.mood_label,
            "note": m.note,
            "created_at": m.created_at,
            "icon": icon,
            "glyph": mood_glyph(m.mood),
            "css": css,
        }
        if owners is not None:
            owner = owners.get(m.user_id)
            row["owner"] = (owner.full_name or owner.email) if owner else None
        rows.append(row)
    return rows


def _parse_user_filter(param: Optional[str]) -> Optional[int]:
    """Parse ?user=<id>; 'all', empty or malformed values mean no filter."""
    if not param or param == ALL_USERS:
        return None
    try:
        user_id = int(param)
    except (TypeError, ValueError):
        return None
    if not 0 < user_id <= MAX_USER_ID:
        return None
    return user_id


def _today() -> date:
    return timezone.localdate() if settings.USE_TZ else date.today()


def _local_date(value: datetime) -> date:
    """Calendar date of a stored timestamp in the current time zone."""
    if settings.USE_TZ:
        return timezone.localdate(value)
    return value.date()


# =============================================================================
# Views
# =============================================================================

@login_required
def dashboard_view(request: HttpRequest) -> HttpResponse:
    """Greeting, suggestions from the latest mood and the recent history."""
    profile = _fetch_profile(request.user.pk)

    moods: list[Mood] = []
    try:
        moods = _fetch_moods(request.user.pk, limit=DASHBOARD_HISTORY_LIMIT)
    except BackendError as exc:
        logger.error("Error fetching moods for user %s: %s", request.user.pk, exc)
        messages.error(request, _("Error loading moods: Failed to load your mood history"))

    latest = moods[0] if moods else None
    suggestions = top_suggestions(latest.mood) if latest else []

    context = {
        "profile": profile,
        "display_name": profile.full_name if profile else None,
        "latest": latest,
        "suggestions": suggestions,
        "moods": _mood_rows(moods),
        "history_limit": DASHBOARD_HISTORY_LIMIT,
    }
    return render(request, "moods/dashboard.html", context)


@login_required
def checkin_view(request: HttpRequest) -> HttpResponse:
    """Record one mood check-in for the current user.

    GET:
        Render the mood picker.
    POST:
        Validate, insert one row, redirect to the dashboard. On a backend
        failure the bound form is rendered again for retry.
    """
    if request.method == "POST":
        form = CheckInForm(request.POST)
        if form.is_valid():
            mood = form.cleaned_data["mood"]
            try:
                backend.insert("moods", {
                    "user_id": request.user.pk,
                    "mood": mood,
                    "note": form.cleaned_data["note"],
                })
            except BackendError as exc:
                logger.error("Error saving mood for user %s: %s", request.user.pk, exc)
                messages.error(request, _("Error saving mood: Failed to save your mood check-in"))
            else:
                messages.success(
                    request,
                    _("Mood logged successfully! Your %(mood)s mood has been recorded.") % {"mood": mood},
                )
                return redirect("moods:dashboard")
    else:
        form = CheckInForm()

    choices = [
        {"value": value, "label": label, "glyph": mood_glyph(value), "css": mood_style(value)[1]}
        for value, label in Mood.Label.choices
    ]
    return render(request, "moods/checkin.html", {"form": form, "choices": choices})


@login_required
def settings_view(request: HttpRequest) -> HttpResponse:
    """Edit the caller's own profile (name fields only; never the admin flag)."""
    profile = _fetch_profile(request.user.pk)

    if request.method == "POST":
        form = ProfileForm(request.POST, instance=profile)
        if form.is_valid():
            values = {
                "username": form.cleaned_data["username"],
                "full_name": form.cleaned_data["full_name"],
            }
            try:
                if profile is None:
                    backend.insert("profiles", {
                        "user_id": request.user.pk,
                        "email": request.user.email or None,
                        **values,
                    })
                else:
                    backend.update("profiles", values, eq={"user_id": request.user.pk})
            except BackendError as exc:
                logger.error("Error saving profile for user %s: %s", request.user.pk, exc)
                messages.error(request, _("Error saving settings: Failed to update your profile"))
            else:
                messages.success(request, _("Settings saved."))
                return redirect("moods:settings")
    else:
        form = ProfileForm(instance=profile)

    return render(request, "moods/settings.html", {"form": form, "profile": profile})


@login_required
def admin_view(request: HttpRequest) -> HttpResponse:
    """Cross-user browsing for profiles flagged as admin.

    Query params:
        user: A user id to show that user's latest ADMIN_USER_MOODS_LIMIT moods,
            or 'all' (default) for the latest ADMIN_ALL_MOODS_LIMIT across users.

    Non-admins get the access-denied page and no list query is issued.
    """
    profile = _fetch_profile(request.user.pk)
    if profile is None or not profile.is_admin:
        logger.warning("Admin page denied for user %s", request.user.pk)
        return render(request, "moods/access_denied.html", status=403)

    users: list[Profile] = []
    try:
        users = backend.select("profiles", order_by="created_at", descending=True)
    except BackendError as exc:
        logger.error("Error fetching users: %s", exc)
        messages.error(request, _("Error loading users: Failed to load user list"))

    selected_user = _parse_user_filter(request.GET.get("user"))
    moods: list[Mood] = []
    try:
        if selected_user is None:
            moods = _fetch_moods(limit=ADMIN_ALL_MOODS_LIMIT)
        else:
            moods = _fetch_moods(selected_user, limit=ADMIN_USER_MOODS_LIMIT)
    except BackendError as exc:
        if selected_user is None:
            logger.error("Error fetching moods: %s", exc)
            messages.error(request, _("Error loading moods: Failed to load mood data"))
        else:
            logger.error("Error fetching moods for user %s: %s", selected_user, exc)
            messages.error(request, _("Error loading user moods: Failed to load user's mood data"))

    today = _today()
    active_today = sum(1 for m in moods if _local_date(m.created_at) == today)

    context = {
        "users": users,
        "moods": _mood_rows(moods, owners={p.user_id: p for p in users}),
        "selected_user": selected_user,
        "total_users": len(users),
        "total_moods": len(moods),
        "active_today": active_today,
    }
    return render(request, "moods/admin.html", context)


def signup_view(request: HttpRequest) -> HttpResponse:
    """Create an account; the profile row is created by a post_save signal."""
    if request.user.is_authenticated:
        return redirect("moods:dashboard")

    if request.method == "POST":
        form = SignUpForm(request.POST)
        if form.is_valid():
            user = form.save()
            full_name = (form.cleaned_data.get("full_name") or "").strip()
            if full_name:
                try:
                    backend.update("profiles", {"full_name": full_name}, eq={"user_id": user.pk})
                except BackendError as exc:
                    logger.error("Error storing full name for user %s: %s", user.pk, exc)
            login(request, user)
            messages.success(request, _("Welcome! Your account has been created."))
            return redirect("moods:dashboard")
    else:
        form = SignUpForm()

    return render(request, "registration/signup.html", {"form": form})
