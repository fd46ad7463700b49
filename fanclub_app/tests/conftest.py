# file: fanclub_app/tests/conftest.py
"""Common pytest fixtures for fanclub_app tests.

Provides model accessors (resolved dynamically via ``apps.get_model``) and
minimal data builders used across test modules.

Fixtures:
    - ``Player``, ``Match``, ``MatchStat``, ``MatchVote``, ``Notification``,
      ``SiteSettings``: Model classes.
    - ``player_min`` / ``make_player``: squad members.
    - ``finished_match`` / ``upcoming_match`` / ``make_match``: fixtures.
    - ``admin_email`` / ``member_user`` / ``admin_user_client``: auth helpers.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Callable

import pytest
from django.apps import apps

APP: str = "fanclub_app"
ADMIN_EMAIL: str = "boss@realfake.test"


@pytest.fixture(autouse=True)
def _club_settings(settings: Any) -> None:
    """Pin club settings and keep external services unconfigured."""
    settings.FANCLUB_ADMIN_EMAIL = ADMIN_EMAIL
    settings.TEAM_NAME = "RealFake FC"
    settings.CURRENT_SEASON = 2026
    settings.SITE_URL = "https://club.test"
    settings.ONESIGNAL_APP_ID = ""
    settings.ONESIGNAL_API_KEY = ""
    settings.GOOGLE_OAUTH_CLIENT_ID = ""
    settings.GOOGLE_OAUTH_CLIENT_SECRET = ""
    settings.STORAGES = {
        "default": {"BACKEND": "django.core.files.storage.InMemoryStorage"},
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }


@pytest.fixture(autouse=True)
def _reset_site_settings_cache() -> Any:
    from fanclub_app.context import _resolve_site_settings

    _resolve_site_settings.cache_clear()
    yield
    _resolve_site_settings.cache_clear()


# --- Model accessors -------------------------------------------------------


@pytest.fixture
def Player() -> Any:
    return apps.get_model(APP, "Player")


@pytest.fixture
def Match() -> Any:
    return apps.get_model(APP, "Match")


@pytest.fixture
def MatchStat() -> Any:
    return apps.get_model(APP, "MatchStat")


@pytest.fixture
def MatchVote() -> Any:
    return apps.get_model(APP, "MatchVote")


@pytest.fixture
def Notification() -> Any:
    return apps.get_model(APP, "Notification")


@pytest.fixture
def SiteSettings() -> Any:
    return apps.get_model(APP, "SiteSettings")


# --- Builders --------------------------------------------------------------


@pytest.fixture
def make_player(Player: Any) -> Callable[..., Any]:
    """Return a factory creating players with sensible defaults."""
    counter = {"n": 0}

    def _make(**kwargs: Any) -> Any:
        counter["n"] += 1
        data = {
            "name": f"Player {counter['n']}",
            "number": counter["n"],
            "position": "Forward",
        }
        data.update(kwargs)
        return Player.objects.create(**data)

    return _make


@pytest.fixture
def player_min(make_player: Callable[..., Any]) -> Any:
    """A forward linked to ``member@realfake.test``."""
    return make_player(name="Goal Machine", number=9, email="member@realfake.test")


@pytest.fixture
def make_match(Match: Any) -> Callable[..., Any]:
    """Return a factory creating matches (default: upcoming, season 2026)."""

    def _make(**kwargs: Any) -> Any:
        data = {
            "season": 2026,
            "date": _dt.date(2026, 3, 1),
            "time": _dt.time(15, 0),
            "opponent": "Imaginary United",
            "status": "Upcoming",
        }
        data.update(kwargs)
        return Match.objects.create(**data)

    return _make


@pytest.fixture
def upcoming_match(make_match: Callable[..., Any]) -> Any:
    return make_match(opponent="Placeholder Rovers", date=_dt.date(2026, 5, 10))


@pytest.fixture
def finished_match(make_match: Callable[..., Any]) -> Any:
    return make_match(status="Finished", home_score=3, away_score=1, date=_dt.date(2026, 1, 24))


# --- Auth ------------------------------------------------------------------


@pytest.fixture
def admin_email() -> str:
    return ADMIN_EMAIL


@pytest.fixture
def member_user(django_user_model: Any, player_min: Any) -> Any:
    """A Django user whose e-mail matches ``player_min``."""
    return django_user_model.objects.create_user(
        username="member@realfake.test", email="member@realfake.test"
    )


@pytest.fixture
def admin_user_client(client: Any, django_user_model: Any) -> Any:
    """Client logged in as the club admin (staff + superuser)."""
    user = django_user_model.objects.create_user(
        username=ADMIN_EMAIL, email=ADMIN_EMAIL, is_staff=True, is_superuser=True
    )
    client.force_login(user)
    return client
