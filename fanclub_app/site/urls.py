# file: fanclub_app/site/urls.py
"""Public *Site* URL configuration.

Routes
------
- ``""`` → Home
- ``"fixtures/"`` → Fixtures (``?season=``)
- ``"fixtures/<int:pk>/"`` → Match detail + vote form
- ``"fixtures/<int:pk>/votes/"`` → Poll JSON feed
- ``"players/"`` → Players list (``?pos=``)
- ``"players/<int:pk>/"`` → Player detail
- ``"players/<int:pk>/edit/"`` → Profile self-service
- ``"stats/"`` → Season stats (``?season=&sort=&dir=``)
- ``"login/"``, ``"login/google/"``, ``"login/google/callback/"``, ``"logout/"``
- ``"notifications/"`` and the read endpoints
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern

from .views.auth import GoogleCallbackView, GoogleLoginView, SiteLoginView, SiteLogoutView
from .views.fixtures import FixturesView
from .views.home import HomeView
from .views.match_detail import MatchDetailView, MatchVotesFeedView
from .views.notifications import NotificationFeedView, NotificationReadAllView, NotificationReadView
from .views.players import PlayerDetailView, PlayerEditView, PlayersListView
from .views.stats import StatsView


app_name = "site"

urlpatterns: list[URLPattern] = [
    path("", HomeView.as_view(), name="home"),

    # Fixtures
    path("fixtures/", FixturesView.as_view(), name="fixtures"),
    path("fixtures/<int:pk>/", MatchDetailView.as_view(), name="match_detail"),
    path("fixtures/<int:pk>/votes/", MatchVotesFeedView.as_view(), name="match_votes"),

    # Players
    path("players/", PlayersListView.as_view(), name="players"),
    path("players/<int:pk>/", PlayerDetailView.as_view(), name="player_detail"),
    path("players/<int:pk>/edit/", PlayerEditView.as_view(), name="player_edit"),

    # Stats
    path("stats/", StatsView.as_view(), name="stats"),

    # Sign in / out
    path("login/", SiteLoginView.as_view(), name="login"),
    path("login/google/", GoogleLoginView.as_view(), name="google_login"),
    path("login/google/callback/", GoogleCallbackView.as_view(), name="google_callback"),
    path("logout/", SiteLogoutView.as_view(), name="logout"),

    # Notification bell
    path("notifications/", NotificationFeedView.as_view(), name="notifications"),
    path("notifications/read-all/", NotificationReadAllView.as_view(), name="notifications_read_all"),
    path("notifications/<int:pk>/read/", NotificationReadView.as_view(), name="notification_read"),
]
