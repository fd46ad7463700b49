# file: fanclub_app/dashboard.py
"""Django JET dashboards for the fan-club admin.

This module defines:

* :class:`SeasonSummaryModule` – team record of the current season.
* :class:`NextMatchModule` – the next upcoming fixture with its poll counts.
* :class:`CustomIndexDashboard` – main admin index (3 columns) with quick
  links, recent actions, model lists and the two modules above.
* :class:`CustomAppIndexDashboard` – per-app dashboard (2 columns).
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.urls import reverse
from jet.dashboard import modules
from jet.dashboard.dashboard import AppIndexDashboard, Dashboard
from jet.dashboard.modules import DashboardModule

from .models import Match
from .services.stats import season_stats
from .services.votes import poll_summary


# --- Custom modules --------------------------------------------------------


class SeasonSummaryModule(DashboardModule):
    """Played / W-D-L / goals / points of ``settings.CURRENT_SEASON``."""

    title: str = "Season summary"
    template: str = "admin/dashboard/season_summary.html"

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        data = season_stats(settings.CURRENT_SEASON)
        self.season = data.season
        self.summary = data.summary
        self.key_players = data.key_players
        self.children = [data.summary]


class NextMatchModule(DashboardModule):
    title: str = "Next match"
    template: str = "admin/dashboard/next_match.html"

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        match = Match.objects.filter(status=Match.Status.UPCOMING).order_by("date", "time").first()
        self.match = match
        self.poll = poll_summary(match) if match else None
        self.change_url = reverse("admin:fanclub_app_match_change", args=[match.pk]) if match else None
        self.children = [match] if match else []


# --- Index dashboard (site-wide) ------------------------------------------


class CustomIndexDashboard(Dashboard):
    """Main admin index dashboard with quick navigation and summaries."""

    columns: int = 3

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        self.children.append(
            modules.LinkList(
                title="Quick links",
                children=[
                    {"title": "Add match", "url": reverse("admin:fanclub_app_match_add"), "external": False},
                    {"title": "Add player", "url": reverse("admin:fanclub_app_player_add"), "external": False},
                    {"title": "Team settings", "url": reverse("admin:fanclub_app_sitesettings_changelist"), "external": False},
                    {"title": "Public site", "url": reverse("site:home"), "external": False},
                ],
                column=0,
                collapsible=True,
            )
        )
        self.children.append(
            modules.RecentActions(title="Recent actions", limit=10, column=0, collapsible=True)
        )
        self.children.append(
            modules.AppList(
                title="Fan club",
                models=("fanclub_app.*",),
                exclude=("django.contrib.*",),
                column=1,
                collapsible=True,
            )
        )
        self.children.append(SeasonSummaryModule(column=2))
        self.children.append(NextMatchModule(column=2))


# --- App index dashboard (per app) ----------------------------------------


class CustomAppIndexDashboard(AppIndexDashboard):
    """Per-app dashboard listing models and recent actions for that app."""

    columns: int = 2

    def init_with_context(self, context: dict[str, Any]) -> None:  # type: ignore[override]
        self.children.append(
            modules.ModelList(title="Models", models=(f"{self.app_label}.*",), column=0)
        )
        self.children.append(
            modules.RecentActions(
                title="Recent actions", include_list=(f"{self.app_label}.*",), limit=10, column=1
            )
        )
