# file: fanclub_app/site/views/home.py
"""Public site homepage view.

Shows the next upcoming fixture, the three latest results, a handful of
squad members and the key players of the current season.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.views.generic import TemplateView

from fanclub_app.models import Match, Player
from fanclub_app.services.stats import season_stats

HOME_RESULTS = 3
HOME_PLAYERS = 4


class HomeView(TemplateView):
    """Render the homepage."""

    template_name = "site/home.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        next_match = (
            Match.objects.filter(status=Match.Status.UPCOMING).order_by("date", "time").first()
        )
        recent = Match.objects.filter(
            status__in=(Match.Status.FINISHED, Match.Status.LIVE)
        ).order_by("-date", "-time")[:HOME_RESULTS]
        season = season_stats(settings.CURRENT_SEASON)

        ctx.update(
            {
                "title": "Home",
                "next_match": next_match,
                "recent_matches": list(recent),
                "players": list(Player.objects.order_by("number", "name")[:HOME_PLAYERS]),
                "season": season,
            }
        )
        return ctx
