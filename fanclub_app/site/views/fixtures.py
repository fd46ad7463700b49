# file: fanclub_app/site/views/fixtures.py
"""Fixtures page: upcoming matches and results of one season.

Notes
-----
* Season filter uses ``?season=<year>`` (default: current season).
* Upcoming fixtures are listed closest first, results newest first.
"""

from __future__ import annotations

from typing import Any

from django.views.generic import TemplateView

from fanclub_app.models import Match
from fanclub_app.services.stats import available_seasons, parse_season
from fanclub_app.services.votes import poll_summaries


class FixturesView(TemplateView):
    template_name = "site/fixtures.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        season = parse_season(self.request.GET.get("season"))

        base = Match.objects.filter(season=season)
        upcoming = list(base.filter(status=Match.Status.UPCOMING).order_by("date", "time"))
        results = list(
            base.filter(status__in=(Match.Status.FINISHED, Match.Status.LIVE)).order_by("-date", "-time")
        )
        polls = poll_summaries(upcoming + results)

        ctx.update(
            {
                "title": "Fixtures",
                "season": season,
                "seasons": available_seasons(),
                "upcoming": [(m, polls[m.pk]) for m in upcoming],
                "results": [(m, polls[m.pk]) for m in results],
            }
        )
        return ctx
