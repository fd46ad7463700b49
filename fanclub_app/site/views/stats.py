# file: fanclub_app/site/views/stats.py
"""Season statistics page.

Query parameters: ``season`` (year), ``sort`` (matches/goals/assists/motm/
own_goals) and ``dir`` (asc/desc). Unknown values fall back to the current
season and goals/desc.
"""

from __future__ import annotations

from typing import Any

from django.views.generic import TemplateView

from fanclub_app.services.stats import (
    SORT_KEYS,
    available_seasons,
    normalize_sort,
    parse_season,
    season_stats,
    sort_totals,
)


class StatsView(TemplateView):
    template_name = "site/stats.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        params = self.request.GET
        season = parse_season(params.get("season"))
        sort_key, direction = normalize_sort(params.get("sort"), params.get("dir"))
        data = season_stats(season)

        ctx.update(
            {
                "title": "Stats",
                "season": season,
                "seasons": available_seasons(),
                "summary": data.summary,
                "key_players": data.key_players,
                "rows": sort_totals(data.totals, sort_key, direction),
                "sort_keys": SORT_KEYS,
                "sort_key": sort_key,
                "sort_dir": direction,
                "next_dir": "asc" if direction == "desc" else "desc",
            }
        )
        return ctx
