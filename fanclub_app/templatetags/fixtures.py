# file: fanclub_app/templatetags/fixtures.py
"""Template tags for fixture cards.

Usage in templates:
    {% load fixtures %}
    {% fixture_card match poll %}
    {{ match|score_label }}
"""
from __future__ import annotations

from typing import Any, Optional

from django import template

from fanclub_app.models import Match
from fanclub_app.services.votes import PollSummary

register = template.Library()

RESULT_CLASSES = {"W": "result-win", "D": "result-draw", "L": "result-loss"}


@register.filter
def score_label(match: Match) -> str:
    """``"3 - 1"`` once a match is live or finished, ``"VS"`` before."""
    if not match.has_score:
        return "VS"
    return f"{match.home_score} - {match.away_score}"


@register.filter
def result_class(match: Match) -> str:
    return RESULT_CLASSES.get(match.result_letter or "", "")


@register.inclusion_tag("site/_partials/fixture_card.html", takes_context=True)
def fixture_card(context: dict[str, Any], match: Match, poll: Optional[PollSummary] = None) -> dict[str, Any]:
    """Context for one fixture card; the poll block is shown for upcoming matches."""
    return {
        "match": match,
        "poll": poll,
        "show_poll": match.is_upcoming and poll is not None,
        "team_name": context.get("team_name"),
    }
