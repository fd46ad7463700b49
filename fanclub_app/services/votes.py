# file: fanclub_app/services/votes.py
"""Attendance poll for upcoming fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from django.core.exceptions import ValidationError

from fanclub_app.models import Match, MatchVote, Player


@dataclass
class PollSummary:
    """Going / not-going lists for one match."""

    going: list[MatchVote] = field(default_factory=list)
    not_going: list[MatchVote] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.going) + len(self.not_going)

    @property
    def is_empty(self) -> bool:
        return not self.total

    def as_dict(self) -> dict[str, Any]:
        def _row(v: MatchVote) -> dict[str, Any]:
            return {"player_id": v.player_id, "name": v.player.display_name, "note": v.note}

        return {
            "going": [_row(v) for v in self.going],
            "not_going": [_row(v) for v in self.not_going],
            "total": self.total,
        }


def cast_vote(match: Match, player: Player, *, is_going: bool, note: str = "") -> MatchVote:
    """Insert or replace ``player``'s answer for ``match``.

    Raises:
        ValidationError: If the match is no longer upcoming.
    """
    if not match.is_upcoming:
        raise ValidationError("Voting is closed for this match.")
    vote, _ = MatchVote.objects.update_or_create(
        match=match,
        player=player,
        defaults={"is_going": is_going, "note": (note or "").strip()[:255]},
    )
    return vote


def poll_summary(match: Match) -> PollSummary:
    summary = PollSummary()
    for vote in match.votes.select_related("player").order_by("player__number", "player__name"):
        (summary.going if vote.is_going else summary.not_going).append(vote)
    return summary


def poll_summaries(matches: list[Match]) -> dict[int, PollSummary]:
    """Poll summaries for several matches in one query, keyed by match id."""
    out = {m.pk: PollSummary() for m in matches}
    votes = (
        MatchVote.objects.filter(match__in=list(out))
        .select_related("player")
        .order_by("player__number", "player__name")
    )
    for vote in votes:
        summary = out[vote.match_id]
        (summary.going if vote.is_going else summary.not_going).append(vote)
    return out


def vote_for(match: Match, player: Player | None) -> MatchVote | None:
    if player is None:
        return None
    return MatchVote.objects.filter(match=match, player=player).first()
