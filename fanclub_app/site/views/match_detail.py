# file: fanclub_app/site/views/match_detail.py
"""Match detail page with recorded stats and the attendance poll.

- :class:`MatchDetailView` – GET renders the page, POST records the current
  member's vote (upsert on match + player).
- :class:`MatchVotesFeedView` – JSON snapshot of the poll; the page polls it
  to refresh the going / not-going lists.
"""

from __future__ import annotations

from typing import Any

from django.contrib import messages
from django.core.exceptions import ValidationError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views import View
from django.views.generic import DetailView

from fanclub_app.context import member_flags
from fanclub_app.forms import VoteForm
from fanclub_app.models import Match
from fanclub_app.services.votes import cast_vote, poll_summary, vote_for


class MatchDetailView(DetailView):
    model = Match
    template_name = "site/match_detail.html"
    context_object_name = "match"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        match: Match = ctx["match"]
        flags = member_flags(self.request.user)
        player = flags["current_player"]

        my_vote = vote_for(match, player)
        form = kwargs.get("form") or VoteForm(
            initial={
                "is_going": "1" if (my_vote is None or my_vote.is_going) else "0",
                "note": my_vote.note if my_vote else "",
            }
        )

        ctx.update(
            {
                "title": f"vs {match.opponent}",
                "stats": match.stats.select_related("player").order_by("-is_motm", "-goals", "-assists", "player__name"),
                "poll": poll_summary(match),
                "my_vote": my_vote,
                "can_vote": match.is_upcoming and flags["is_whitelisted"] and player is not None,
                "needs_profile": flags["is_whitelisted"] and player is None,
                "vote_form": form,
            }
        )
        return ctx

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        self.object = match = self.get_object()
        flags = member_flags(request.user)
        player = flags["current_player"]

        if not (flags["is_whitelisted"] and player is not None):
            messages.error(request, "Sign in with a squad e-mail to vote.")
            return redirect(match.get_absolute_url())

        form = VoteForm(request.POST)
        if not form.is_valid():
            return self.render_to_response(self.get_context_data(form=form))

        try:
            cast_vote(
                match,
                player,
                is_going=form.cleaned_data["is_going"],
                note=form.cleaned_data["note"],
            )
        except ValidationError as exc:
            messages.error(request, " ".join(exc.messages))
        else:
            messages.success(request, "Vote recorded!")
        return redirect(match.get_absolute_url())


class MatchVotesFeedView(View):
    """Return the poll of one match as JSON."""

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        match = get_object_or_404(Match, pk=pk)
        data = poll_summary(match).as_dict()
        data["match_id"] = match.pk
        data["status"] = match.status
        return JsonResponse(data)
