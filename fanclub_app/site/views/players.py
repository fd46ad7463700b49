# file: fanclub_app/site/views/players.py
"""Players listing, detail and profile self-service.

- PlayersListView: squad by shirt number with position / injured filters.
- PlayerDetailView: one player with computed age and current-season totals.
- PlayerEditView: the player (matched by e-mail) or the admin edits
  nickname, photo, height, weight and date of birth.

Notes
-----
* Position filter uses ``?pos=<Position>``; those views hide injured
  players. ``?pos=Injured`` lists only injured players; no filter lists all.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Final

from django.conf import settings
from django.contrib import messages
from django.db.models import QuerySet
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect
from django.views.generic import DetailView, TemplateView, UpdateView

from fanclub_app.context import member_flags
from fanclub_app.forms import PlayerProfileForm
from fanclub_app.models import Player
from fanclub_app.services.stats import season_stats

INJURED_FILTER: Final[str] = "Injured"
FILTERS: Final[tuple[str, ...]] = ("All", *Player.Position.values, INJURED_FILTER)


def _age(born: date | None) -> int | None:
    """Return age in years for a given birth date or ``None`` when unknown."""
    if not born:
        return None
    today = date.today()
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


def filter_players(selected: str | None) -> QuerySet[Player]:
    """All (or an unknown value) lists everyone; positions leave out the injured."""
    qs = Player.objects.order_by("number", "name")
    if selected == INJURED_FILTER:
        return qs.filter(status=Player.Status.INJURED)
    if selected in Player.Position.values:
        return qs.exclude(status=Player.Status.INJURED).filter(position=selected)
    return qs


def can_edit(user: Any, player: Player) -> bool:
    """Owner (e-mail match) or admin."""
    flags = member_flags(user)
    if flags["is_admin"]:
        return True
    current = flags["current_player"]
    return current is not None and current.pk == player.pk


class PlayersListView(TemplateView):
    template_name = "site/players.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        selected = self.request.GET.get("pos") or "All"
        if selected not in FILTERS:
            selected = "All"
        ctx.update(
            {
                "title": "Players",
                "players": filter_players(selected),
                "filters": FILTERS,
                "selected_pos": selected,
            }
        )
        return ctx


class PlayerDetailView(DetailView):
    model = Player
    template_name = "site/player_detail.html"
    context_object_name = "player"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        p: Player = ctx["player"]
        season = season_stats(settings.CURRENT_SEASON)
        totals = next((t for t in season.totals if t.player.pk == p.pk), None)
        ctx.update(
            {
                "title": p.name,
                "age": _age(p.dob),
                "totals": totals,
                "season": season.season,
                "can_edit": can_edit(self.request.user, p),
            }
        )
        return ctx


class PlayerEditView(UpdateView):
    model = Player
    form_class = PlayerProfileForm
    template_name = "site/player_edit.html"
    context_object_name = "player"

    def dispatch(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        player = self.get_object()
        if not can_edit(request.user, player):
            messages.error(request, "Permission denied.")
            return redirect("site:player_detail", pk=player.pk)
        return super().dispatch(request, *args, **kwargs)

    def form_valid(self, form: PlayerProfileForm) -> HttpResponse:
        response = super().form_valid(form)
        messages.success(self.request, "Profile updated!")
        return response

    def get_success_url(self) -> str:
        return self.object.get_absolute_url()
