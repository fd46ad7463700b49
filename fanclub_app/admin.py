# file: fanclub_app/admin.py
"""Django admin configuration for the squad, fixtures, settings and notifications.

The admin console is reserved for the club admin (``FANCLUB_ADMIN_EMAIL``);
the sign-in gate lives in :class:`fanclub_app.site.views.auth.AdminGateView`.
"""

from __future__ import annotations

from typing import Any

import nested_admin
from django.conf import settings
from django.contrib import admin, messages
from django.db.models import Count, IntegerField, Q, Sum, Value
from django.db.models.functions import Coalesce
from django.utils.html import format_html

from .forms import (
    MatchAdminForm,
    MatchStatInlineForm,
    MatchStatInlineFormSet,
    PlayerAdminForm,
    SiteSettingsAdminForm,
)
from .models import Match, MatchStat, MatchVote, Notification, Player, PlayerSeasonTotals, SiteSettings
from .services.notifications import announce_match

admin.site.site_header = "Fan club admin"
admin.site.site_title = "Fan club admin"


# ------------------------------------------------------------
# Squad
# ------------------------------------------------------------
@admin.register(Player)
class PlayerAdmin(admin.ModelAdmin):
    """Admin for players with avatar upload and preview."""

    form = PlayerAdminForm
    list_display = ("number", "name", "nickname", "position", "status", "email", "photo_thumb")
    list_display_links = ("number", "name")
    list_filter = ("position", "status")
    search_fields = ("name", "nickname", "email")
    readonly_fields = ("photo_preview",)
    fieldsets = (
        (None, {"fields": ("name", "number", "position", "status", "nickname")}),
        ("Contact", {"fields": ("email", "phone")}),
        ("Photo", {"fields": ("image", "image_file", "photo_preview")}),
        ("Profile", {"fields": ("height", "weight", "dob", "joined_at")}),
    )

    @admin.display(description="Photo")
    def photo_thumb(self, obj: Player) -> str:
        return format_html(
            '<img src="{}" style="height:40px;width:auto;border-radius:4px;" />',
            obj.image_url(),
        )

    @admin.display(description="Preview")
    def photo_preview(self, obj: Player) -> str:
        return format_html(
            '<img src="{}" style="max-height:300px;width:auto;border-radius:8px;" />',
            obj.image_url(),
        )


# ------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------
class MatchStatInline(nested_admin.NestedTabularInline):
    model = MatchStat
    form = MatchStatInlineForm
    formset = MatchStatInlineFormSet
    extra = 0
    fields = ("player", "goals", "assists", "own_goals", "is_motm")


class MatchVoteInline(nested_admin.NestedTabularInline):
    """Poll answers are given by players on the site; read-only here."""

    model = MatchVote
    extra = 0
    fields = ("player", "is_going", "note", "updated_at")
    readonly_fields = fields
    can_delete = True

    def has_add_permission(self, request: Any, obj: Any | None = None) -> bool:
        return False

    def has_change_permission(self, request: Any, obj: Any | None = None) -> bool:
        return False


@admin.register(Match)
class MatchAdmin(nested_admin.NestedModelAdmin):
    form = MatchAdminForm
    inlines = [MatchStatInline, MatchVoteInline]
    list_display = ("date", "time", "opponent", "is_home", "score", "status", "season")
    list_filter = ("season", "status", "is_home")
    search_fields = ("opponent", "stadium")
    date_hierarchy = "date"
    ordering = ("-date", "-time")
    actions = ["reannounce"]
    fieldsets = (
        (None, {"fields": ("season", "date", "time", "stadium", "status")}),
        ("Opponent", {"fields": ("opponent", "opponent_logo", "is_home")}),
        ("Score", {"fields": ("home_score", "away_score"), "description": "Club score first."}),
    )

    @admin.display(description="Score")
    def score(self, obj: Match) -> str:
        if not obj.has_score:
            return "–"
        return f"{obj.home_score} - {obj.away_score}"

    @admin.action(description="Announce again (notification + push)")
    def reannounce(self, request: Any, queryset: Any) -> None:
        upcoming = [m for m in queryset if m.is_upcoming]
        for m in upcoming:
            announce_match(m)
        skipped = queryset.count() - len(upcoming)
        self.message_user(request, f"Announced {len(upcoming)} match(es).")
        if skipped:
            self.message_user(request, f"Skipped {skipped} match(es) that are not upcoming.", level=messages.WARNING)


# ------------------------------------------------------------
# Team settings (singleton)
# ------------------------------------------------------------
@admin.register(SiteSettings)
class SiteSettingsAdmin(admin.ModelAdmin):
    form = SiteSettingsAdminForm
    list_display = ("team_name", "contact_phone", "logo_thumb")
    readonly_fields = ("logo_preview", "banner_preview")
    fields = (
        "team_name",
        "contact_phone",
        "logo_url",
        "logo_file",
        "logo_preview",
        "banner_url",
        "banner_file",
        "banner_preview",
    )

    def has_add_permission(self, request: Any) -> bool:
        return not SiteSettings.objects.exists()

    def has_delete_permission(self, request: Any, obj: Any | None = None) -> bool:
        return False

    @admin.display(description="Logo")
    def logo_thumb(self, obj: SiteSettings) -> str:
        if not obj.logo_url:
            return "–"
        return format_html('<img src="{}" style="height:32px;" />', obj.logo_url)

    @admin.display(description="Logo preview")
    def logo_preview(self, obj: SiteSettings) -> str:
        if not obj.logo_url:
            return "–"
        return format_html('<img src="{}" style="max-height:120px;" />', obj.logo_url)

    @admin.display(description="Banner preview")
    def banner_preview(self, obj: SiteSettings) -> str:
        if not obj.banner_url:
            return "–"
        return format_html('<img src="{}" style="max-height:160px;" />', obj.banner_url)


# ------------------------------------------------------------
# Notifications
# ------------------------------------------------------------
@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("title", "message", "link", "created_at")
    search_fields = ("title", "message")
    readonly_fields = ("created_at",)


# ------------------------------------------------------------
# PlayerSeasonTotals (proxy)
# ------------------------------------------------------------
@admin.register(PlayerSeasonTotals)
class PlayerSeasonTotalsAdmin(admin.ModelAdmin):
    """Current-season totals per player, read-only.

    Totals are annotations over ``match_stats`` rows of Finished matches of
    ``settings.CURRENT_SEASON``; every annotation uses the same join so rows
    are not multiplied.
    """

    list_display = ("number", "name", "position", "matches", "goals", "assists", "motm", "own_goals")
    list_display_links = None
    search_fields = ("name", "nickname")
    list_filter = ("position",)

    def get_queryset(self, request: Any):  # type: ignore[override]
        qs = super().get_queryset(request)
        season = Q(
            match_stats__match__season=settings.CURRENT_SEASON,
            match_stats__match__status=Match.Status.FINISHED,
        )
        zero = Value(0, output_field=IntegerField())
        return qs.annotate(
            matches_played=Count("match_stats", filter=season),
            goals_total=Coalesce(Sum("match_stats__goals", filter=season), zero, output_field=IntegerField()),
            assists_total=Coalesce(Sum("match_stats__assists", filter=season), zero, output_field=IntegerField()),
            own_goals_total=Coalesce(Sum("match_stats__own_goals", filter=season), zero, output_field=IntegerField()),
            motm_total=Count("match_stats", filter=season & Q(match_stats__is_motm=True)),
        )

    def has_add_permission(self, request: Any) -> bool:
        return False

    def has_change_permission(self, request: Any, obj: Any | None = None) -> bool:
        return False

    def has_delete_permission(self, request: Any, obj: Any | None = None) -> bool:
        return False

    @admin.display(ordering="matches_played", description="Matches")
    def matches(self, obj: Any) -> int:
        return getattr(obj, "matches_played", 0)

    @admin.display(ordering="goals_total", description="Goals")
    def goals(self, obj: Any) -> int:
        return getattr(obj, "goals_total", 0)

    @admin.display(ordering="assists_total", description="Assists")
    def assists(self, obj: Any) -> int:
        return getattr(obj, "assists_total", 0)

    @admin.display(ordering="motm_total", description="MOTM")
    def motm(self, obj: Any) -> int:
        return getattr(obj, "motm_total", 0)

    @admin.display(ordering="own_goals_total", description="Own goals")
    def own_goals(self, obj: Any) -> int:
        return getattr(obj, "own_goals_total", 0)
