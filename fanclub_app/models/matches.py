# file: fanclub_app/models/matches.py
"""Match domain models: fixtures, per-player statistics and the attendance poll.

Contains:
* :class:`Match` – a fixture of the club against one opponent.
* :class:`MatchStat` – one player's performance in one match.
* :class:`MatchVote` – one player's answer to the availability poll.

Scores are always stored from the club's point of view: ``home_score`` is the
club's goals and ``away_score`` the opponent's, whatever the venue
(``is_home`` only drives the display).
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.db.models import Q
from django.urls import reverse


def _current_season() -> int:
    return settings.CURRENT_SEASON


# --- Match -----------------------------------------------------------------


class Match(models.Model):
    """A fixture against ``opponent`` in a given season.

    Notes:
        * An empty ``stadium`` falls back to ``settings.DEFAULT_STADIUM`` on
          save.
        * Upcoming matches carry no score; :meth:`clean` resets both scores
          to ``0`` for them.
    """

    class Status(models.TextChoices):
        """Lifecycle of a fixture."""

        UPCOMING = "Upcoming", "Upcoming"
        LIVE = "Live", "Live"
        FINISHED = "Finished", "Finished"

    season = models.PositiveIntegerField("Season", default=_current_season)
    date = models.DateField("Date")
    time = models.TimeField("Kick-off")
    stadium = models.CharField("Stadium", max_length=255, blank=True)
    opponent = models.CharField("Opponent", max_length=255)
    opponent_logo = models.URLField("Opponent logo", max_length=500, blank=True)
    is_home = models.BooleanField("Home match", default=True)
    home_score = models.PositiveIntegerField("Our score", default=0)
    away_score = models.PositiveIntegerField("Opponent score", default=0)
    status = models.CharField("Status", max_length=20, choices=Status.choices, default=Status.UPCOMING)

    class Meta:
        db_table = "matches"
        ordering = ("-date", "-time")
        verbose_name = "Match"
        verbose_name_plural = "Matches"
        indexes = [models.Index(fields=("season", "status"), name="matches_season_status_idx")]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{settings.TEAM_NAME} vs {self.opponent} ({self.date:%Y-%m-%d})"

    def clean(self) -> None:
        """Drop scores of fixtures that have not kicked off yet."""
        if self.status == self.Status.UPCOMING:
            self.home_score = 0
            self.away_score = 0

    def save(self, *args: Any, **kwargs: Any) -> None:
        if not (self.stadium or "").strip():
            self.stadium = settings.DEFAULT_STADIUM
        super().save(*args, **kwargs)

    # --- status helpers -----------------------------------------------------

    @property
    def is_upcoming(self) -> bool:
        return self.status == self.Status.UPCOMING

    @property
    def is_live(self) -> bool:
        return self.status == self.Status.LIVE

    @property
    def is_finished(self) -> bool:
        return self.status == self.Status.FINISHED

    @property
    def has_score(self) -> bool:
        """Scores are shown once the match is live or finished."""
        return self.is_live or self.is_finished

    @property
    def result_letter(self) -> str | None:
        """``W``/``D``/``L`` for finished matches, ``None`` otherwise."""
        if not self.is_finished:
            return None
        if self.home_score > self.away_score:
            return "W"
        if self.home_score == self.away_score:
            return "D"
        return "L"

    @property
    def opponent_initials(self) -> str:
        return self.opponent[:2].upper()

    def get_absolute_url(self) -> str:
        return reverse("site:match_detail", args=[self.pk])


# --- Per-match statistics --------------------------------------------------


class MatchStat(models.Model):
    """One player's line in one match.

    Notes:
        - Uniqueness is enforced per (match, player); a player's number of
          rows in a season is their number of matches played.
        - At most one row per match carries the MOTM flag.
    """

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name="stats", verbose_name="Match")
    player = models.ForeignKey(
        "fanclub_app.Player", on_delete=models.CASCADE, related_name="match_stats", verbose_name="Player"
    )
    goals = models.PositiveSmallIntegerField("Goals", default=0)
    assists = models.PositiveSmallIntegerField("Assists", default=0)
    own_goals = models.PositiveSmallIntegerField("Own goals", default=0)
    is_motm = models.BooleanField("Man of the match", default=False)

    class Meta:
        db_table = "match_stats"
        verbose_name = "Match stat"
        verbose_name_plural = "Match stats"
        constraints = [
            models.UniqueConstraint(fields=["match", "player"], name="uniq_stat_match_player"),
            models.UniqueConstraint(
                fields=["match"], condition=Q(is_motm=True), name="uniq_motm_per_match"
            ),
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.player} - {self.match}"

    def validate_constraints(self, exclude: Any = None) -> None:
        """Run the DB constraints, reporting a second MOTM on ``is_motm``.

        Callers that validate the flag across several rows at once (the match
        admin inline) exclude ``is_motm`` and skip the database lookup.
        """
        exclude = set(exclude or ())
        if "is_motm" not in exclude:
            self._check_single_motm()
            exclude.add("is_motm")
        super().validate_constraints(exclude=exclude)

    def _check_single_motm(self) -> None:
        if self.is_motm and self.match_id:
            taken = (
                MatchStat.objects.filter(match_id=self.match_id, is_motm=True)
                .exclude(pk=self.pk)
                .exists()
            )
            if taken:
                raise ValidationError({"is_motm": "This match already has a man of the match."})


# --- Attendance poll -------------------------------------------------------


class MatchVote(models.Model):
    """A player's availability answer for a fixture (one per player)."""

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name="votes", verbose_name="Match")
    player = models.ForeignKey(
        "fanclub_app.Player", on_delete=models.CASCADE, related_name="votes", verbose_name="Player"
    )
    is_going = models.BooleanField("Going", default=True)
    note = models.CharField("Note", max_length=255, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "match_votes"
        verbose_name = "Match vote"
        verbose_name_plural = "Match votes"
        constraints = [
            models.UniqueConstraint(fields=["match", "player"], name="uniq_vote_match_player"),
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        answer = "going" if self.is_going else "not going"
        return f"{self.player} {answer} - {self.match}"
