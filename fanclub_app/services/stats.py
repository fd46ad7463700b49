# file: fanclub_app/services/stats.py
"""Season aggregation for the Stats and Home pages.

Provided utilities:
    - :func:`summarize_matches` – team record (P/W/D/L, GF/GA, 3-1-0 points).
    - :func:`aggregate_player_totals` – per-player sums over ``MatchStat`` rows.
    - :func:`pick_key_players` – four "key player" categories without repeats.
    - :func:`sort_totals` – ordering used by the stats table.
    - :func:`season_stats` – load one season from the database and run all of
      the above.
    - :func:`available_seasons` – seasons offered by the season selectors.

The reducers are plain functions over already-fetched rows, so they can be
fed model instances straight from a queryset. Everything is recomputed on
every page load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from django.conf import settings

from fanclub_app.models import Match, MatchStat, Player


__all__ = [
    "TeamSummary",
    "PlayerTotals",
    "KeyPlayer",
    "SeasonStats",
    "SORT_KEYS",
    "summarize_matches",
    "aggregate_player_totals",
    "pick_key_players",
    "normalize_sort",
    "sort_totals",
    "season_stats",
    "available_seasons",
    "parse_season",
]

POINTS_WIN = 3
POINTS_DRAW = 1

SORT_KEYS: tuple[str, ...] = ("matches", "goals", "assists", "motm", "own_goals")
DEFAULT_SORT: tuple[str, str] = ("goals", "desc")


# --- Result types ----------------------------------------------------------


@dataclass
class TeamSummary:
    """Season record of the club."""

    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    gf: int = 0
    ga: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.gf - self.ga


@dataclass
class PlayerTotals:
    """Season sums for one player."""

    player: Player
    goals: int = 0
    assists: int = 0
    own_goals: int = 0
    matches: int = 0
    motm: int = 0

    @property
    def contribution(self) -> int:
        return self.goals + self.assists

    @property
    def per_match(self) -> float:
        """Goals plus assists per match played (``0.0`` without matches)."""
        if not self.matches:
            return 0.0
        return self.contribution / self.matches


@dataclass(frozen=True)
class KeyPlayer:
    """One highlighted category; ``totals`` is ``None`` when nobody qualifies."""

    key: str
    label: str
    totals: PlayerTotals | None
    value: float = 0


@dataclass
class SeasonStats:
    season: int
    summary: TeamSummary
    totals: list[PlayerTotals] = field(default_factory=list)
    key_players: list[KeyPlayer] = field(default_factory=list)


# --- Reducers --------------------------------------------------------------


def summarize_matches(matches: Iterable[Match]) -> TeamSummary:
    """Fold finished matches into a :class:`TeamSummary`.

    ``home_score`` is the club's score and ``away_score`` the opponent's.
    Matches that are not Finished are ignored.

    Args:
        matches: Match rows of one season (any iterable of ``Match``).

    Returns:
        TeamSummary: Record with ``points == 3 * won + drawn``.
    """
    summary = TeamSummary()
    for m in matches:
        if m.status != Match.Status.FINISHED:
            continue
        ours = m.home_score or 0
        theirs = m.away_score or 0
        summary.played += 1
        summary.gf += ours
        summary.ga += theirs
        if ours > theirs:
            summary.won += 1
            summary.points += POINTS_WIN
        elif ours == theirs:
            summary.drawn += 1
            summary.points += POINTS_DRAW
        else:
            summary.lost += 1
    return summary


def aggregate_player_totals(players: Iterable[Player], stats: Iterable[MatchStat]) -> list[PlayerTotals]:
    """Sum each player's own ``MatchStat`` rows in a single pass.

    Every player gets an entry (zeros when they have no rows). Rows that
    reference a player outside ``players`` are ignored.

    Args:
        players: Players to report on, in display order.
        stats: Stat rows already limited to the season's finished matches.

    Returns:
        list[PlayerTotals]: One entry per player, in the order of ``players``.
    """
    by_id: dict[int, PlayerTotals] = {}
    for p in players:
        by_id[p.pk] = PlayerTotals(player=p)

    for row in stats:
        totals = by_id.get(row.player_id)
        if totals is None:
            continue
        totals.goals += row.goals or 0
        totals.assists += row.assists or 0
        totals.own_goals += row.own_goals or 0
        totals.matches += 1
        if row.is_motm:
            totals.motm += 1

    return list(by_id.values())


KEY_CATEGORIES: tuple[tuple[str, str, Callable[[PlayerTotals], float]], ...] = (
    ("top_scorer", "Top scorer", lambda t: t.goals),
    ("assist_king", "Assist king", lambda t: t.assists),
    ("most_appearances", "Most appearances", lambda t: t.matches),
    ("best_contribution", "Best per match", lambda t: t.per_match),
)


def pick_key_players(totals: Iterable[PlayerTotals]) -> list[KeyPlayer]:
    """Pick one player per key category, avoiding repeats where possible.

    Categories are filled in :data:`KEY_CATEGORIES` order. Candidates are
    players with at least one match. Within a category the ranking is the
    category value, then MOTM count (both descending), then name. A player
    picked for an earlier category is skipped; if every candidate has been
    picked already, the best-ranked one is reused.

    Returns:
        list[KeyPlayer]: Exactly one entry per category.
    """
    candidates = [t for t in totals if t.matches > 0]
    picked: set[int] = set()
    result: list[KeyPlayer] = []

    for key, label, metric in KEY_CATEGORIES:
        if not candidates:
            result.append(KeyPlayer(key=key, label=label, totals=None))
            continue
        ranked = sorted(
            candidates,
            key=lambda t: (-metric(t), -t.motm, t.player.name.lower(), t.player.pk),
        )
        choice = next((t for t in ranked if t.player.pk not in picked), ranked[0])
        picked.add(choice.player.pk)
        result.append(KeyPlayer(key=key, label=label, totals=choice, value=metric(choice)))

    return result


def normalize_sort(key: str | None, direction: str | None) -> tuple[str, str]:
    """Validate a sort request, falling back to goals/desc."""
    key = (key or "").lower()
    direction = (direction or "").lower()
    if key not in SORT_KEYS:
        return DEFAULT_SORT
    if direction not in {"asc", "desc"}:
        direction = "desc"
    return key, direction


def sort_totals(totals: Iterable[PlayerTotals], key: str, direction: str) -> list[PlayerTotals]:
    """Stable sort of totals by one of :data:`SORT_KEYS`."""
    key, direction = normalize_sort(key, direction)
    return sorted(totals, key=lambda t: getattr(t, key), reverse=(direction == "desc"))


# --- Loaders ---------------------------------------------------------------


def season_stats(season: int) -> SeasonStats:
    """Load a season's finished matches, stats and players and aggregate them.

    Args:
        season: Season year, e.g. ``2026``.

    Returns:
        SeasonStats: Team summary, per-player totals (squad order) and key
        players for the season.
    """
    matches = list(Match.objects.filter(season=season, status=Match.Status.FINISHED))
    stats = MatchStat.objects.filter(match__in=[m.pk for m in matches])
    players = Player.objects.order_by("number", "name")

    totals = aggregate_player_totals(players, stats)
    return SeasonStats(
        season=season,
        summary=summarize_matches(matches),
        totals=totals,
        key_players=pick_key_players(totals),
    )


def available_seasons() -> list[int]:
    """Seasons present in ``matches`` plus the current one, newest first."""
    seasons = set(Match.objects.values_list("season", flat=True).distinct())
    seasons.add(settings.CURRENT_SEASON)
    return sorted(seasons, reverse=True)


def parse_season(value: str | None) -> int:
    """Parse a ``?season=`` query value, defaulting to the current season."""
    try:
        return int(value) if value else settings.CURRENT_SEASON
    except (TypeError, ValueError):
        return settings.CURRENT_SEASON
