# file: fanclub_app/tests/services/test_stats.py
"""Season aggregation tests.

Coverage:
* Pure reducers over unsaved model instances (no DB needed).
* Key-player selection without repeats and its fallbacks.
* Sorting and parameter normalization.
* ``season_stats`` / ``available_seasons`` against the database.
"""

from __future__ import annotations

import datetime as dt
from typing import Any

import pytest

from fanclub_app.models import Match, MatchStat, Player
from fanclub_app.services.stats import (
    aggregate_player_totals,
    available_seasons,
    normalize_sort,
    parse_season,
    pick_key_players,
    season_stats,
    sort_totals,
    summarize_matches,
)


# --- Helpers ---------------------------------------------------------------


def _player(pk: int, name: str) -> Player:
    return Player(pk=pk, name=name, number=pk, position="Forward")


def _match(status: str, ours: int, theirs: int) -> Match:
    return Match(
        date=dt.date(2026, 1, 1), time=dt.time(15, 0), opponent="X",
        status=status, home_score=ours, away_score=theirs,
    )


def _stat(player: Player, goals: int = 0, assists: int = 0, own_goals: int = 0, motm: bool = False) -> MatchStat:
    return MatchStat(player_id=player.pk, goals=goals, assists=assists, own_goals=own_goals, is_motm=motm)


# --- Team summary ----------------------------------------------------------


def test_summary_counts_only_finished_matches() -> None:
    matches = [
        _match("Finished", 3, 1),
        _match("Finished", 2, 2),
        _match("Finished", 0, 1),
        _match("Upcoming", 0, 0),
        _match("Live", 5, 0),
    ]
    s = summarize_matches(matches)
    assert (s.played, s.won, s.drawn, s.lost) == (3, 1, 1, 1)
    assert (s.gf, s.ga) == (5, 4)
    assert s.points == 4
    assert s.goal_difference == 1


def test_summary_empty() -> None:
    s = summarize_matches([])
    assert s.played == 0 and s.points == 0


# --- Player totals ---------------------------------------------------------


def test_totals_sum_rows_and_count_matches() -> None:
    a, b, c = _player(1, "A"), _player(2, "B"), _player(3, "C")
    stats = [
        _stat(a, goals=2, motm=True),
        _stat(a, goals=1, assists=1),
        _stat(b, assists=2, own_goals=1),
        _stat(_player(99, "Stranger"), goals=7),
    ]
    totals = {t.player.pk: t for t in aggregate_player_totals([a, b, c], stats)}

    assert (totals[1].goals, totals[1].assists, totals[1].matches, totals[1].motm) == (3, 1, 2, 1)
    assert (totals[2].assists, totals[2].own_goals, totals[2].matches) == (2, 1, 1)
    assert totals[3].matches == 0 and totals[3].per_match == 0.0
    assert 99 not in totals


def test_per_match_contribution() -> None:
    a = _player(1, "A")
    (t,) = aggregate_player_totals([a], [_stat(a, goals=1, assists=2), _stat(a)])
    assert t.contribution == 3
    assert t.per_match == 1.5


# --- Key players -----------------------------------------------------------


def test_key_players_are_distinct_when_enough_candidates() -> None:
    ps = [_player(i, n) for i, n in enumerate(["Ace", "Bolt", "Cruz", "Dane"], start=1)]
    ace, bolt, cruz, dane = ps
    stats = [
        _stat(ace, goals=3, assists=3),
        _stat(ace, goals=2, assists=2),
        _stat(ace),
        _stat(bolt, goals=1, assists=2),
        _stat(cruz, goals=1),
        _stat(cruz),
        _stat(dane, goals=1, assists=1),
    ]
    picks = pick_key_players(aggregate_player_totals(ps, stats))

    assert [k.key for k in picks] == ["top_scorer", "assist_king", "most_appearances", "best_contribution"]
    names = [k.totals.player.name for k in picks]
    assert names == ["Ace", "Bolt", "Cruz", "Dane"]
    assert len(set(names)) == 4


def test_key_players_reuse_best_when_everyone_picked() -> None:
    solo = _player(1, "Solo")
    picks = pick_key_players(aggregate_player_totals([solo], [_stat(solo, goals=1)]))
    assert all(k.totals is not None and k.totals.player.name == "Solo" for k in picks)


def test_key_players_empty_without_appearances() -> None:
    picks = pick_key_players(aggregate_player_totals([_player(1, "Bench")], []))
    assert len(picks) == 4
    assert all(k.totals is None for k in picks)


def test_key_player_ties_break_on_motm_then_name() -> None:
    a, b, c = _player(1, "Zed"), _player(2, "Amy"), _player(3, "Bea")
    stats = [_stat(a, goals=1, motm=True), _stat(b, goals=1), _stat(c, goals=1)]
    top = pick_key_players(aggregate_player_totals([a, b, c], stats))[0]
    assert top.totals.player.name == "Zed"

    stats = [_stat(a, goals=1), _stat(b, goals=1), _stat(c, goals=1)]
    top = pick_key_players(aggregate_player_totals([a, b, c], stats))[0]
    assert top.totals.player.name == "Amy"


# --- Sorting ---------------------------------------------------------------


def test_normalize_sort_defaults() -> None:
    assert normalize_sort(None, None) == ("goals", "desc")
    assert normalize_sort("bogus", "asc") == ("goals", "desc")
    assert normalize_sort("MOTM", "sideways") == ("motm", "desc")
    assert normalize_sort("assists", "ASC") == ("assists", "asc")


def test_sort_totals_by_key_and_direction() -> None:
    a, b = _player(1, "A"), _player(2, "B")
    totals = aggregate_player_totals([a, b], [_stat(a, goals=1), _stat(b, goals=3), _stat(b)])
    assert [t.player.name for t in sort_totals(totals, "goals", "desc")] == ["B", "A"]
    assert [t.player.name for t in sort_totals(totals, "matches", "asc")] == ["A", "B"]


def test_parse_season() -> None:
    assert parse_season("2025") == 2025
    assert parse_season("") == 2026
    assert parse_season("abc") == 2026


# --- Database loaders ------------------------------------------------------


@pytest.mark.django_db
def test_season_stats_uses_only_finished_matches_of_season(
    make_match: Any, make_player: Any, MatchStat: Any
) -> None:
    p = make_player(name="Goal Machine")
    done = make_match(status="Finished", home_score=2, away_score=0)
    live = make_match(status="Live", home_score=1, away_score=0, date=dt.date(2026, 3, 8))
    old = make_match(season=2025, status="Finished", home_score=0, away_score=4, date=dt.date(2025, 3, 1))
    MatchStat.objects.create(match=done, player=p, goals=2, is_motm=True)
    MatchStat.objects.create(match=live, player=p, goals=1)
    MatchStat.objects.create(match=old, player=p, goals=5)

    data = season_stats(2026)
    assert data.summary.played == 1 and data.summary.points == 3
    (totals,) = data.totals
    assert (totals.goals, totals.matches, totals.motm) == (2, 1, 1)
    assert data.key_players[0].totals.player == p


@pytest.mark.django_db
def test_available_seasons_include_current(make_match: Any) -> None:
    make_match(season=2024)
    make_match(season=2026)
    assert available_seasons() == [2026, 2024]
