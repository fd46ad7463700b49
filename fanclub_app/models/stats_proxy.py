# file: fanclub_app/models/stats_proxy.py
"""Proxy model exposing season totals for players.

This module defines a Django **proxy model** that reuses the ``players`` table
while allowing a distinct admin screen focused on per-season totals. No
database schema changes are introduced by a proxy model.

Notes:
    - Totals are computed by :mod:`fanclub_app.services.stats` from
      ``MatchStat`` rows of Finished matches, not stored here.
"""

from __future__ import annotations

from .core import Player


class PlayerSeasonTotals(Player):
    """Read-only view of a player intended for season totals in the admin.

    This is a proxy to ``Player``; it does not create a new table.
    """

    class Meta:
        proxy = True
        verbose_name = "Season totals"
        verbose_name_plural = "Season totals"
