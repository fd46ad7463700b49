from .core import Player, SiteSettings
from .matches import Match, MatchStat, MatchVote
from .notifications import Notification
from .stats_proxy import PlayerSeasonTotals

__all__ = [
    "Player", "SiteSettings",
    "Match", "MatchStat", "MatchVote",
    "Notification",
    "PlayerSeasonTotals",
]
