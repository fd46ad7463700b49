"""Reset the club tables and seed them with the demo squad and fixtures.

Matches are inserted with ``bulk_create`` so no announcement (notification or
push) is sent for the demo fixtures.
"""

from __future__ import annotations

import logging
from datetime import date, time

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from fanclub_app.models import Match, MatchStat, MatchVote, Notification, Player, SiteSettings

logger = logging.getLogger(__name__)

PHOTO = "https://resources.premierleague.com/premierleague/photos/players/250x250/{}.png"

DEMO_PLAYERS = (
    # name, number, position, photo id
    ("Brick Wall", 1, Player.Position.GOALKEEPER, "p49262"),
    ("Gary Neville's Ghost", 2, Player.Position.DEFENDER, "p106617"),
    ("The Rock", 5, Player.Position.DEFENDER, "p97032"),
    ("Slide Tackle", 3, Player.Position.DEFENDER, "p209244"),
    ("Pass Master", 8, Player.Position.MIDFIELDER, "p61366"),
    ("Box To Box", 4, Player.Position.MIDFIELDER, "p219847"),
    ("Winger Speed", 11, Player.Position.MIDFIELDER, "p165153"),
    ("Goal Machine", 9, Player.Position.FORWARD, "p223094"),
    ("False Nine", 10, Player.Position.FORWARD, "p172649"),
)

# number -> (goals, assists, own_goals, motm) for the finished fixture
DEMO_STATS = {
    1: (0, 0, 0, False),
    5: (0, 0, 0, False),
    8: (0, 2, 0, False),
    4: (0, 0, 0, False),
    9: (2, 0, 0, True),
    10: (1, 1, 0, False),
}


class Command(BaseCommand):
    help = "Reset club data and load the demo squad, fixtures and stats."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--season", type=int, default=None, help="Season year (default: CURRENT_SEASON).")

    @transaction.atomic
    def handle(self, *args, **options) -> None:
        season = options["season"] or settings.CURRENT_SEASON
        if season < 1900 or season > 2999:
            raise CommandError(f"Invalid season: {season}")

        self.stdout.write("Resetting club data…")
        MatchVote.objects.all().delete()
        MatchStat.objects.all().delete()
        Match.objects.all().delete()
        Notification.objects.all().delete()
        Player.objects.all().delete()

        site = SiteSettings.load()
        site.team_name = settings.TEAM_NAME
        site.save()

        players = {}
        for name, number, position, photo in DEMO_PLAYERS:
            players[number] = Player.objects.create(
                name=name, number=number, position=position, image=PHOTO.format(photo)
            )

        Match.objects.bulk_create(
            [
                Match(
                    season=season, date=date(season, 1, 24), time=time(15, 0),
                    stadium="The Fake Stadium", opponent="Imaginary United", is_home=True,
                    home_score=3, away_score=1, status=Match.Status.FINISHED,
                ),
                Match(
                    season=season, date=date(season, 1, 31), time=time(15, 0),
                    stadium="Null Pointer Arena", opponent="NonExistent City", is_home=False,
                    status=Match.Status.UPCOMING,
                ),
                Match(
                    season=season, date=date(season, 2, 8), time=time(17, 30),
                    stadium="The Fake Stadium", opponent="Placeholder Rovers", is_home=True,
                    status=Match.Status.UPCOMING,
                ),
            ]
        )

        finished = Match.objects.get(season=season, opponent="Imaginary United")
        MatchStat.objects.bulk_create(
            [
                MatchStat(match=finished, player=players[number], goals=g, assists=a, own_goals=og, is_motm=motm)
                for number, (g, a, og, motm) in DEMO_STATS.items()
            ]
        )

        logger.info("Demo data loaded for season %s", season)
        self.stdout.write(
            self.style.SUCCESS(
                f"Loaded {len(players)} players, 3 matches and {len(DEMO_STATS)} stat rows for {season}."
            )
        )
