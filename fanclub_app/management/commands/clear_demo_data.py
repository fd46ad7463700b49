"""Remove all club rows from the database.

**WARNING:** deletes players, matches, stats, votes and notifications. The
team settings row is kept. Use only outside production.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from fanclub_app.models import Match, MatchStat, MatchVote, Notification, Player


class Command(BaseCommand):
    help = "Delete all club data (players, matches, stats, votes, notifications)."

    @transaction.atomic
    def handle(self, *args, **kwargs):
        MatchVote.objects.all().delete()
        MatchStat.objects.all().delete()
        Match.objects.all().delete()
        Notification.objects.all().delete()
        Player.objects.all().delete()

        self.stdout.write(self.style.WARNING("Club data removed."))
