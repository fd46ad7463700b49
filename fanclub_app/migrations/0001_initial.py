import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models

import fanclub_app.models.matches


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Player",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                ("number", models.PositiveIntegerField(verbose_name="Shirt number")),
                (
                    "position",
                    models.CharField(
                        choices=[
                            ("Goalkeeper", "Goalkeeper"),
                            ("Defender", "Defender"),
                            ("Midfielder", "Midfielder"),
                            ("Forward", "Forward"),
                        ],
                        max_length=20,
                        verbose_name="Position",
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[("Active", "Active"), ("Injured", "Injured")],
                        default="Active",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
                ("nickname", models.CharField(blank=True, max_length=100, verbose_name="Nickname")),
                (
                    "email",
                    models.EmailField(
                        blank=True,
                        help_text="Google account used to sign in. Puts the player on the allow-list.",
                        max_length=254,
                        null=True,
                        unique=True,
                        verbose_name="E-mail",
                    ),
                ),
                ("phone", models.CharField(blank=True, max_length=30, verbose_name="Phone")),
                ("image", models.URLField(blank=True, max_length=500, verbose_name="Photo URL")),
                ("height", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Height (cm)")),
                ("weight", models.PositiveSmallIntegerField(blank=True, null=True, verbose_name="Weight (kg)")),
                ("dob", models.DateField(blank=True, null=True, verbose_name="Date of birth")),
                ("joined_at", models.DateTimeField(default=django.utils.timezone.now, verbose_name="Joined")),
            ],
            options={
                "verbose_name": "Player",
                "verbose_name_plural": "Players",
                "db_table": "players",
                "ordering": ("number", "name"),
            },
        ),
        migrations.CreateModel(
            name="SiteSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("team_name", models.CharField(max_length=120, verbose_name="Team name")),
                ("logo_url", models.URLField(blank=True, max_length=500, verbose_name="Logo URL")),
                ("banner_url", models.URLField(blank=True, max_length=500, verbose_name="Banner URL")),
                ("contact_phone", models.CharField(blank=True, max_length=30, verbose_name="Contact phone")),
            ],
            options={
                "verbose_name": "Team settings",
                "verbose_name_plural": "Team settings",
                "db_table": "site_settings",
            },
        ),
        migrations.CreateModel(
            name="Match",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "season",
                    models.PositiveIntegerField(
                        default=fanclub_app.models.matches._current_season, verbose_name="Season"
                    ),
                ),
                ("date", models.DateField(verbose_name="Date")),
                ("time", models.TimeField(verbose_name="Kick-off")),
                ("stadium", models.CharField(blank=True, max_length=255, verbose_name="Stadium")),
                ("opponent", models.CharField(max_length=255, verbose_name="Opponent")),
                ("opponent_logo", models.URLField(blank=True, max_length=500, verbose_name="Opponent logo")),
                ("is_home", models.BooleanField(default=True, verbose_name="Home match")),
                ("home_score", models.PositiveIntegerField(default=0, verbose_name="Our score")),
                ("away_score", models.PositiveIntegerField(default=0, verbose_name="Opponent score")),
                (
                    "status",
                    models.CharField(
                        choices=[("Upcoming", "Upcoming"), ("Live", "Live"), ("Finished", "Finished")],
                        default="Upcoming",
                        max_length=20,
                        verbose_name="Status",
                    ),
                ),
            ],
            options={
                "verbose_name": "Match",
                "verbose_name_plural": "Matches",
                "db_table": "matches",
                "ordering": ("-date", "-time"),
                "indexes": [models.Index(fields=["season", "status"], name="matches_season_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200, verbose_name="Title")),
                ("message", models.TextField(verbose_name="Message")),
                (
                    "link",
                    models.CharField(
                        blank=True, help_text="Site path, e.g. /fixtures/12/", max_length=255, verbose_name="Link"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Notification",
                "verbose_name_plural": "Notifications",
                "db_table": "notifications",
                "ordering": ("-created_at", "-id"),
            },
        ),
        migrations.CreateModel(
            name="MatchStat",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("goals", models.PositiveSmallIntegerField(default=0, verbose_name="Goals")),
                ("assists", models.PositiveSmallIntegerField(default=0, verbose_name="Assists")),
                ("own_goals", models.PositiveSmallIntegerField(default=0, verbose_name="Own goals")),
                ("is_motm", models.BooleanField(default=False, verbose_name="Man of the match")),
                (
                    "match",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="stats",
                        to="fanclub_app.match",
                        verbose_name="Match",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="match_stats",
                        to="fanclub_app.player",
                        verbose_name="Player",
                    ),
                ),
            ],
            options={
                "verbose_name": "Match stat",
                "verbose_name_plural": "Match stats",
                "db_table": "match_stats",
                "constraints": [
                    models.UniqueConstraint(fields=("match", "player"), name="uniq_stat_match_player"),
                    models.UniqueConstraint(
                        condition=models.Q(("is_motm", True)), fields=("match",), name="uniq_motm_per_match"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="MatchVote",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_going", models.BooleanField(default=True, verbose_name="Going")),
                ("note", models.CharField(blank=True, max_length=255, verbose_name="Note")),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "match",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="votes",
                        to="fanclub_app.match",
                        verbose_name="Match",
                    ),
                ),
                (
                    "player",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="votes",
                        to="fanclub_app.player",
                        verbose_name="Player",
                    ),
                ),
            ],
            options={
                "verbose_name": "Match vote",
                "verbose_name_plural": "Match votes",
                "db_table": "match_votes",
                "constraints": [
                    models.UniqueConstraint(fields=("match", "player"), name="uniq_vote_match_player"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PlayerSeasonTotals",
            fields=[],
            options={
                "verbose_name": "Season totals",
                "verbose_name_plural": "Season totals",
                "proxy": True,
                "indexes": [],
                "constraints": [],
            },
            bases=("fanclub_app.player",),
        ),
    ]
