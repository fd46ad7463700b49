# file: fanclub_app/models/core.py
"""Core club models: the squad and the site-wide settings row.

Contains:
- :class:`Player` – a squad member; the e-mail links the profile to a Google
  identity and puts the address on the sign-in allow-list.
- :class:`SiteSettings` – the singleton row (id=1) holding team identity.

Both map 1:1 onto the hosted tables (``players``, ``site_settings``).
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils import timezone

PLAYER_PLACEHOLDER = "https://placehold.co/250x250/38003c/ffffff?text=Player"


# --- Player ----------------------------------------------------------------


class Player(models.Model):
    """Squad member as shown on the Players page and in stats tables.

    Notes:
        ``email`` is stored lower-cased and is unique when present; an empty
        value is stored as ``NULL`` so several players can have no e-mail.
    """

    class Position(models.TextChoices):
        """Supported football positions."""

        GOALKEEPER = "Goalkeeper", "Goalkeeper"
        DEFENDER = "Defender", "Defender"
        MIDFIELDER = "Midfielder", "Midfielder"
        FORWARD = "Forward", "Forward"

    class Status(models.TextChoices):
        """Availability status."""

        ACTIVE = "Active", "Active"
        INJURED = "Injured", "Injured"

    name = models.CharField("Name", max_length=255)
    number = models.PositiveIntegerField("Shirt number")
    position = models.CharField("Position", max_length=20, choices=Position.choices)
    status = models.CharField("Status", max_length=20, choices=Status.choices, default=Status.ACTIVE)
    nickname = models.CharField("Nickname", max_length=100, blank=True)
    email = models.EmailField(
        "E-mail",
        unique=True,
        null=True,
        blank=True,
        help_text="Google account used to sign in. Puts the player on the allow-list.",
    )
    phone = models.CharField("Phone", max_length=30, blank=True)
    image = models.URLField("Photo URL", max_length=500, blank=True)
    height = models.PositiveSmallIntegerField("Height (cm)", null=True, blank=True)
    weight = models.PositiveSmallIntegerField("Weight (kg)", null=True, blank=True)
    dob = models.DateField("Date of birth", null=True, blank=True)
    joined_at = models.DateTimeField("Joined", default=timezone.now)

    class Meta:
        db_table = "players"
        ordering = ("number", "name")
        verbose_name = "Player"
        verbose_name_plural = "Players"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.number}. {self.name}"

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Normalize ``email`` (trimmed, lower-cased, empty → ``NULL``)."""
        self.email = (self.email or "").strip().lower() or None
        super().save(*args, **kwargs)

    @property
    def display_name(self) -> str:
        """Nickname when set, otherwise the full name."""
        return self.nickname or self.name

    @property
    def is_injured(self) -> bool:
        return self.status == self.Status.INJURED

    def image_url(self) -> str:
        """Return the stored photo URL or a placeholder."""
        return self.image or PLAYER_PLACEHOLDER

    def get_absolute_url(self) -> str:
        return reverse("site:player_detail", args=[self.pk])


# --- Site settings ---------------------------------------------------------


class SiteSettings(models.Model):
    """Singleton row with the team's public identity.

    The row always has ``pk == 1``; use :meth:`load` to read it. It is created
    on first access with ``settings.TEAM_NAME`` as the team name.
    """

    SINGLETON_ID = 1

    team_name = models.CharField("Team name", max_length=120)
    logo_url = models.URLField("Logo URL", max_length=500, blank=True)
    banner_url = models.URLField("Banner URL", max_length=500, blank=True)
    contact_phone = models.CharField("Contact phone", max_length=30, blank=True)

    class Meta:
        db_table = "site_settings"
        verbose_name = "Team settings"
        verbose_name_plural = "Team settings"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.team_name

    def save(self, *args: Any, **kwargs: Any) -> None:
        self.pk = self.SINGLETON_ID
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> SiteSettings:
        obj, _ = cls.objects.get_or_create(
            pk=cls.SINGLETON_ID, defaults={"team_name": settings.TEAM_NAME}
        )
        return obj
