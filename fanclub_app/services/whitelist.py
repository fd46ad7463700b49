# file: fanclub_app/services/whitelist.py
"""Sign-in allow-list.

The allow-list is the admin e-mail (``settings.FANCLUB_ADMIN_EMAIL``) plus
every e-mail present in the ``players`` table. E-mails are compared trimmed
and case-insensitively.
"""

from __future__ import annotations

from django.conf import settings

from fanclub_app.models import Player


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def is_admin_email(email: str | None) -> bool:
    """Return ``True`` when ``email`` is the configured admin e-mail.

    An empty admin setting never matches.
    """
    admin_email = normalize_email(settings.FANCLUB_ADMIN_EMAIL)
    return bool(admin_email) and normalize_email(email) == admin_email


def player_for_email(email: str | None) -> Player | None:
    """Return the player profile linked to ``email`` (or ``None``)."""
    email = normalize_email(email)
    if not email:
        return None
    return Player.objects.filter(email__iexact=email).first()


def is_whitelisted(email: str | None) -> bool:
    """Return ``True`` when ``email`` may sign in to member features."""
    email = normalize_email(email)
    if not email:
        return False
    if is_admin_email(email):
        return True
    return Player.objects.filter(email__iexact=email).exists()
