# file: fanclub_app/models/notifications.py
"""Broadcast announcements shown in the header notification bell.

Notifications are global (not addressed to a user). Read state is tracked per
visitor in the session, see :mod:`fanclub_app.services.notifications`.
"""

from __future__ import annotations

from django.db import models


# --- Model -----------------------------------------------------------------


class Notification(models.Model):
    """A short announcement with an optional in-site link."""

    title = models.CharField("Title", max_length=200)
    message = models.TextField("Message")
    link = models.CharField("Link", max_length=255, blank=True, help_text="Site path, e.g. /fixtures/12/")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notifications"
        ordering = ("-created_at", "-id")
        verbose_name = "Notification"
        verbose_name_plural = "Notifications"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.title
