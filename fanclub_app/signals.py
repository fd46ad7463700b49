# file: fanclub_app/signals.py
"""Signal handlers for match announcements and cache resets.

* A newly created Upcoming :class:`Match` is announced after the transaction
  commits (notification row + push).
* Deleting a match removes its announcements.
* Saving :class:`SiteSettings` clears the context-processor memo.
"""

from __future__ import annotations

from typing import Any

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .context import _resolve_site_settings
from .models import Match, SiteSettings
from .services.notifications import announce_match, delete_for_match


@receiver(post_save, sender=Match)
def _match_created_announce(sender: type[Match], instance: Match, created: bool, **kwargs: Any) -> None:
    """Announce new upcoming fixtures once the row is committed."""
    if kwargs.get("raw"):
        return
    if created and instance.is_upcoming:
        transaction.on_commit(lambda: announce_match(instance))


@receiver(post_delete, sender=Match)
def _match_deleted_cleanup(sender: type[Match], instance: Match, **kwargs: Any) -> None:
    delete_for_match(instance)


@receiver(post_save, sender=SiteSettings)
@receiver(post_delete, sender=SiteSettings)
def _site_settings_changed(sender: type[SiteSettings], instance: SiteSettings, **kwargs: Any) -> None:
    _resolve_site_settings.cache_clear()
