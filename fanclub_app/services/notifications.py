# file: fanclub_app/services/notifications.py
"""Announcements and the notification bell.

Provided utilities:
    - :func:`latest` – newest notifications for the bell.
    - :func:`read_ids` / :func:`mark_read` / :func:`mark_all_read` – read state
      kept per visitor in the session.
    - :func:`bell_state` – list plus unread count, shared by the template tag
      and the JSON feed.
    - :func:`announce_match` – notification row plus push for a new fixture.
    - :func:`delete_for_match` – remove a match's announcements.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from django.conf import settings
from django.urls import reverse

from fanclub_app.models import Match, Notification
from fanclub_app.services.push import PushError, send_push

logger = logging.getLogger(__name__)

BELL_LIMIT = 10
SESSION_KEY = "fanclub_read_notifications"

ANNOUNCE_TITLE = "New Match Announced!"
ANNOUNCE_PUSH_HEADING = "⚽ New Match Announced!"


# --- Listing & read state --------------------------------------------------


def latest(limit: int = BELL_LIMIT) -> list[Notification]:
    return list(Notification.objects.order_by("-created_at", "-id")[:limit])


def read_ids(session: Any) -> set[int]:
    return {int(x) for x in session.get(SESSION_KEY, [])}


def _store(session: Any, ids: Iterable[int]) -> None:
    session[SESSION_KEY] = sorted(set(ids))


def mark_read(session: Any, notification_id: int) -> None:
    ids = read_ids(session)
    ids.add(int(notification_id))
    _store(session, ids)


def mark_all_read(session: Any, notifications: Iterable[Notification] | None = None) -> None:
    """Mark every listed notification (default: the bell list) as read."""
    items = latest() if notifications is None else notifications
    ids = read_ids(session)
    ids.update(n.pk for n in items)
    _store(session, ids)


def bell_state(session: Any) -> dict[str, Any]:
    """Return ``{"notifications": [...], "unread_count": n}`` for a visitor.

    Each list item is a dict with the notification fields plus ``is_read``.
    """
    seen = read_ids(session)
    items = [
        {
            "id": n.pk,
            "title": n.title,
            "message": n.message,
            "link": n.link,
            "created_at": n.created_at,
            "is_read": n.pk in seen,
        }
        for n in latest()
    ]
    return {
        "notifications": items,
        "unread_count": sum(1 for item in items if not item["is_read"]),
    }


# --- Match announcements ---------------------------------------------------


def match_link(match: Match) -> str:
    return reverse("site:match_detail", args=[match.pk]).rstrip("/")


def announce_match(match: Match) -> Notification:
    """Create the announcement row for ``match`` and push it to subscribers.

    Push failures are logged; the notification row is kept either way.
    """
    link = match_link(match)
    message = f"VS {match.opponent} on {match.date:%Y-%m-%d}"
    notification = Notification.objects.create(title=ANNOUNCE_TITLE, message=message, link=link)

    try:
        send_push(
            ANNOUNCE_PUSH_HEADING,
            f"{settings.TEAM_NAME} {message}",
            url=f"{settings.SITE_URL}{link}",
            data={"match_id": match.pk},
        )
    except PushError:
        logger.exception("Push for match %s failed", match.pk)

    return notification


def delete_for_match(match: Match) -> int:
    """Delete notifications pointing at ``match``; return how many were removed."""
    link = match_link(match)
    deleted, _ = Notification.objects.filter(link__in=[link, f"{link}/"]).delete()
    return deleted
