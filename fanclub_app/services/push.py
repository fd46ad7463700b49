# file: fanclub_app/services/push.py
"""OneSignal push delivery.

The REST key lives in settings (``ONESIGNAL_API_KEY``) and is only used from
the server. When the app id or key is missing, pushes are skipped and
:func:`send_push` returns ``None``.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

ONESIGNAL_URL = "https://onesignal.com/api/v1/notifications"


class PushError(Exception):
    """Raised when OneSignal rejects or cannot receive a push request."""


def is_configured() -> bool:
    return bool(settings.ONESIGNAL_APP_ID and settings.ONESIGNAL_API_KEY)


def build_payload(heading: str, message: str, url: str = "", data: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the JSON body for a push to every configured segment."""
    payload: dict[str, Any] = {
        "app_id": settings.ONESIGNAL_APP_ID,
        "included_segments": list(settings.ONESIGNAL_SEGMENTS),
        "headings": {"en": heading},
        "contents": {"en": message},
    }
    if url:
        payload["url"] = url
    if data:
        payload["data"] = data
    return payload


def send_push(heading: str, message: str, url: str = "", data: dict[str, Any] | None = None) -> dict[str, Any] | None:
    """Send a push notification to all subscribers.

    Args:
        heading: Notification title.
        message: Notification body.
        url: Page opened when the notification is clicked.
        data: Extra key/value data attached to the notification.

    Returns:
        dict | None: OneSignal's JSON response, or ``None`` when push is not
        configured.

    Raises:
        PushError: On network errors or a non-2xx response.
    """
    if not is_configured():
        logger.info("Push skipped (OneSignal not configured): %s", heading)
        return None

    try:
        resp = requests.post(
            ONESIGNAL_URL,
            json=build_payload(heading, message, url=url, data=data),
            headers={
                "Authorization": f"Basic {settings.ONESIGNAL_API_KEY}",
                "Content-Type": "application/json; charset=utf-8",
            },
            timeout=settings.HTTP_TIMEOUT,
        )
    except requests.RequestException as exc:
        raise PushError(f"OneSignal request failed: {exc}") from exc

    if resp.status_code >= 400:
        raise PushError(f"OneSignal returned {resp.status_code}: {resp.text[:200]}")

    try:
        body = resp.json()
    except ValueError:
        body = {}
    logger.info("Push sent: %s (id=%s)", heading, body.get("id"))
    return body
