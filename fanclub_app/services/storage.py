# file: fanclub_app/services/storage.py
"""Public image uploads (player avatars, team logo and banner).

Files go through Django's ``default_storage`` under ``settings.UPLOAD_PREFIX``
and are named ``<kind>-<timestamp>.<ext>``. The returned value is an absolute
public URL that can be stored straight into a URL field.
"""

from __future__ import annotations

import logging
import os
import time

from django.conf import settings
from django.core.files.storage import default_storage
from django.core.files.uploadedfile import UploadedFile

logger = logging.getLogger(__name__)

DEFAULT_EXT = "png"


def upload_name(kind: str, filename: str, *, now: float | None = None) -> str:
    """Return the storage path for an upload of ``kind``.

    Example:
        ``upload_name("avatar", "me.JPG", now=1700000000.5)`` →
        ``"avatars/avatar-1700000000500.jpg"``
    """
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower() or DEFAULT_EXT
    stamp = int((time.time() if now is None else now) * 1000)
    return f"{settings.UPLOAD_PREFIX}/{kind}-{stamp}.{ext}"


def absolute_url(url: str) -> str:
    if url.startswith(("http://", "https://")):
        return url
    return f"{settings.SITE_URL}{url if url.startswith('/') else '/' + url}"


def upload_public_file(file: UploadedFile, kind: str) -> str:
    """Save ``file`` to storage and return its absolute public URL."""
    name = default_storage.save(upload_name(kind, getattr(file, "name", "")), file)
    url = absolute_url(default_storage.url(name))
    logger.info("Uploaded %s as %s", kind, name)
    return url
