# fanclub_app/context.py
"""Context helpers for injecting club identity and auth flags into templates.

Notes:
    - ``_resolve_site_settings`` is cached with ``lru_cache(maxsize=1)``. The
      cache is cleared by a ``post_save`` signal on :class:`SiteSettings`
      (see :mod:`fanclub_app.signals`).
    - The auth flags are computed per request and never cached.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from .models import Player, SiteSettings
from .services.whitelist import is_admin_email, is_whitelisted, player_for_email


@lru_cache(maxsize=1)
def _resolve_site_settings() -> SiteSettings:
    """Return the singleton settings row (created on first access)."""
    return SiteSettings.load()


def member_flags(user: Any) -> dict[str, Any]:
    """Return ``is_admin``, ``is_whitelisted`` and ``current_player`` for ``user``."""
    if not getattr(user, "is_authenticated", False):
        return {"is_admin": False, "is_whitelisted": False, "current_player": None}
    email = getattr(user, "email", "") or user.get_username()
    current: Player | None = player_for_email(email)
    return {
        "is_admin": is_admin_email(email),
        "is_whitelisted": is_whitelisted(email),
        "current_player": current,
    }


def club(request: Any) -> dict[str, Any]:
    """Django context processor with site settings and member flags.

    Returns:
        dict[str, Any]: ``site_settings``, ``team_name`` and the keys of
        :func:`member_flags`.
    """
    site_settings = _resolve_site_settings()
    ctx: dict[str, Any] = {
        "site_settings": site_settings,
        "team_name": site_settings.team_name,
    }
    ctx.update(member_flags(getattr(request, "user", None)))
    return ctx
