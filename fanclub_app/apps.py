# file: fanclub_app/apps.py
"""App configuration for the fan-club application.

This module defines :class:`FanclubAppConfig`, the Django ``AppConfig`` that
registers the app and configures default model primary keys.

Key points:
    * ``name`` is fixed to ``"fanclub_app"`` to keep the app label and import
      paths stable.
    * ``default_auto_field`` is set to ``BigAutoField`` for models without an
      explicit primary key field.
    * ``ready()`` imports :mod:`fanclub_app.signals` so match announcements
      and notification cleanup are wired once the registry is loaded.
"""

from __future__ import annotations

from django.apps import AppConfig


# --- AppConfig -------------------------------------------------------------

class FanclubAppConfig(AppConfig):
    """App registration and defaults for ``fanclub_app``."""

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "fanclub_app"
    verbose_name: str = "Fan club"

    def ready(self) -> None:
        from . import signals  # noqa: F401
