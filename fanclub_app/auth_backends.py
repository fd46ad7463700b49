# file: fanclub_app/auth_backends.py
"""Authentication backend for e-mails verified by Google.

Usage:
    Enable the backend before ``ModelBackend``:

        AUTHENTICATION_BACKENDS = [
            "fanclub_app.auth_backends.WhitelistEmailBackend",
            "django.contrib.auth.backends.ModelBackend",
        ]

    The Google callback view calls ``authenticate(request, email=...)`` with
    the verified address. No password is involved.

Notes:
    - Only allow-listed e-mails (admin e-mail or a player's e-mail) get a user.
    - The Django user is created on first sign-in with ``username = email``.
    - ``is_staff`` / ``is_superuser`` follow the admin e-mail on every sign-in,
      so changing ``FANCLUB_ADMIN_EMAIL`` moves admin rights.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from django.contrib.auth import get_user_model
from django.contrib.auth.backends import ModelBackend
from django.contrib.auth.base_user import AbstractBaseUser

from fanclub_app.services.whitelist import is_admin_email, is_whitelisted, normalize_email

logger = logging.getLogger(__name__)

UserModel = get_user_model()


class WhitelistEmailBackend(ModelBackend):
    """Log in allow-listed e-mails without a password."""

    def authenticate(
        self,
        request: Any,
        username: Optional[str] = None,
        password: Optional[str] = None,
        email: Optional[str] = None,
        **kwargs: Any,
    ) -> Optional[AbstractBaseUser]:  # type: ignore[override]
        """Return the user for a verified ``email`` or ``None``.

        Password logins (``username`` + ``password``) are left to
        ``ModelBackend``.
        """
        if email is None or password is not None:
            return None

        email = normalize_email(email)
        if not is_whitelisted(email):
            logger.warning("Sign-in rejected, e-mail not on the allow-list: %s", email)
            return None

        user, created = UserModel._default_manager.get_or_create(  # type: ignore[attr-defined]
            username=email, defaults={"email": email}
        )
        if created:
            user.set_unusable_password()

        admin = is_admin_email(email)
        if created or user.is_staff != admin or user.is_superuser != admin:
            user.is_staff = admin
            user.is_superuser = admin
            user.save()

        if not self.user_can_authenticate(user):
            return None
        return user
