# file: fanclub_app/services/google_oauth.py
"""Google OAuth 2.0 authorization-code flow.

Provided utilities:
    - :func:`new_state` – random anti-CSRF ``state`` value for the session.
    - :func:`authorization_url` – URL of Google's consent screen.
    - :func:`fetch_identity` – exchange the returned ``code`` for tokens and
      read the signed-in e-mail from the userinfo endpoint.

Google is the identity provider only: whether the e-mail may sign in is
decided afterwards by :mod:`fanclub_app.services.whitelist`.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
TOKEN_URL = "https://oauth2.googleapis.com/token"
USERINFO_URL = "https://openidconnect.googleapis.com/v1/userinfo"
SCOPES = ("openid", "email", "profile")


class OAuthError(Exception):
    """Raised when the Google sign-in cannot be completed."""


@dataclass(frozen=True)
class GoogleIdentity:
    email: str
    name: str = ""
    picture: str = ""


def is_configured() -> bool:
    return bool(settings.GOOGLE_OAUTH_CLIENT_ID and settings.GOOGLE_OAUTH_CLIENT_SECRET)


def new_state() -> str:
    return secrets.token_urlsafe(24)


def authorization_url(redirect_uri: str, state: str) -> str:
    """Build the consent-screen URL for ``redirect_uri``.

    Raises:
        OAuthError: If the client credentials are not configured.
    """
    if not is_configured():
        raise OAuthError("Google sign-in is not configured.")
    params = {
        "client_id": settings.GOOGLE_OAUTH_CLIENT_ID,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": " ".join(SCOPES),
        "state": state,
        "prompt": "select_account",
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def _post_json(url: str, data: dict[str, Any]) -> dict[str, Any]:
    try:
        resp = requests.post(url, data=data, timeout=settings.HTTP_TIMEOUT)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise OAuthError(f"Token exchange failed: {exc}") from exc


def _get_json(url: str, token: str) -> dict[str, Any]:
    try:
        resp = requests.get(
            url, headers={"Authorization": f"Bearer {token}"}, timeout=settings.HTTP_TIMEOUT
        )
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise OAuthError(f"Userinfo request failed: {exc}") from exc


def fetch_identity(code: str, redirect_uri: str) -> GoogleIdentity:
    """Exchange ``code`` for an access token and return the Google identity.

    Args:
        code: Authorization code from the callback query string.
        redirect_uri: The same redirect URI used for the consent screen.

    Returns:
        GoogleIdentity: Verified e-mail (lower-cased) plus display data.

    Raises:
        OAuthError: On network/HTTP errors, a missing access token, or an
            unverified / missing e-mail.
    """
    if not code:
        raise OAuthError("Missing authorization code.")

    tokens = _post_json(
        TOKEN_URL,
        {
            "code": code,
            "client_id": settings.GOOGLE_OAUTH_CLIENT_ID,
            "client_secret": settings.GOOGLE_OAUTH_CLIENT_SECRET,
            "redirect_uri": redirect_uri,
            "grant_type": "authorization_code",
        },
    )
    access_token = tokens.get("access_token")
    if not access_token:
        raise OAuthError("Google did not return an access token.")

    info = _get_json(USERINFO_URL, access_token)
    email = (info.get("email") or "").strip().lower()
    if not email or not info.get("email_verified", False):
        raise OAuthError("Google account has no verified e-mail.")

    logger.info("Google identity resolved for %s", email)
    return GoogleIdentity(email=email, name=info.get("name") or "", picture=info.get("picture") or "")
