# file: fanclub_app/site/views/auth.py
"""Authentication for the public site and the admin gate.

- :class:`SiteLoginView` – page with the "Sign in with Google" button; skips
  itself for signed-in users.
- :class:`GoogleLoginView` – stores an anti-CSRF ``state`` in the session and
  redirects to Google's consent screen.
- :class:`GoogleCallbackView` – exchanges the code, checks the allow-list and
  logs the member in. E-mails that are not on the list get the "not on the
  list" page and stay anonymous.
- :class:`SiteLogoutView` – POST-only logout with a redirect to Home.
- :class:`AdminGateView` – replaces the admin login page: anonymous visitors
  go to the site login, signed-in non-admins get Access Denied (403).
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib import messages
from django.contrib.auth import authenticate, login
from django.contrib.auth.views import LogoutView
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.generic import TemplateView

from fanclub_app.services import google_oauth
from fanclub_app.services.google_oauth import OAuthError

logger = logging.getLogger(__name__)

STATE_SESSION_KEY = "google_oauth_state"
NEXT_SESSION_KEY = "google_oauth_next"
BACKEND = "fanclub_app.auth_backends.WhitelistEmailBackend"


def _safe_next(request: HttpRequest, value: str | None) -> str:
    if value and url_has_allowed_host_and_scheme(
        value, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return value
    return reverse("site:home")


def _callback_uri(request: HttpRequest) -> str:
    return request.build_absolute_uri(reverse("site:google_callback"))


class SiteLoginView(TemplateView):
    template_name = "site/login.html"

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        if request.user.is_authenticated:
            return redirect(_safe_next(request, request.GET.get("next")))
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        ctx = super().get_context_data(**kwargs)
        ctx["title"] = "Sign in"
        ctx["next"] = self.request.GET.get("next", "")
        ctx["google_enabled"] = google_oauth.is_configured()
        return ctx


class GoogleLoginView(View):
    def get(self, request: HttpRequest) -> HttpResponse:
        state = google_oauth.new_state()
        request.session[STATE_SESSION_KEY] = state
        request.session[NEXT_SESSION_KEY] = _safe_next(request, request.GET.get("next"))
        try:
            url = google_oauth.authorization_url(_callback_uri(request), state)
        except OAuthError as exc:
            messages.error(request, str(exc))
            return redirect("site:login")
        return redirect(url)


class GoogleCallbackView(View):
    def get(self, request: HttpRequest) -> HttpResponse:
        expected = request.session.pop(STATE_SESSION_KEY, None)
        next_url = request.session.pop(NEXT_SESSION_KEY, None) or reverse("site:home")

        if request.GET.get("error"):
            messages.error(request, "Google sign-in was cancelled.")
            return redirect("site:login")
        if not expected or request.GET.get("state") != expected:
            messages.error(request, "Sign-in session expired, please try again.")
            return redirect("site:login")

        try:
            identity = google_oauth.fetch_identity(request.GET.get("code", ""), _callback_uri(request))
        except OAuthError as exc:
            logger.warning("Google sign-in failed: %s", exc)
            messages.error(request, "Google sign-in failed, please try again.")
            return redirect("site:login")

        user = authenticate(request, email=identity.email)
        if user is None:
            return render(
                request,
                "site/not_whitelisted.html",
                {"title": "Not on the list", "email": identity.email},
                status=403,
            )

        login(request, user, backend=BACKEND)
        messages.success(request, f"Welcome, {identity.name or identity.email}!")
        return redirect(next_url)


class SiteLogoutView(LogoutView):
    """Logout endpoint constrained to POST with a redirect to Home."""

    http_method_names = ["post", "options"]
    next_page = "site:home"


class AdminGateView(View):
    """Stand-in for ``/admin/login/``."""

    def get(self, request: HttpRequest) -> HttpResponse:
        if not request.user.is_authenticated:
            login_url = reverse("site:login")
            return redirect(f"{login_url}?next={reverse('admin:index')}")
        if not request.user.is_staff:
            return render(request, "site/access_denied.html", {"title": "Access Denied"}, status=403)
        return redirect("admin:index")

    post = get
