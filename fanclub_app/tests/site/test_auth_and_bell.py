# file: fanclub_app/tests/site/test_auth_and_bell.py
"""Google sign-in views, logout, admin gate and notification endpoints."""

from __future__ import annotations

from typing import Any

import pytest
from django.urls import reverse

from fanclub_app.services import google_oauth
from fanclub_app.services.google_oauth import GoogleIdentity, OAuthError
from fanclub_app.site.views.auth import STATE_SESSION_KEY

pytestmark = pytest.mark.django_db


@pytest.fixture
def google_configured(settings: Any) -> None:
    settings.GOOGLE_OAUTH_CLIENT_ID = "cid"
    settings.GOOGLE_OAUTH_CLIENT_SECRET = "secret"


def _start_login(client: Any) -> str:
    resp = client.get(reverse("site:google_login"), {"next": "/players/"})
    assert resp.status_code == 302
    return client.session[STATE_SESSION_KEY]


# --- Login flow ------------------------------------------------------------


def test_login_page_renders(client: Any) -> None:
    resp = client.get(reverse("site:login"))
    assert resp.status_code == 200
    assert resp.context["google_enabled"] is False


def test_google_login_redirects_to_consent_screen(client: Any, google_configured: None) -> None:
    resp = client.get(reverse("site:google_login"))
    assert resp["Location"].startswith(google_oauth.AUTHORIZE_URL)
    assert client.session[STATE_SESSION_KEY] in resp["Location"]


def test_google_login_without_configuration_goes_back(client: Any) -> None:
    resp = client.get(reverse("site:google_login"))
    assert resp["Location"] == reverse("site:login")


def test_callback_logs_in_whitelisted_member(
    client: Any, google_configured: None, player_min: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    state = _start_login(client)
    monkeypatch.setattr(
        google_oauth, "fetch_identity", lambda code, uri: GoogleIdentity(email="member@realfake.test", name="Mem")
    )

    resp = client.get(reverse("site:google_callback"), {"state": state, "code": "c"})

    assert resp.status_code == 302
    assert resp["Location"] == "/players/"
    assert client.session.get("_auth_user_id")


def test_callback_rejects_unlisted_email(
    client: Any, google_configured: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    state = _start_login(client)
    monkeypatch.setattr(google_oauth, "fetch_identity", lambda code, uri: GoogleIdentity(email="x@gmail.test"))

    resp = client.get(reverse("site:google_callback"), {"state": state, "code": "c"})

    assert resp.status_code == 403
    assert b"Not on the list" in resp.content
    assert "_auth_user_id" not in client.session


def test_callback_rejects_bad_state(client: Any, google_configured: None) -> None:
    _start_login(client)
    resp = client.get(reverse("site:google_callback"), {"state": "forged", "code": "c"})
    assert resp["Location"] == reverse("site:login")


def test_callback_handles_oauth_error(client: Any, google_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    state = _start_login(client)

    def fail(code: str, uri: str) -> GoogleIdentity:
        raise OAuthError("boom")

    monkeypatch.setattr(google_oauth, "fetch_identity", fail)
    resp = client.get(reverse("site:google_callback"), {"state": state, "code": "c"})
    assert resp["Location"] == reverse("site:login")


def test_logout_is_post_only(client: Any, member_user: Any) -> None:
    client.force_login(member_user)
    assert client.get(reverse("site:logout")).status_code == 405
    resp = client.post(reverse("site:logout"))
    assert resp.status_code == 302
    assert "_auth_user_id" not in client.session


# --- Admin gate ------------------------------------------------------------


def test_admin_redirects_anonymous_to_site_login(client: Any) -> None:
    resp = client.get("/admin/", follow=True)
    final_url, _ = resp.redirect_chain[-1]
    assert final_url.startswith(reverse("site:login"))


def test_admin_denies_non_admin_member(client: Any, member_user: Any) -> None:
    client.force_login(member_user)
    resp = client.get("/admin/", follow=True)
    assert resp.status_code == 403
    assert b"Access Denied" in resp.content


def test_admin_gate_sends_admin_to_index(admin_user_client: Any) -> None:
    resp = admin_user_client.get(reverse("admin_gate"))
    assert resp["Location"] == reverse("admin:index")


# --- Notification endpoints ------------------------------------------------


def test_notification_feed_and_read_flow(client: Any, Notification: Any) -> None:
    a = Notification.objects.create(title="A", message="m", link="/fixtures/1")
    Notification.objects.create(title="B", message="m")

    data = client.get(reverse("site:notifications")).json()
    assert data["unread_count"] == 2
    assert data["notifications"][0]["title"] == "B"

    resp = client.post(reverse("site:notification_read", args=[a.pk]))
    assert resp["Location"] == "/fixtures/1"
    assert client.get(reverse("site:notifications")).json()["unread_count"] == 1

    resp = client.post(reverse("site:notifications_read_all"), HTTP_ACCEPT="application/json")
    assert resp.json() == {"ok": True}
    assert client.get(reverse("site:notifications")).json()["unread_count"] == 0


def test_read_notification_never_leaves_the_site(client: Any, Notification: Any) -> None:
    n = Notification.objects.create(title="A", message="m", link="https://evil.test/phish")
    resp = client.post(reverse("site:notification_read", args=[n.pk]))
    assert resp.status_code == 302
    assert resp["Location"] == reverse("site:home")


def test_read_unknown_notification_404(client: Any) -> None:
    assert client.post(reverse("site:notification_read", args=[42])).status_code == 404
