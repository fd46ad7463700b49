# file: fanclub_app/tests/services/test_external.py
"""Google OAuth, OneSignal push and storage helpers.

Network calls are replaced with ``monkeypatch`` fakes of ``requests``.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest
import requests
from django.core.files.uploadedfile import SimpleUploadedFile

from fanclub_app.services import google_oauth, push, storage


class _FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, text: str = "") -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code}")


@pytest.fixture
def google_configured(settings: Any) -> None:
    settings.GOOGLE_OAUTH_CLIENT_ID = "cid"
    settings.GOOGLE_OAUTH_CLIENT_SECRET = "secret"


@pytest.fixture
def push_configured(settings: Any) -> None:
    settings.ONESIGNAL_APP_ID = "app-1"
    settings.ONESIGNAL_API_KEY = "rest-key"
    settings.ONESIGNAL_SEGMENTS = ["Total Subscriptions"]


# --- Google OAuth ----------------------------------------------------------


def test_authorization_url_requires_configuration() -> None:
    with pytest.raises(google_oauth.OAuthError):
        google_oauth.authorization_url("https://club.test/cb", "s")


def test_authorization_url_contains_client_and_state(google_configured: None) -> None:
    url = google_oauth.authorization_url("https://club.test/login/google/callback/", "st-1")
    parsed = urlparse(url)
    qs = parse_qs(parsed.query)
    assert url.startswith(google_oauth.AUTHORIZE_URL)
    assert qs["client_id"] == ["cid"]
    assert qs["state"] == ["st-1"]
    assert qs["response_type"] == ["code"]
    assert "email" in qs["scope"][0]


def test_fetch_identity_success(google_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    calls: dict[str, Any] = {}

    def fake_post(url: str, data: dict, timeout: float) -> _FakeResponse:
        calls["post"] = (url, data)
        return _FakeResponse({"access_token": "tok"})

    def fake_get(url: str, headers: dict, timeout: float) -> _FakeResponse:
        calls["get"] = (url, headers)
        return _FakeResponse({"email": "Member@RealFake.test", "email_verified": True, "name": "Mem"})

    monkeypatch.setattr(google_oauth.requests, "post", fake_post)
    monkeypatch.setattr(google_oauth.requests, "get", fake_get)

    identity = google_oauth.fetch_identity("code-1", "https://club.test/cb")
    assert identity.email == "member@realfake.test"
    assert identity.name == "Mem"
    assert calls["post"][1]["grant_type"] == "authorization_code"
    assert calls["get"][1]["Authorization"] == "Bearer tok"


def test_fetch_identity_rejects_unverified_email(google_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(google_oauth.requests, "post", lambda *a, **k: _FakeResponse({"access_token": "tok"}))
    monkeypatch.setattr(
        google_oauth.requests, "get", lambda *a, **k: _FakeResponse({"email": "x@y.z", "email_verified": False})
    )
    with pytest.raises(google_oauth.OAuthError):
        google_oauth.fetch_identity("code", "https://club.test/cb")


def test_fetch_identity_wraps_http_errors(google_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(google_oauth.requests, "post", lambda *a, **k: _FakeResponse({}, status_code=400))
    with pytest.raises(google_oauth.OAuthError):
        google_oauth.fetch_identity("bad", "https://club.test/cb")


def test_fetch_identity_requires_code() -> None:
    with pytest.raises(google_oauth.OAuthError):
        google_oauth.fetch_identity("", "https://club.test/cb")


# --- Push ------------------------------------------------------------------


def test_push_skipped_when_not_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*a: Any, **k: Any) -> None:
        raise AssertionError("no HTTP call expected")

    monkeypatch.setattr(push.requests, "post", boom)
    assert push.send_push("Hi", "There") is None


def test_push_payload_and_headers(push_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    sent: dict[str, Any] = {}

    def fake_post(url: str, json: dict, headers: dict, timeout: float) -> _FakeResponse:
        sent.update(url=url, json=json, headers=headers)
        return _FakeResponse({"id": "n-1"})

    monkeypatch.setattr(push.requests, "post", fake_post)
    body = push.send_push("⚽ New Match Announced!", "VS X", url="https://club.test/fixtures/1", data={"match_id": 1})

    assert body == {"id": "n-1"}
    assert sent["url"] == push.ONESIGNAL_URL
    assert sent["headers"]["Authorization"] == "Basic rest-key"
    assert sent["json"]["app_id"] == "app-1"
    assert sent["json"]["included_segments"] == ["Total Subscriptions"]
    assert sent["json"]["headings"] == {"en": "⚽ New Match Announced!"}
    assert sent["json"]["url"] == "https://club.test/fixtures/1"
    assert sent["json"]["data"] == {"match_id": 1}


def test_push_raises_on_error_status(push_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(push.requests, "post", lambda *a, **k: _FakeResponse({}, status_code=400, text="bad"))
    with pytest.raises(push.PushError):
        push.send_push("H", "M")


def test_push_raises_on_network_error(push_configured: None, monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*a: Any, **k: Any) -> None:
        raise requests.ConnectionError("down")

    monkeypatch.setattr(push.requests, "post", fail)
    with pytest.raises(push.PushError):
        push.send_push("H", "M")


# --- Storage ---------------------------------------------------------------


def test_upload_name_uses_kind_timestamp_and_extension() -> None:
    assert storage.upload_name("avatar", "me.JPG", now=1700000000.5) == "avatars/avatar-1700000000500.jpg"
    assert storage.upload_name("logo", "noext", now=1.0) == "avatars/logo-1000.png"


def test_absolute_url() -> None:
    assert storage.absolute_url("/media/avatars/a.png") == "https://club.test/media/avatars/a.png"
    assert storage.absolute_url("https://cdn.test/a.png") == "https://cdn.test/a.png"


def test_upload_public_file_returns_public_url() -> None:
    upload = SimpleUploadedFile("face.png", b"\x89PNG fake", content_type="image/png")
    url = storage.upload_public_file(upload, "avatar")
    assert url.startswith("https://club.test/media/avatars/avatar-")
    assert url.endswith(".png")
