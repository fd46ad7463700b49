# file: fanclub_manager/settings.py
"""Django settings for the ``fanclub_manager`` project.

Every deployment-specific value is read from the environment so the same
module serves local development, tests and the hosted deployment:

* ``DATABASE_*`` points the ORM at the hosted Postgres instance; without
  ``DATABASE_NAME`` a local SQLite file is used.
* ``FANCLUB_*`` carries club identity and the admin e-mail.
* ``GOOGLE_OAUTH_*`` and ``ONESIGNAL_*`` hold third-party credentials. They
  stay server-side and never reach templates.
"""

from __future__ import annotations

import os
from pathlib import Path


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.environ.get(name, default).split(",") if item.strip()]


BASE_DIR = Path(__file__).resolve().parent.parent

# --- Core ------------------------------------------------------------------

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key-change-me")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = _env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver")

INSTALLED_APPS = [
    "jet.dashboard",
    "jet",
    "nested_admin",
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "fanclub_app.apps.FanclubAppConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "fanclub_manager.urls"
WSGI_APPLICATION = "fanclub_manager.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
                "fanclub_app.context.club",
            ],
        },
    },
]

# --- Database --------------------------------------------------------------

if os.environ.get("DATABASE_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": os.environ["DATABASE_NAME"],
            "USER": os.environ.get("DATABASE_USER", "postgres"),
            "PASSWORD": os.environ.get("DATABASE_PASSWORD", ""),
            "HOST": os.environ.get("DATABASE_HOST", "localhost"),
            "PORT": os.environ.get("DATABASE_PORT", "5432"),
            "OPTIONS": {"sslmode": os.environ.get("DATABASE_SSLMODE", "require")},
        }
    }
else:
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# --- Auth ------------------------------------------------------------------

AUTHENTICATION_BACKENDS = [
    "fanclub_app.auth_backends.WhitelistEmailBackend",
    "django.contrib.auth.backends.ModelBackend",
]

LOGIN_URL = "site:login"
LOGIN_REDIRECT_URL = "site:home"
LOGOUT_REDIRECT_URL = "site:home"

# --- i18n / static / media -------------------------------------------------

LANGUAGE_CODE = "en-us"
TIME_ZONE = os.environ.get("DJANGO_TIME_ZONE", "Asia/Ho_Chi_Minh")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
MEDIA_URL = os.environ.get("DJANGO_MEDIA_URL", "/media/")
MEDIA_ROOT = BASE_DIR / "media"

# --- Club ------------------------------------------------------------------

FANCLUB_ADMIN_EMAIL = os.environ.get("FANCLUB_ADMIN_EMAIL", "")
TEAM_NAME = os.environ.get("FANCLUB_TEAM_NAME", "RealFake FC")
CURRENT_SEASON = int(os.environ.get("FANCLUB_CURRENT_SEASON", "2026"))
DEFAULT_STADIUM = os.environ.get("FANCLUB_DEFAULT_STADIUM", "Sân bóng La Thành")
SITE_URL = os.environ.get("FANCLUB_SITE_URL", "http://localhost:8000").rstrip("/")
UPLOAD_PREFIX = "avatars"

# --- Third-party services --------------------------------------------------

GOOGLE_OAUTH_CLIENT_ID = os.environ.get("GOOGLE_OAUTH_CLIENT_ID", "")
GOOGLE_OAUTH_CLIENT_SECRET = os.environ.get("GOOGLE_OAUTH_CLIENT_SECRET", "")

ONESIGNAL_APP_ID = os.environ.get("ONESIGNAL_APP_ID", "")
ONESIGNAL_API_KEY = os.environ.get("ONESIGNAL_API_KEY", "")
ONESIGNAL_SEGMENTS = _env_list("ONESIGNAL_SEGMENTS", "Total Subscriptions")

HTTP_TIMEOUT = float(os.environ.get("FANCLUB_HTTP_TIMEOUT", "10"))

# --- Admin (Django JET) ----------------------------------------------------

JET_INDEX_DASHBOARD = "fanclub_app.dashboard.CustomIndexDashboard"
JET_APP_INDEX_DASHBOARD = "fanclub_app.dashboard.CustomAppIndexDashboard"
JET_SIDE_MENU_COMPACT = True

# --- Logging ---------------------------------------------------------------

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "fanclub_app": {
            "handlers": ["console"],
            "level": os.environ.get("FANCLUB_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
