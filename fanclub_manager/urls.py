# file: fanclub_manager/urls.py
"""Project URL configuration for ``fanclub_manager``.

Routes:
* Django JET (admin skin & dashboard) and ``nested_admin`` helpers.
* ``/admin/login/`` is served by the site's admin gate, so the admin console
  never shows Django's password form: anonymous visitors go to the Google
  login page and signed-in non-admins get the Access Denied page.
* Django admin (the club's admin console) under ``/admin/``.
* Public site at root (``fanclub_app.site.urls``).
* Media files served by Django only when ``DEBUG`` is ``True``.
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import URLPattern, URLResolver, include, path

from fanclub_app.site.views.auth import AdminGateView

# --- URL patterns ----------------------------------------------------------

urlpatterns: list[URLPattern | URLResolver] = [
    path("jet/", include("jet.urls", "jet")),
    path("jet/dashboard/", include("jet.dashboard.urls", "jet-dashboard")),
    path("_nested_admin/", include("nested_admin.urls")),
    path("admin/login/", AdminGateView.as_view(), name="admin_gate"),
    path("admin/", admin.site.urls),
    path("", include("fanclub_app.site.urls")),  # public site
]

# Media files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
