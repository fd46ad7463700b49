# file: fanclub_app/site/views/notifications.py
"""Notification bell endpoints.

- ``GET  /notifications/`` – JSON list (10 newest) and unread count.
- ``POST /notifications/<id>/read/`` – mark one as read and follow its link.
- ``POST /notifications/read-all/`` – mark every listed one as read.

Read state lives in the visitor's session.
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views import View

from fanclub_app.models import Notification
from fanclub_app.services import notifications as bell
from fanclub_app.site.views.auth import _safe_next


class NotificationFeedView(View):
    def get(self, request: HttpRequest) -> JsonResponse:
        state = bell.bell_state(request.session)
        for item in state["notifications"]:
            item["created_at"] = item["created_at"].isoformat()
        return JsonResponse(state)


class NotificationReadView(View):
    def post(self, request: HttpRequest, pk: int) -> HttpResponse:
        notification = get_object_or_404(Notification, pk=pk)
        bell.mark_read(request.session, notification.pk)
        if _wants_json(request):
            return JsonResponse({"ok": True, "id": notification.pk})
        return redirect(_safe_next(request, notification.link or request.POST.get("next")))


class NotificationReadAllView(View):
    def post(self, request: HttpRequest) -> HttpResponse:
        bell.mark_all_read(request.session)
        if _wants_json(request):
            return JsonResponse({"ok": True})
        return redirect(_safe_next(request, request.POST.get("next")))


def _wants_json(request: HttpRequest) -> bool:
    return "application/json" in request.headers.get("Accept", "")
