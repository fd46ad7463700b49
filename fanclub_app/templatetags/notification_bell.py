# file: fanclub_app/templatetags/notification_bell.py
"""Header notification bell.

Usage in templates:
    {% load notification_bell %}
    {% notification_bell %}

Requires ``request`` in the context (read state is kept in the session).
"""
from __future__ import annotations

from typing import Any

from django import template

from fanclub_app.services.notifications import bell_state

register = template.Library()


@register.inclusion_tag("site/_partials/notification_bell.html", takes_context=True)
def notification_bell(context: dict[str, Any]) -> dict[str, Any]:
    request = context.get("request")
    if request is None:
        return {"notifications": [], "unread_count": 0, "request": None}
    state = bell_state(request.session)
    state["request"] = request
    return state
