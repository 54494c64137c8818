from __future__ import annotations

from django.conf import settings


def global_context(request):
    return {
        "app_version": getattr(settings, "APP_VERSION", "0.0.0"),
        "is_htmx": bool(getattr(request, "htmx", False)),
    }
