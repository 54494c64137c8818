from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest, JsonResponse

from core.mongo import health_check


def health(request: HttpRequest):
    mongo_ok = health_check()
    return JsonResponse(
        {
            "status": "ok" if mongo_ok else "degraded",
            "mongo_ok": mongo_ok,
            "version": getattr(settings, "APP_VERSION", "0.0.0"),
        },
        status=200 if mongo_ok else 503,
    )
