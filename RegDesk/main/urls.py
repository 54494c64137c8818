# main/urls.py
from django.urls import include, path
from django.conf import settings
from django.contrib.staticfiles.urls import staticfiles_urlpatterns
from django.views.generic import RedirectView

from core.views import health

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="participants:dashboard", permanent=False), name="home"),
    path("health", health, name="health"),
    path("dashboard/", include("participants.urls")),
]

if settings.DEBUG:
    urlpatterns += staticfiles_urlpatterns()
