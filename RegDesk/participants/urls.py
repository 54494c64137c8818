from django.urls import path

from participants import views

app_name = "participants"

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("participants/partial", views.participants_partial, name="partial"),
    path("participants/detail", views.participant_detail, name="detail"),
    path("participants/approve", views.participant_approve, name="approve"),
    path("participants/reject", views.participant_reject, name="reject"),
]
