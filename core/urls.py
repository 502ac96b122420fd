"""URL configuration for the demo views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.profile, name="profile"),
]
