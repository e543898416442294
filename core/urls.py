"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.report_index, name="report_index"),
    path("reports/<str:name>/", views.report_detail, name="report_detail"),
]
