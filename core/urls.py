"""URL configuration for gallery views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.gallery, name="gallery"),
    path("charts/time-sheet-bar/<slug:section>/select/", views.select_event, name="select_event"),
    path("charts/<slug:chart_id>/", views.chart_detail, name="chart_detail"),
]
