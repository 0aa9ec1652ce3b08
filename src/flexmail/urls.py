"""Flexmail URL configuration."""

from django.urls import path

from .views import SettingsView

app_name = "flexmail"

urlpatterns = [
    path("settings/", SettingsView.as_view(), name="settings"),
]
