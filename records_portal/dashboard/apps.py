"""Dashboard app configuration."""

from django.apps import AppConfig


class DashboardConfig(AppConfig):
    """Configuration for the dashboard app."""

    name = "records_portal.dashboard"
    verbose_name = "Dashboard"
