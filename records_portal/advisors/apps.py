"""Advisors app configuration."""

from django.apps import AppConfig


class AdvisorsConfig(AppConfig):
    """Configuration for the advisors app."""

    name = "records_portal.advisors"
    verbose_name = "Advisors"
