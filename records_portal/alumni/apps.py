"""Alumni app configuration."""

from django.apps import AppConfig


class AlumniConfig(AppConfig):
    """Configuration for the alumni app."""

    name = "records_portal.alumni"
    verbose_name = "Alumni"
