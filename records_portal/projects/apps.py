"""Projects app configuration."""

from django.apps import AppConfig


class ProjectsConfig(AppConfig):
    """Configuration for the projects app."""

    name = "records_portal.projects"
    verbose_name = "Projects"
