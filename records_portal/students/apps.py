"""Students app configuration."""

from django.apps import AppConfig


class StudentsConfig(AppConfig):
    """Configuration for the students app."""

    name = "records_portal.students"
    verbose_name = "Students"
