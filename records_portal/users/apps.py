"""Users app configuration."""

from django.apps import AppConfig


class UsersConfig(AppConfig):
    """Configuration for the users app."""

    name = "records_portal.users"
    verbose_name = "Users"
