"""
Project API controllers.
"""

from records_portal.projects.api.projects import ProjectController

__all__ = ["ProjectController"]
