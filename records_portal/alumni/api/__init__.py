"""
Alumni API controllers.
"""

from records_portal.alumni.api.alumni import AlumniController

__all__ = ["AlumniController"]
