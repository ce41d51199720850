"""
Student API controllers.
"""

from records_portal.students.api.students import StudentController

__all__ = ["StudentController"]
