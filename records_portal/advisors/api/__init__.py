"""
Advisor API controllers.
"""

from records_portal.advisors.api.advisors import AdvisorController

__all__ = ["AdvisorController"]
