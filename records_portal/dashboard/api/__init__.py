"""
Dashboard API controllers.
"""

from records_portal.dashboard.api.dashboard import DashboardController

__all__ = ["DashboardController"]
