from records_portal.advisors.schemas.advisors import AdvisorFormSchema
from records_portal.advisors.schemas.advisors import AdvisorListSchema
from records_portal.advisors.schemas.advisors import AdvisorSchema

__all__ = ["AdvisorSchema", "AdvisorListSchema", "AdvisorFormSchema"]
