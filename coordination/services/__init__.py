from coordination.services.event_service import EventService
from coordination.services.storage_center_service import StorageCenterService
from coordination.services.volunteer_service import VolunteerService

__all__ = ["EventService", "StorageCenterService", "VolunteerService"]
