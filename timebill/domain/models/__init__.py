# timebill/domain/models/__init__.py

from timebill.domain.models.client_domain_model import Client
from timebill.domain.models.consultant_domain_model import Consultant
from timebill.domain.models.sector_domain_model import Sector
from timebill.domain.models.service_domain_model import Service, ServiceType, ServiceWithClient
from timebill.domain.models.time_entry_domain_model import (
    RECALCULATION_FIELDS,
    TimeEntry,
    TimeEntryDetailed,
    TimeEntryFilter,
)

__all__ = [
    "Client",
    "Consultant",
    "Sector",
    "Service",
    "ServiceType",
    "ServiceWithClient",
    "TimeEntry",
    "TimeEntryDetailed",
    "TimeEntryFilter",
    "RECALCULATION_FIELDS",
]
