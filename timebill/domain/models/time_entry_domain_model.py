# timebill/domain/models/time_entry_domain_model.py

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Collection, Optional

from timebill.domain.models.client_domain_model import Client
from timebill.domain.models.consultant_domain_model import Consultant
from timebill.domain.models.sector_domain_model import Sector
from timebill.domain.models.service_domain_model import Service, ServiceType

# Changing any of these fields invalidates total_hours / total_value
RECALCULATION_FIELDS = frozenset({
    "start_time",
    "end_time",
    "break_start_time",
    "break_end_time",
    "service_id",
})


@dataclass
class TimeEntry:
    """Domain model for one consultant work session."""
    id: int
    date: str  # YYYY-MM-DD
    consultant_id: int
    client_id: int
    service_id: int
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    total_hours: Decimal
    total_value: Decimal
    sector_id: Optional[int] = None
    break_start_time: Optional[str] = None
    break_end_time: Optional[str] = None
    description: Optional[str] = ""
    activity_completed: Optional[str] = None  # "sim" | "nao"
    delivery_forecast: Optional[str] = None
    actual_delivery: Optional[str] = None
    project: Optional[str] = None
    service_location: Optional[str] = None  # "presencial" | "remoto"


@dataclass
class TimeEntryDetailed:
    """A time entry joined with the records it references."""
    entry: TimeEntry
    consultant: Consultant
    client: Client
    service: Service
    service_type: Optional[ServiceType] = None
    sector: Optional[Sector] = None


@dataclass
class TimeEntryFilter:
    """
    Conjunctive filter over time entries. ``None`` means "no constraint".

    Dates are compared as ``YYYY-MM-DD`` strings, so the comparison is lexical
    and the range is inclusive on both ends.
    """
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    client_id: Optional[int] = None
    consultant_id: Optional[int] = None
    date_prefix: Optional[str] = None
    entry_ids: Optional[Collection[int]] = field(default=None)

    @classmethod
    def for_month(cls, year: int, month: int) -> "TimeEntryFilter":
        """Naive month range: always ends on day 31, whatever the month."""
        prefix = f"{year:04d}-{month:02d}"
        return cls(start_date=f"{prefix}-01", end_date=f"{prefix}-31")

    def matches(self, entry: TimeEntry) -> bool:
        if self.start_date is not None and entry.date < self.start_date:
            return False
        if self.end_date is not None and entry.date > self.end_date:
            return False
        if self.client_id is not None and entry.client_id != self.client_id:
            return False
        if self.consultant_id is not None and entry.consultant_id != self.consultant_id:
            return False
        if self.date_prefix is not None and not entry.date.startswith(self.date_prefix):
            return False
        if self.entry_ids is not None and entry.id not in self.entry_ids:
            return False
        return True
