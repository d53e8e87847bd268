# timebill/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from timebill.application.dtos.time_entry_dto import TimeEntryCreate, TimeEntryUpdate
from timebill.domain.models import TimeEntry, TimeEntryDetailed
from timebill.domain.models.report_domain_model import BillingSummary, DashboardStats, ReportData


class ITimeEntryUseCase(ABC):
    """Interface for time entry use cases."""

    @abstractmethod
    async def list_entries(self, month: Optional[int] = None, year: Optional[int] = None) -> List[TimeEntryDetailed]:
        """List detailed time entries, optionally for one month."""
        pass

    @abstractmethod
    async def list_filtered(
            self,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[int] = None,
            consultant_id: Optional[int] = None,
    ) -> List[TimeEntryDetailed]:
        """List detailed time entries matching every given filter."""
        pass

    @abstractmethod
    async def get(self, entry_id: int) -> TimeEntry:
        """Get a time entry by ID."""
        pass

    @abstractmethod
    async def create(self, data: TimeEntryCreate) -> TimeEntry:
        """Create a time entry, computing its totals."""
        pass

    @abstractmethod
    async def update(self, entry_id: int, data: TimeEntryUpdate) -> TimeEntry:
        """Partially update a time entry, recomputing totals when needed."""
        pass

    @abstractmethod
    async def delete(self, entry_id: int) -> None:
        """Delete a time entry."""
        pass


class IReportUseCase(ABC):
    """Interface for reporting use cases."""

    @abstractmethod
    async def dashboard_stats(self, month: Optional[int] = None, year: Optional[int] = None) -> DashboardStats:
        """Stats for the given month (current month by default)."""
        pass

    @abstractmethod
    async def report(
            self,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[int] = None,
            consultant_id: Optional[int] = None,
    ) -> ReportData:
        """Totals and per-client breakdown over the filtered entries."""
        pass

    @abstractmethod
    async def billing_entries(self, client_id: int, start_date: str, end_date: str) -> List[TimeEntryDetailed]:
        """Entries of one client in a period, candidates for billing."""
        pass

    @abstractmethod
    async def billing_summary(
            self,
            client_id: int,
            start_date: str,
            end_date: str,
            entry_ids: Optional[Iterable[int]] = None,
    ) -> BillingSummary:
        """Totals and project/sector/service type groups over the selected entries."""
        pass
