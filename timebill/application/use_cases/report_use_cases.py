# timebill/application/use_cases/report_use_cases.py (async version)

"""
Service for reports, dashboard statistics and billing.

Selects the entries from storage and hands them to the pure aggregations in
``timebill.domain.services.report_service``.
"""

import logging
from datetime import date
from typing import Iterable, List, Optional

from timebill.application.ports.inbound import IReportUseCase
from timebill.application.ports.outbound import ITimesheetStorage
from timebill.domain.models import TimeEntryDetailed, TimeEntryFilter
from timebill.domain.models.report_domain_model import BillingSummary, DashboardStats, ReportData
from timebill.domain.services.report_service import (
    build_billing_summary,
    build_dashboard_stats,
    build_report,
)

logger = logging.getLogger(__name__)


class ReportService(IReportUseCase):
    """
    Service for reporting.
    """

    def __init__(self, storage: ITimesheetStorage):
        self.storage = storage

    async def dashboard_stats(self, month: Optional[int] = None, year: Optional[int] = None) -> DashboardStats:
        """
        Stats for one calendar month.

        Missing month or year fall back to today's. Entries are selected by
        the ``YYYY-MM`` prefix of their date; the client count is global.
        """
        today = date.today()
        prefix = f"{year or today.year:04d}-{month or today.month:02d}"

        entries = await self.storage.time_entries.list_entries(TimeEntryFilter(date_prefix=prefix))
        total_clients = await self.storage.clients.count()

        logger.debug(f"Dashboard stats for {prefix}: {len(entries)} entries")
        return build_dashboard_stats(entries, total_clients)

    async def report(
            self,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[int] = None,
            consultant_id: Optional[int] = None,
    ) -> ReportData:
        filters = TimeEntryFilter(
            start_date=start_date,
            end_date=end_date,
            client_id=client_id,
            consultant_id=consultant_id,
        )
        entries = await self.storage.time_entries.list_detailed(filters)
        return build_report(entries)

    async def billing_entries(self, client_id: int, start_date: str, end_date: str) -> List[TimeEntryDetailed]:
        filters = TimeEntryFilter(start_date=start_date, end_date=end_date, client_id=client_id)
        return await self.storage.time_entries.list_detailed(filters)

    async def billing_summary(
            self,
            client_id: int,
            start_date: str,
            end_date: str,
            entry_ids: Optional[Iterable[int]] = None,
    ) -> BillingSummary:
        """
        Summarize the entries selected for billing.

        ``entry_ids`` narrows the client's entries in the period; ids outside
        that set are ignored.
        """
        filters = TimeEntryFilter(
            start_date=start_date,
            end_date=end_date,
            client_id=client_id,
            entry_ids=set(entry_ids) if entry_ids is not None else None,
        )
        entries = await self.storage.time_entries.list_detailed(filters)
        logger.info(f"Billing summary for client {client_id}: {len(entries)} entries")
        return build_billing_summary(entries)
