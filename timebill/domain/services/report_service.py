# timebill/domain/services/report_service.py

"""
Aggregations over time entries: reports, billing groups and dashboard stats.

These are pure reductions over lists that the caller already filtered.
"""

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence, Tuple

from timebill.domain.models.report_domain_model import (
    BillingGroup,
    BillingSummary,
    ClientBreakdownItem,
    DashboardStats,
    ReportData,
)
from timebill.domain.models.time_entry_domain_model import TimeEntry, TimeEntryDetailed

NO_SECTOR_LABEL = "Sem Setor"
NO_SERVICE_TYPE_LABEL = "Sem Tipo"


def build_report(entries: Sequence[TimeEntryDetailed]) -> ReportData:
    """
    Sum hours/value over the entries and break them down per client.

    The breakdown is sorted by value, highest first. Clients with the same
    value keep the order in which they were first seen.
    """
    breakdown: Dict[int, ClientBreakdownItem] = {}
    total_hours = Decimal("0")
    total_value = Decimal("0")

    for detailed in entries:
        entry = detailed.entry
        total_hours += entry.total_hours
        total_value += entry.total_value

        item = breakdown.get(entry.client_id)
        if item is None:
            item = ClientBreakdownItem(client_id=entry.client_id, client_name=detailed.client.name)
            breakdown[entry.client_id] = item
        item.hours += entry.total_hours
        item.value += entry.total_value
        item.entries += 1

    return ReportData(
        total_hours=total_hours,
        total_value=total_value,
        total_entries=len(entries),
        total_clients=len(breakdown),
        client_breakdown=sorted(breakdown.values(), key=lambda i: i.value, reverse=True),
    )


def billing_key(detailed: TimeEntryDetailed) -> Tuple[str, str, str]:
    """(project, sector, service type) labels of an entry, with sentinels for absent ones."""
    sector = detailed.sector.description if detailed.sector else NO_SECTOR_LABEL
    service_type = detailed.service_type.description if detailed.service_type else NO_SERVICE_TYPE_LABEL
    return detailed.service.description, sector, service_type


def group_for_billing(entries: Iterable[TimeEntryDetailed]) -> List[BillingGroup]:
    """Group entries by project/sector/service type, in first-seen order."""
    groups: Dict[Tuple[str, str, str], BillingGroup] = {}

    for detailed in entries:
        key = billing_key(detailed)
        group = groups.get(key)
        if group is None:
            group = BillingGroup(project=key[0], sector=key[1], service_type=key[2])
            groups[key] = group
        group.hours += detailed.entry.total_hours
        group.value += detailed.entry.total_value
        group.entries += 1

    return list(groups.values())


def build_billing_summary(entries: Sequence[TimeEntryDetailed]) -> BillingSummary:
    return BillingSummary(
        total_hours=sum((d.entry.total_hours for d in entries), Decimal("0")),
        total_value=sum((d.entry.total_value for d in entries), Decimal("0")),
        total_entries=len(entries),
        groups=group_for_billing(entries),
    )


def build_dashboard_stats(month_entries: Sequence[TimeEntry], total_clients: int) -> DashboardStats:
    """
    Stats for the month the entries were selected for.

    ``total_clients`` is the overall number of clients and is not filtered
    by month.
    """
    return DashboardStats(
        total_clients=total_clients,
        monthly_hours=sum((e.total_hours for e in month_entries), Decimal("0")),
        monthly_revenue=sum((e.total_value for e in month_entries), Decimal("0")),
        active_consultants=len({e.consultant_id for e in month_entries}),
    )
