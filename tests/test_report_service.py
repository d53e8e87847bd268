"""Tests for the report, billing and dashboard aggregations."""

from decimal import Decimal

from timebill.domain.models import (
    Client,
    Consultant,
    Sector,
    Service,
    ServiceType,
    TimeEntry,
    TimeEntryDetailed,
)
from timebill.domain.services.report_service import (
    NO_SECTOR_LABEL,
    NO_SERVICE_TYPE_LABEL,
    build_billing_summary,
    build_dashboard_stats,
    build_report,
    group_for_billing,
)

ANA = Consultant(id=1, code="ANA", name="Ana", password="hash")
BRUNO = Consultant(id=2, code="BRU", name="Bruno", password="hash")
ACME = Client(id=1, code="C001", name="Acme", cnpj="1", email="acme@example.com")
GLOBEX = Client(id=2, code="C002", name="Globex", cnpj="2", email="globex@example.com")
INITECH = Client(id=3, code="C003", name="Initech", cnpj="3", email="initech@example.com")
DEV = ServiceType(id=1, code="DEV", description="Desenvolvimento")
TI = Sector(id=1, code="TI", description="Tecnologia", client_id=1)


def service_for(client: Client, description: str = "Portal", service_type_id=None) -> Service:
    return Service(
        id=client.id,
        code=f"S{client.id}",
        client_id=client.id,
        description=description,
        hourly_rate=Decimal("100.00"),
        service_type_id=service_type_id,
    )


def detailed(
        entry_id: int,
        client: Client,
        value: str,
        hours: str = "1.00",
        consultant: Consultant = ANA,
        date: str = "2024-03-10",
        service: Service = None,
        service_type: ServiceType = None,
        sector: Sector = None,
) -> TimeEntryDetailed:
    service = service or service_for(client)
    entry = TimeEntry(
        id=entry_id,
        date=date,
        consultant_id=consultant.id,
        client_id=client.id,
        service_id=service.id,
        start_time="09:00",
        end_time="10:00",
        total_hours=Decimal(hours),
        total_value=Decimal(value),
        sector_id=sector.id if sector else None,
    )
    return TimeEntryDetailed(
        entry=entry,
        consultant=consultant,
        client=client,
        service=service,
        service_type=service_type,
        sector=sector,
    )


class TestBuildReport:
    """Tests for the per-client report."""

    def test_single_client_accumulates(self):
        entries = [
            detailed(1, ACME, "100.00"),
            detailed(2, ACME, "300.00"),
            detailed(3, ACME, "200.00"),
        ]

        report = build_report(entries)

        assert report.total_entries == 3
        assert report.total_clients == 1
        assert report.total_value == Decimal("600.00")
        assert report.total_hours == Decimal("3.00")
        assert len(report.client_breakdown) == 1
        item = report.client_breakdown[0]
        assert (item.client_name, item.entries, item.value) == ("Acme", 3, Decimal("600.00"))

    def test_breakdown_sorted_by_value_descending(self):
        entries = [
            detailed(1, ACME, "100.00"),
            detailed(2, GLOBEX, "500.00"),
            detailed(3, INITECH, "250.00"),
        ]

        report = build_report(entries)

        assert [i.client_name for i in report.client_breakdown] == ["Globex", "Initech", "Acme"]

    def test_ties_keep_first_seen_order(self):
        entries = [
            detailed(1, INITECH, "100.00"),
            detailed(2, ACME, "100.00"),
            detailed(3, GLOBEX, "100.00"),
        ]

        report = build_report(entries)

        assert [i.client_name for i in report.client_breakdown] == ["Initech", "Acme", "Globex"]

    def test_breakdown_sums_match_totals(self):
        entries = [
            detailed(1, ACME, "123.45", hours="1.25"),
            detailed(2, GLOBEX, "10.10", hours="0.10"),
            detailed(3, ACME, "0.55", hours="2.00"),
        ]

        report = build_report(entries)

        assert sum(i.value for i in report.client_breakdown) == report.total_value
        assert sum(i.hours for i in report.client_breakdown) == report.total_hours
        assert sum(i.entries for i in report.client_breakdown) == report.total_entries

    def test_empty_report(self):
        report = build_report([])

        assert report.total_entries == 0
        assert report.total_clients == 0
        assert report.total_value == Decimal("0")
        assert report.client_breakdown == []


class TestBillingGroups:
    """Tests for grouping by project, sector and service type."""

    def test_missing_sector_and_type_use_labels(self):
        groups = group_for_billing([detailed(1, ACME, "100.00")])

        assert len(groups) == 1
        assert groups[0].project == "Portal"
        assert groups[0].sector == NO_SECTOR_LABEL
        assert groups[0].service_type == NO_SERVICE_TYPE_LABEL

    def test_groups_by_labels_in_first_seen_order(self):
        typed = service_for(ACME, "Portal", service_type_id=DEV.id)
        entries = [
            detailed(1, ACME, "100.00", service=typed, service_type=DEV, sector=TI),
            detailed(2, ACME, "50.00"),
            detailed(3, ACME, "25.00", service=typed, service_type=DEV, sector=TI),
        ]

        groups = group_for_billing(entries)

        assert [(g.sector, g.service_type) for g in groups] == [
            ("Tecnologia", "Desenvolvimento"),
            (NO_SECTOR_LABEL, NO_SERVICE_TYPE_LABEL),
        ]
        assert groups[0].entries == 2
        assert groups[0].value == Decimal("125.00")

    def test_summary_totals(self):
        entries = [
            detailed(1, ACME, "100.00", hours="1.00"),
            detailed(2, ACME, "50.00", hours="0.50", service=service_for(ACME, "Suporte")),
        ]

        summary = build_billing_summary(entries)

        assert summary.total_entries == 2
        assert summary.total_hours == Decimal("1.50")
        assert summary.total_value == Decimal("150.00")
        assert [g.project for g in summary.groups] == ["Portal", "Suporte"]


class TestDashboardStats:
    """Tests for the monthly dashboard."""

    def test_counts_distinct_consultants(self):
        entries = [
            detailed(1, ACME, "100.00", consultant=ANA).entry,
            detailed(2, ACME, "200.00", consultant=ANA).entry,
            detailed(3, GLOBEX, "50.00", hours="0.50", consultant=BRUNO).entry,
        ]

        stats = build_dashboard_stats(entries, total_clients=5)

        assert stats.total_clients == 5
        assert stats.active_consultants == 2
        assert stats.monthly_hours == Decimal("2.50")
        assert stats.monthly_revenue == Decimal("350.00")

    def test_empty_month(self):
        stats = build_dashboard_stats([], total_clients=3)

        assert stats.total_clients == 3
        assert stats.active_consultants == 0
        assert stats.monthly_hours == Decimal("0")
