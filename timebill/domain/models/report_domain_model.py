# timebill/domain/models/report_domain_model.py

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class ClientBreakdownItem:
    """Hours and value accumulated for one client."""
    client_id: int
    client_name: str
    hours: Decimal = Decimal("0")
    value: Decimal = Decimal("0")
    entries: int = 0


@dataclass
class ReportData:
    total_hours: Decimal
    total_value: Decimal
    total_entries: int
    total_clients: int
    client_breakdown: List[ClientBreakdownItem] = field(default_factory=list)


@dataclass
class BillingGroup:
    """Hours and value accumulated for one (project, sector, service type) tuple."""
    project: str
    sector: str
    service_type: str
    hours: Decimal = Decimal("0")
    value: Decimal = Decimal("0")
    entries: int = 0


@dataclass
class BillingSummary:
    total_hours: Decimal
    total_value: Decimal
    total_entries: int
    groups: List[BillingGroup] = field(default_factory=list)


@dataclass
class DashboardStats:
    total_clients: int
    monthly_hours: Decimal
    monthly_revenue: Decimal
    active_consultants: int
