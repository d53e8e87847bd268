# timebill/domain/services/__init__.py

from timebill.domain.services.time_calculation import (
    TimeCalculation,
    calculate_hours_and_value,
    parse_clock_time,
)
from timebill.domain.services.report_service import (
    NO_SECTOR_LABEL,
    NO_SERVICE_TYPE_LABEL,
    build_billing_summary,
    build_dashboard_stats,
    build_report,
    group_for_billing,
)

__all__ = [
    "TimeCalculation",
    "calculate_hours_and_value",
    "parse_clock_time",
    "NO_SECTOR_LABEL",
    "NO_SERVICE_TYPE_LABEL",
    "build_billing_summary",
    "build_dashboard_stats",
    "build_report",
    "group_for_billing",
]
