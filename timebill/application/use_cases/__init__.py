# timebill/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

# Export service classes for easier imports
from timebill.application.use_cases.base_use_cases import BaseService
from timebill.application.use_cases.catalog_use_cases import (
    ClientService,
    ConsultantService,
    SectorService,
    ServiceCatalogService,
    ServiceTypeService,
)
from timebill.application.use_cases.auth_use_cases import AuthService
from timebill.application.use_cases.time_entry_use_cases import TimeEntryService
from timebill.application.use_cases.report_use_cases import ReportService

# Export all services
__all__ = [
    "BaseService",
    "ClientService",
    "ConsultantService",
    "SectorService",
    "ServiceCatalogService",
    "ServiceTypeService",
    "AuthService",
    "TimeEntryService",
    "ReportService",
]
