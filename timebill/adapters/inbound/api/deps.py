# timebill/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for storage access, use cases and authentication.
"""

import logging
from typing import AsyncIterator

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from timebill.adapters.configuration.config import Settings
from timebill.adapters.outbound.security.auth_consultant_manager import ConsultantAuthManager
from timebill.application.ports.outbound import IStorageProvider, ITimesheetStorage
from timebill.application.use_cases import (
    AuthService,
    ClientService,
    ConsultantService,
    ReportService,
    SectorService,
    ServiceCatalogService,
    ServiceTypeService,
    TimeEntryService,
)
from timebill.domain.exceptions import InvalidCredentialsException
from timebill.domain.models import Consultant

# Configure logger
logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


########################################################################
# Settings / Storage / Unit of Work
########################################################################

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage_provider(request: Request) -> IStorageProvider:
    return request.app.state.storage_provider


async def get_storage(
        provider: IStorageProvider = Depends(get_storage_provider),
) -> AsyncIterator[ITimesheetStorage]:
    """
    Open one unit of work for the request.

    Everything the request writes is committed when the endpoint returns and
    discarded if it raises.
    """
    async with provider.unit_of_work() as storage:
        yield storage


########################################################################
# Use cases
########################################################################

def get_client_service(storage: ITimesheetStorage = Depends(get_storage)) -> ClientService:
    return ClientService(storage)


def get_consultant_service(storage: ITimesheetStorage = Depends(get_storage)) -> ConsultantService:
    return ConsultantService(storage)


def get_service_catalog(storage: ITimesheetStorage = Depends(get_storage)) -> ServiceCatalogService:
    return ServiceCatalogService(storage)


def get_service_type_service(storage: ITimesheetStorage = Depends(get_storage)) -> ServiceTypeService:
    return ServiceTypeService(storage)


def get_sector_service(storage: ITimesheetStorage = Depends(get_storage)) -> SectorService:
    return SectorService(storage)


def get_time_entry_service(storage: ITimesheetStorage = Depends(get_storage)) -> TimeEntryService:
    return TimeEntryService(storage)


def get_report_service(storage: ITimesheetStorage = Depends(get_storage)) -> ReportService:
    return ReportService(storage)


def get_auth_service(
        storage: ITimesheetStorage = Depends(get_storage),
        settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(storage, ConsultantAuthManager(settings))


########################################################################
# Consultant Token Authentication
########################################################################

async def get_current_consultant(
        credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
        auth_service: AuthService = Depends(get_auth_service),
) -> Consultant:
    """
    Get the current consultant from the bearer token.

    Raises:
        InvalidCredentialsException: If the token is missing, invalid or expired
    """
    if credentials is None:
        logger.warning("Request without bearer token")
        raise InvalidCredentialsException(detail="Não autenticado")

    return await auth_service.get_current_consultant(credentials.credentials)
