# timebill/adapters/inbound/api/v1/endpoints/service_endpoint.py (async version)

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from timebill.adapters.inbound.api.deps import get_service_catalog
from timebill.application.dtos.service_dto import (
    ServiceCreate,
    ServiceOutput,
    ServiceUpdate,
    ServiceWithClientOutput,
)
from timebill.application.use_cases import ServiceCatalogService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[ServiceWithClientOutput],
    summary="List Services - List all services with their client",
    description="Services whose client no longer exists are left out.",
)
async def list_services(service: ServiceCatalogService = Depends(get_service_catalog)):
    items = await service.list_with_client()
    return [ServiceWithClientOutput.from_domain(item) for item in items]


@router.get(
    "/by-client/{client_id}",
    response_model=List[ServiceOutput],
    summary="List Client Services - Services offered to one client",
)
async def list_services_by_client(
        client_id: int = Path(..., description="Client ID"),
        service: ServiceCatalogService = Depends(get_service_catalog),
):
    return await service.list_by_client(client_id)


@router.get(
    "/{service_id}",
    response_model=ServiceOutput,
    summary="Get Service - Get a service by ID",
)
async def get_service(
        service_id: int = Path(..., description="Service ID"),
        service: ServiceCatalogService = Depends(get_service_catalog),
):
    return await service.get(service_id)


@router.post(
    "",
    response_model=ServiceOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Service - Register a service for a client",
)
async def create_service(
        data: ServiceCreate,
        service: ServiceCatalogService = Depends(get_service_catalog),
):
    return await service.create(data)


@router.put(
    "/{service_id}",
    response_model=ServiceOutput,
    summary="Update Service - Partially update a service",
    description="Changing the hourly rate does not recalculate existing time entries.",
)
async def update_service(
        data: ServiceUpdate,
        service_id: int = Path(..., description="Service ID"),
        service: ServiceCatalogService = Depends(get_service_catalog),
):
    return await service.update(service_id, data)


@router.delete(
    "/{service_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Service - Remove a service",
)
async def delete_service(
        service_id: int = Path(..., description="Service ID"),
        service: ServiceCatalogService = Depends(get_service_catalog),
):
    await service.delete(service_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
