# timebill/adapters/inbound/api/v1/endpoints/service_type_endpoint.py (async version)

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from timebill.adapters.inbound.api.deps import get_service_type_service
from timebill.application.dtos.service_dto import ServiceTypeCreate, ServiceTypeOutput, ServiceTypeUpdate
from timebill.application.use_cases import ServiceTypeService

router = APIRouter()


@router.get("", response_model=List[ServiceTypeOutput], summary="List Service Types")
async def list_service_types(service: ServiceTypeService = Depends(get_service_type_service)):
    return await service.list_all()


@router.get("/{service_type_id}", response_model=ServiceTypeOutput, summary="Get Service Type")
async def get_service_type(
        service_type_id: int = Path(..., description="Service type ID"),
        service: ServiceTypeService = Depends(get_service_type_service),
):
    return await service.get(service_type_id)


@router.post(
    "",
    response_model=ServiceTypeOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Service Type",
)
async def create_service_type(
        data: ServiceTypeCreate,
        service: ServiceTypeService = Depends(get_service_type_service),
):
    return await service.create(data)


@router.put("/{service_type_id}", response_model=ServiceTypeOutput, summary="Update Service Type")
async def update_service_type(
        data: ServiceTypeUpdate,
        service_type_id: int = Path(..., description="Service type ID"),
        service: ServiceTypeService = Depends(get_service_type_service),
):
    return await service.update(service_type_id, data)


@router.delete("/{service_type_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Service Type")
async def delete_service_type(
        service_type_id: int = Path(..., description="Service type ID"),
        service: ServiceTypeService = Depends(get_service_type_service),
):
    await service.delete(service_type_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
