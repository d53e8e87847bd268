# timebill/adapters/inbound/api/v1/endpoints/consultant_endpoint.py (async version)

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from timebill.adapters.inbound.api.deps import get_consultant_service
from timebill.application.dtos.consultant_dto import ConsultantCreate, ConsultantOutput, ConsultantUpdate
from timebill.application.use_cases import ConsultantService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[ConsultantOutput],
    summary="List Consultants - List all consultants",
)
async def list_consultants(service: ConsultantService = Depends(get_consultant_service)):
    return await service.list_all()


@router.get(
    "/{consultant_id}",
    response_model=ConsultantOutput,
    summary="Get Consultant - Get a consultant by ID",
)
async def get_consultant(
        consultant_id: int = Path(..., description="Consultant ID"),
        service: ConsultantService = Depends(get_consultant_service),
):
    return await service.get(consultant_id)


@router.post(
    "",
    response_model=ConsultantOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Consultant - Register a new consultant",
    description="Creates a consultant. The password is stored as a hash and never returned.",
)
async def create_consultant(
        data: ConsultantCreate,
        service: ConsultantService = Depends(get_consultant_service),
):
    return await service.create(data)


@router.put(
    "/{consultant_id}",
    response_model=ConsultantOutput,
    summary="Update Consultant - Partially update a consultant",
)
async def update_consultant(
        data: ConsultantUpdate,
        consultant_id: int = Path(..., description="Consultant ID"),
        service: ConsultantService = Depends(get_consultant_service),
):
    return await service.update(consultant_id, data)


@router.delete(
    "/{consultant_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Consultant - Remove a consultant",
)
async def delete_consultant(
        consultant_id: int = Path(..., description="Consultant ID"),
        service: ConsultantService = Depends(get_consultant_service),
):
    await service.delete(consultant_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
