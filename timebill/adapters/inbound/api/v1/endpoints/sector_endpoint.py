# timebill/adapters/inbound/api/v1/endpoints/sector_endpoint.py (async version)

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from timebill.adapters.inbound.api.deps import get_sector_service
from timebill.application.dtos.service_dto import SectorCreate, SectorOutput, SectorUpdate
from timebill.application.use_cases import SectorService

router = APIRouter()


@router.get("", response_model=List[SectorOutput], summary="List Sectors")
async def list_sectors(service: SectorService = Depends(get_sector_service)):
    return await service.list_all()


@router.get(
    "/by-client/{client_id}",
    response_model=List[SectorOutput],
    summary="List Client Sectors - Sectors that belong to one client",
)
async def list_sectors_by_client(
        client_id: int = Path(..., description="Client ID"),
        service: SectorService = Depends(get_sector_service),
):
    return await service.list_by_client(client_id)


@router.get("/{sector_id}", response_model=SectorOutput, summary="Get Sector")
async def get_sector(
        sector_id: int = Path(..., description="Sector ID"),
        service: SectorService = Depends(get_sector_service),
):
    return await service.get(sector_id)


@router.post(
    "",
    response_model=SectorOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Sector",
)
async def create_sector(
        data: SectorCreate,
        service: SectorService = Depends(get_sector_service),
):
    return await service.create(data)


@router.put("/{sector_id}", response_model=SectorOutput, summary="Update Sector")
async def update_sector(
        data: SectorUpdate,
        sector_id: int = Path(..., description="Sector ID"),
        service: SectorService = Depends(get_sector_service),
):
    return await service.update(sector_id, data)


@router.delete("/{sector_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete Sector")
async def delete_sector(
        sector_id: int = Path(..., description="Sector ID"),
        service: SectorService = Depends(get_sector_service),
):
    await service.delete(sector_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
