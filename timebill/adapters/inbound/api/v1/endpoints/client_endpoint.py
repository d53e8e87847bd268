# timebill/adapters/inbound/api/v1/endpoints/client_endpoint.py (async version)

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from timebill.adapters.inbound.api.deps import get_client_service
from timebill.application.dtos.client_dto import ClientCreate, ClientOutput, ClientUpdate
from timebill.application.use_cases import ClientService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=List[ClientOutput],
    summary="List Clients - List all clients",
)
async def list_clients(service: ClientService = Depends(get_client_service)):
    return await service.list_all()


@router.get(
    "/{client_id}",
    response_model=ClientOutput,
    summary="Get Client - Get a client by ID",
)
async def get_client(
        client_id: int = Path(..., description="Client ID"),
        service: ClientService = Depends(get_client_service),
):
    return await service.get(client_id)


@router.post(
    "",
    response_model=ClientOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Client - Register a new client",
    description="Creates a client. Code and CNPJ must be unique (400 otherwise).",
)
async def create_client(
        data: ClientCreate,
        service: ClientService = Depends(get_client_service),
):
    return await service.create(data)


@router.put(
    "/{client_id}",
    response_model=ClientOutput,
    summary="Update Client - Partially update a client",
)
async def update_client(
        data: ClientUpdate,
        client_id: int = Path(..., description="Client ID"),
        service: ClientService = Depends(get_client_service),
):
    return await service.update(client_id, data)


@router.delete(
    "/{client_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Client - Remove a client",
    description=(
        "Removes a client. On the database backend it fails with 409 while services or time "
        "entries still reference it; the memory backend removes it and leaves those references dangling."
    ),
)
async def delete_client(
        client_id: int = Path(..., description="Client ID"),
        service: ClientService = Depends(get_client_service),
):
    await service.delete(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
