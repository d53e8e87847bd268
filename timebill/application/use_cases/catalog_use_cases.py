# timebill/application/use_cases/catalog_use_cases.py (async version)

"""
Serviços de cadastro: clientes, consultores, tipos de serviço,
serviços e setores.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from timebill.adapters.outbound.security.auth_consultant_manager import ConsultantAuthManager
from timebill.application.ports.outbound import (
    IClientRepository,
    IConsultantRepository,
    ISectorRepository,
    IServiceRepository,
    IServiceTypeRepository,
)
from timebill.application.use_cases.base_use_cases import BaseService, require
from timebill.domain.models import Client, Consultant, Sector, Service, ServiceType, ServiceWithClient

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


class ClientService(BaseService[Client]):
    entity_name = "Cliente"
    unique_fields = ("code", "cnpj")

    @property
    def repository(self) -> IClientRepository:
        return self.storage.clients


class ConsultantService(BaseService[Consultant]):
    """
    Cadastro de consultores.

    A senha recebida é sempre armazenada como hash.
    """

    entity_name = "Consultor"

    @property
    def repository(self) -> IConsultantRepository:
        return self.storage.consultants

    async def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        data["password"] = await ConsultantAuthManager.hash_password(data["password"])
        return data

    async def _prepare_update(self, current: Consultant, patch: Dict[str, Any]) -> Dict[str, Any]:
        if "password" in patch:
            patch["password"] = await ConsultantAuthManager.hash_password(patch["password"])
        return patch


class ServiceTypeService(BaseService[ServiceType]):
    entity_name = "Tipo de serviço"

    @property
    def repository(self) -> IServiceTypeRepository:
        return self.storage.service_types


class ServiceCatalogService(BaseService[Service]):
    """
    Cadastro de serviços prestados a cada cliente.

    O valor por hora é arredondado para duas casas decimais. Alterar o valor
    não recalcula lançamentos já gravados.
    """

    entity_name = "Serviço"

    @property
    def repository(self) -> IServiceRepository:
        return self.storage.services

    async def _check_references(self, data: Dict[str, Any]) -> None:
        if data.get("client_id") is not None:
            await require(self.storage.clients, data["client_id"], "Cliente")
        if data.get("service_type_id") is not None:
            await require(self.storage.service_types, data["service_type_id"], "Tipo de serviço")

    async def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        await self._check_references(data)
        data["hourly_rate"] = data["hourly_rate"].quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        return data

    async def _prepare_update(self, current: Service, patch: Dict[str, Any]) -> Dict[str, Any]:
        await self._check_references(patch)
        if "hourly_rate" in patch:
            patch["hourly_rate"] = patch["hourly_rate"].quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
        return patch

    async def list_with_client(self) -> List[ServiceWithClient]:
        return await self.repository.list_with_client()

    async def list_by_client(self, client_id: int) -> List[Service]:
        return await self.repository.list(client_id=client_id)


class SectorService(BaseService[Sector]):
    entity_name = "Setor"

    @property
    def repository(self) -> ISectorRepository:
        return self.storage.sectors

    async def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("client_id") is not None:
            await require(self.storage.clients, data["client_id"], "Cliente")
        return data

    async def _prepare_update(self, current: Sector, patch: Dict[str, Any]) -> Dict[str, Any]:
        return await self._prepare_create(patch)

    async def list_by_client(self, client_id: int) -> List[Sector]:
        return await self.repository.list(client_id=client_id)
