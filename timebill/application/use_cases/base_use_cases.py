# timebill/application/use_cases/base_use_cases.py (async version)

"""
Classe base para os serviços de cadastro da aplicação.

Este módulo define a estrutura básica dos cadastros (clientes, consultores,
serviços, tipos de serviço e setores): busca por ID com 404, verificação de
campos únicos antes de gravar e as operações CRUD sobre o repositório.
"""

from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar
import logging

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.application.ports.outbound import IRepository, ITimesheetStorage
from timebill.domain.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)

# Configurar logger
logger = logging.getLogger(__name__)

# Define tipos genéricos para uso nas classes derivadas
DomainType = TypeVar("DomainType")


async def require(repository: IRepository, entity_id: Any, entity_name: str):
    """
    Busca uma entidade pelo ID.

    Raises:
        ResourceNotFoundException: Se a entidade não for encontrada
    """
    entity = await repository.get(entity_id)
    if entity is None:
        error_msg = f"{entity_name} não encontrado"
        logger.warning(f"{error_msg}: ID {entity_id}")
        raise ResourceNotFoundException(detail=error_msg, resource_id=entity_id)
    return entity


class BaseService(Generic[DomainType]):
    """
    Classe base para serviços de cadastro, fornecendo operações CRUD comuns.

    Subclasses definem o repositório usado, o nome da entidade para as
    mensagens e os campos que devem ser únicos.
    """

    entity_name: str = "Registro"
    unique_fields: Tuple[str, ...] = ("code",)

    def __init__(self, storage: ITimesheetStorage):
        """
        Inicializa o serviço com o storage da unidade de trabalho atual.

        Args:
            storage: Storage aberto para a requisição
        """
        self.storage = storage

    @property
    def repository(self) -> IRepository[DomainType]:
        raise NotImplementedError

    async def _get_by_id(self, entity_id: Any) -> DomainType:
        return await require(self.repository, entity_id, self.entity_name)

    async def _check_unique(self, data: Dict[str, Any], exclude_id: Optional[int] = None) -> None:
        """
        Verifica se algum campo único já está em uso por outro registro.

        Args:
            data: Campos a gravar
            exclude_id: ID do registro sendo atualizado (ignorado na busca)

        Raises:
            ResourceAlreadyExistsException: Se o valor já existir
        """
        for field in self.unique_fields:
            if field not in data:
                continue
            existing = await self.repository.get_by_field(field, data[field])
            if existing is not None and existing.id != exclude_id:
                logger.warning(f"{self.entity_name} com {field}={data[field]!r} já existe")
                raise ResourceAlreadyExistsException(
                    detail=f"{self.entity_name} com este {field} já existe",
                    field=field,
                )

    async def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Ponto de extensão para validar/transformar os dados de criação."""
        return data

    async def _prepare_update(self, current: DomainType, patch: Dict[str, Any]) -> Dict[str, Any]:
        """Ponto de extensão para validar/transformar um patch."""
        return patch

    async def list_all(self, **filters) -> List[DomainType]:
        return await self.repository.list(**filters)

    async def get(self, entity_id: int) -> DomainType:
        return await self._get_by_id(entity_id)

    async def create(self, data: CustomBaseModel) -> DomainType:
        """
        Cria uma nova entidade.

        Raises:
            ResourceAlreadyExistsException: Se um campo único já estiver em uso
            ResourceNotFoundException: Se uma entidade referenciada não existir
        """
        payload = await self._prepare_create(data.model_dump())
        await self._check_unique(payload)

        entity = await self.repository.create(payload)
        logger.info(f"{self.entity_name} criado com sucesso: ID {entity.id}")
        return entity

    async def update(self, entity_id: int, data: CustomBaseModel) -> DomainType:
        """
        Atualiza parcialmente uma entidade existente.

        Raises:
            ResourceNotFoundException: Se a entidade não for encontrada
            ResourceAlreadyExistsException: Se a alteração conflitar com outro registro
        """
        current = await self._get_by_id(entity_id)
        patch = data.to_patch(nullable=getattr(data, "NULLABLE_FIELDS", ()))
        patch = await self._prepare_update(current, patch)
        await self._check_unique(patch, exclude_id=entity_id)

        entity = await self.repository.update(entity_id, patch)
        if entity is None:
            raise ResourceNotFoundException(detail=f"{self.entity_name} não encontrado", resource_id=entity_id)

        logger.info(f"{self.entity_name} atualizado com sucesso: ID {entity_id}")
        return entity

    async def delete(self, entity_id: int) -> None:
        """
        Remove uma entidade. Nada é removido em cascata.

        Raises:
            ResourceNotFoundException: Se a entidade não for encontrada
            ResourceInUseException: Se o banco recusar por haver referências
        """
        if not await self.repository.delete(entity_id):
            raise ResourceNotFoundException(detail=f"{self.entity_name} não encontrado", resource_id=entity_id)
        logger.info(f"{self.entity_name} excluído com sucesso: ID {entity_id}")
