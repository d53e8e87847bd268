# timebill/application/dtos/service_dto.py

"""
Schemas para serviços, tipos de serviço e setores.

Um serviço pertence a um cliente e define o valor cobrado por hora.
Tipos de serviço e setores são usados para agrupar o faturamento.
"""

from decimal import Decimal
from typing import ClassVar, Optional, Tuple

from pydantic import Field

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.application.dtos.client_dto import ClientOutput
from timebill.domain.models import ServiceWithClient
from timebill.shared.utils.input_validation import Code


########################################################################
# Tipos de serviço
########################################################################
class ServiceTypeCreate(CustomBaseModel):
    code: Code = Field(..., description="Código único do tipo de serviço")
    description: str = Field(..., min_length=1, description="Descrição do tipo de serviço")


class ServiceTypeUpdate(CustomBaseModel):
    code: Optional[Code] = None
    description: Optional[str] = Field(None, min_length=1)


class ServiceTypeOutput(CustomBaseModel):
    id: int
    code: str
    description: str


########################################################################
# Serviços
########################################################################
class ServiceCreate(CustomBaseModel):
    """
    Schema para criação de um serviço.

    ``hourlyRate`` aceita número ou texto decimal ("150.50") e é
    armazenado com duas casas decimais.
    """
    code: Code = Field(..., description="Código único do serviço")
    client_id: int = Field(..., description="Cliente dono do serviço")
    description: str = Field(..., min_length=1, description="Descrição do serviço")
    hourly_rate: Decimal = Field(..., ge=0, description="Valor cobrado por hora")
    service_type_id: Optional[int] = Field(None, description="Tipo de serviço (opcional)")


class ServiceUpdate(CustomBaseModel):
    """Schema para atualização parcial de um serviço."""
    code: Optional[Code] = None
    client_id: Optional[int] = None
    description: Optional[str] = Field(None, min_length=1)
    hourly_rate: Optional[Decimal] = Field(None, ge=0)
    service_type_id: Optional[int] = None

    NULLABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("service_type_id",)


class ServiceOutput(CustomBaseModel):
    id: int
    code: str
    client_id: int
    description: str
    hourly_rate: Decimal
    service_type_id: Optional[int] = None


class ServiceWithClientOutput(ServiceOutput):
    """Serviço acompanhado do cliente ao qual pertence."""
    client: ClientOutput

    @classmethod
    def from_domain(cls, item: ServiceWithClient) -> "ServiceWithClientOutput":
        service = ServiceOutput.model_validate(item.service)
        return cls(**service.model_dump(), client=ClientOutput.model_validate(item.client))


########################################################################
# Setores
########################################################################
class SectorCreate(CustomBaseModel):
    code: Code = Field(..., description="Código único do setor")
    description: str = Field(..., min_length=1, description="Descrição do setor")
    client_id: Optional[int] = Field(None, description="Cliente do setor (opcional)")


class SectorUpdate(CustomBaseModel):
    code: Optional[Code] = None
    description: Optional[str] = Field(None, min_length=1)
    client_id: Optional[int] = None

    NULLABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("client_id",)


class SectorOutput(CustomBaseModel):
    id: int
    code: str
    description: str
    client_id: Optional[int] = None
