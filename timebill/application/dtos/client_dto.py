# timebill/application/dtos/client_dto.py

"""
Schemas para dados de clientes da consultoria.

Este módulo define os dtos Pydantic para validação e serialização
dos clientes atendidos (empresas para as quais as horas são faturadas).
"""

from typing import Optional

from pydantic import EmailStr, Field

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.shared.utils.input_validation import Code


class ClientBase(CustomBaseModel):
    """
    Schema base para dados de cliente.

    Contém os atributos comuns a todos os dtos de cliente.
    """
    code: Code = Field(..., description="Código único do cliente")
    name: str = Field(..., min_length=1, description="Razão social ou nome fantasia")
    cnpj: str = Field(..., min_length=1, description="CNPJ do cliente. Deve ser único.")
    email: EmailStr = Field(..., description="Email de contato do cliente")


class ClientCreate(ClientBase):
    """Schema para criação de um novo cliente."""


class ClientUpdate(CustomBaseModel):
    """
    Schema para atualização parcial de um cliente.

    Apenas os campos enviados são alterados.
    """
    code: Optional[Code] = Field(None, description="Código único do cliente")
    name: Optional[str] = Field(None, min_length=1, description="Razão social ou nome fantasia")
    cnpj: Optional[str] = Field(None, min_length=1, description="CNPJ do cliente")
    email: Optional[EmailStr] = Field(None, description="Email de contato do cliente")


class ClientOutput(CustomBaseModel):
    """
    Schema para retorno de dados de cliente.
    """
    id: int = Field(..., description="Identificador do cliente")
    code: str
    name: str
    cnpj: str
    email: str
