# timebill/application/dtos/consultant_dto.py

"""
Schemas para dados de consultores.

Este módulo define os dtos Pydantic para cadastro, login e
retorno de consultores. A senha nunca aparece nos dtos de saída.
"""

from typing import Optional

from pydantic import Field

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.shared.utils.input_validation import Code


class ConsultantCreate(CustomBaseModel):
    """
    Schema para criação de um novo consultor.
    """
    code: Code = Field(..., description="Código único do consultor, usado no login")
    name: str = Field(..., min_length=1, description="Nome do consultor")
    password: str = Field(..., min_length=1, description="Senha de acesso")


class ConsultantUpdate(CustomBaseModel):
    """
    Schema para atualização parcial de um consultor.

    Se ``password`` for enviada, ela é armazenada novamente como hash.
    """
    code: Optional[Code] = Field(None, description="Código único do consultor")
    name: Optional[str] = Field(None, min_length=1, description="Nome do consultor")
    password: Optional[str] = Field(None, min_length=1, description="Nova senha de acesso")


class ConsultantOutput(CustomBaseModel):
    """
    Schema para retorno de dados de consultor sem expor a senha.
    """
    id: int = Field(..., description="Identificador do consultor")
    code: str
    name: str


########################################################################
# Login
########################################################################
class LoginInput(CustomBaseModel):
    """Credenciais de login do consultor."""
    code: str = Field(..., min_length=1, description="Código do consultor")
    password: str = Field(..., min_length=1, description="Senha do consultor")


class LoginOutput(CustomBaseModel):
    """
    Resposta de login bem-sucedido.

    Contém o consultor autenticado e o token JWT de acesso.
    """
    consultant: ConsultantOutput
    message: str = "Login realizado com sucesso"
    access_token: str = Field(..., description="Token JWT de acesso")
    token_type: str = "bearer"
