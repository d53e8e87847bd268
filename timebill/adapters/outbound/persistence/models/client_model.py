# timebill/adapters/outbound/persistence/models/client_model.py

"""
Modelo de cliente da consultoria.

Este módulo define o modelo ClientModel, que representa uma empresa
atendida pelos consultores e para a qual as horas são faturadas.
"""

from sqlalchemy import Column, Integer, String
from timebill.adapters.outbound.persistence.models.base_model import Base


class ClientModel(Base):
    """
    Modelo que representa um cliente.

    Attributes:
        id: Identificador único do cliente
        code: Código público do cliente (único)
        name: Razão social ou nome fantasia
        cnpj: Identificador fiscal (único)
        email: Email de contato
    """
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    cnpj = Column(String, unique=True, nullable=False)
    email = Column(String, nullable=False)

    def __repr__(self) -> str:
        """Representação em string do objeto ClientModel."""
        return f"<ClientModel(code={self.code}, name={self.name})>"
