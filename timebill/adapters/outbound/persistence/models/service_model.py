# timebill/adapters/outbound/persistence/models/service_model.py

"""
Modelos de serviço e tipo de serviço.

Um serviço pertence a exatamente um cliente e define o valor da hora
cobrada; o tipo de serviço é um rótulo opcional usado no faturamento.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from timebill.adapters.outbound.persistence.models.base_model import Base


class ServiceTypeModel(Base):
    __tablename__ = "service_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True, nullable=False, index=True)
    description = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<ServiceTypeModel(code={self.code})>"


class ServiceModel(Base):
    """
    Modelo que representa um serviço faturável.

    Attributes:
        id: Identificador único do serviço
        code: Código do serviço (único)
        client_id: Cliente dono do serviço
        description: Descrição (usada como nome do projeto no faturamento)
        hourly_rate: Valor da hora, com duas casas decimais
        service_type_id: Tipo de serviço (opcional)
    """
    __tablename__ = "services"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True, nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    description = Column(String, nullable=False)
    hourly_rate = Column(Numeric(10, 2), nullable=False)
    service_type_id = Column(Integer, ForeignKey("service_types.id"), nullable=True)

    def __repr__(self) -> str:
        return f"<ServiceModel(code={self.code}, hourly_rate={self.hourly_rate})>"
