# timebill/adapters/outbound/persistence/models/consultant_model.py

"""
Modelo de consultor.

O campo ``password`` guarda apenas o hash da senha.
"""

from sqlalchemy import Column, Integer, String
from timebill.adapters.outbound.persistence.models.base_model import Base


class ConsultantModel(Base):
    __tablename__ = "consultants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    password = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<ConsultantModel(code={self.code})>"
