# timebill/adapters/outbound/persistence/models/sector_model.py

from sqlalchemy import Column, ForeignKey, Integer, String
from timebill.adapters.outbound.persistence.models.base_model import Base


class SectorModel(Base):
    """Setor de atendimento; pode existir sem cliente associado."""
    __tablename__ = "sectors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String, unique=True, nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=True, index=True)
    description = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<SectorModel(code={self.code})>"
