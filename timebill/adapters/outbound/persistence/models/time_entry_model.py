# timebill/adapters/outbound/persistence/models/time_entry_model.py

"""
Modelo de lançamento de horas.

Datas e horários são guardados como texto (``YYYY-MM-DD`` e ``HH:MM``);
os filtros por período comparam as datas lexicograficamente.
``total_hours`` e ``total_value`` são sempre calculados pela aplicação.
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text
from timebill.adapters.outbound.persistence.models.base_model import Base


class TimeEntryModel(Base):
    __tablename__ = "time_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(10), nullable=False, index=True)
    consultant_id = Column(Integer, ForeignKey("consultants.id"), nullable=False, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    service_id = Column(Integer, ForeignKey("services.id"), nullable=False)
    sector_id = Column(Integer, ForeignKey("sectors.id"), nullable=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    break_start_time = Column(String(5), nullable=True)
    break_end_time = Column(String(5), nullable=True)
    description = Column(Text, default="")
    total_hours = Column(Numeric(5, 2), nullable=False)
    total_value = Column(Numeric(10, 2), nullable=False)
    activity_completed = Column(String, nullable=True)
    delivery_forecast = Column(String(10), nullable=True)
    actual_delivery = Column(String(10), nullable=True)
    project = Column(String, nullable=True)
    service_location = Column(String, nullable=True)

    def __repr__(self) -> str:
        return f"<TimeEntryModel(id={self.id}, date={self.date}, total_hours={self.total_hours})>"
