# timebill/application/dtos/time_entry_dto.py

"""
Schemas para lançamentos de horas.

``totalHours`` e ``totalValue`` são sempre calculados pelo servidor; se
vierem no corpo da requisição, são ignorados.
"""

from decimal import Decimal
from typing import ClassVar, Literal, Optional, Tuple

from pydantic import Field, model_validator

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.application.dtos.client_dto import ClientOutput
from timebill.application.dtos.consultant_dto import ConsultantOutput
from timebill.application.dtos.service_dto import SectorOutput, ServiceOutput, ServiceTypeOutput
from timebill.domain.models import TimeEntryDetailed
from timebill.shared.utils.input_validation import ClockTime, IsoDate

ActivityCompleted = Literal["sim", "nao"]
ServiceLocation = Literal["presencial", "remoto"]


def check_break_pair(break_start: Optional[str], break_end: Optional[str]) -> None:
    """Início e fim do intervalo devem ser informados juntos."""
    if (break_start is None) != (break_end is None):
        raise ValueError("Informe início e fim do intervalo, ou nenhum dos dois")


class TimeEntryCreate(CustomBaseModel):
    """
    Schema para criação de um lançamento de horas.
    """
    date: IsoDate = Field(..., description="Data do lançamento (YYYY-MM-DD)")
    consultant_id: int = Field(..., description="Consultor que realizou o trabalho")
    client_id: int = Field(..., description="Cliente atendido")
    service_id: int = Field(..., description="Serviço prestado (deve pertencer ao cliente)")
    sector_id: Optional[int] = Field(None, description="Setor do cliente (opcional)")
    start_time: ClockTime = Field(..., description="Hora de início (HH:MM)")
    end_time: ClockTime = Field(..., description="Hora de término (HH:MM)")
    break_start_time: Optional[ClockTime] = Field(None, description="Início do intervalo (HH:MM)")
    break_end_time: Optional[ClockTime] = Field(None, description="Fim do intervalo (HH:MM)")
    description: str = Field("", description="Descrição das atividades")
    activity_completed: Optional[ActivityCompleted] = None
    delivery_forecast: Optional[IsoDate] = None
    actual_delivery: Optional[IsoDate] = None
    project: Optional[str] = None
    service_location: Optional[ServiceLocation] = None

    @model_validator(mode="after")
    def validate_break(self):
        check_break_pair(self.break_start_time, self.break_end_time)
        return self


class TimeEntryUpdate(CustomBaseModel):
    """
    Schema para atualização parcial de um lançamento.

    O par de intervalo é validado depois de combinado com o registro
    atual, pois o cliente pode enviar apenas um dos lados.
    """
    date: Optional[IsoDate] = None
    consultant_id: Optional[int] = None
    client_id: Optional[int] = None
    service_id: Optional[int] = None
    sector_id: Optional[int] = None
    start_time: Optional[ClockTime] = None
    end_time: Optional[ClockTime] = None
    break_start_time: Optional[ClockTime] = None
    break_end_time: Optional[ClockTime] = None
    description: Optional[str] = None
    activity_completed: Optional[ActivityCompleted] = None
    delivery_forecast: Optional[IsoDate] = None
    actual_delivery: Optional[IsoDate] = None
    project: Optional[str] = None
    service_location: Optional[ServiceLocation] = None

    # Campos que podem ser limpos enviando null
    NULLABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "sector_id",
        "break_start_time",
        "break_end_time",
        "activity_completed",
        "delivery_forecast",
        "actual_delivery",
        "project",
        "service_location",
    )


class TimeEntryOutput(CustomBaseModel):
    id: int
    date: str
    consultant_id: int
    client_id: int
    service_id: int
    sector_id: Optional[int] = None
    start_time: str
    end_time: str
    break_start_time: Optional[str] = None
    break_end_time: Optional[str] = None
    description: Optional[str] = ""
    total_hours: Decimal
    total_value: Decimal
    activity_completed: Optional[str] = None
    delivery_forecast: Optional[str] = None
    actual_delivery: Optional[str] = None
    project: Optional[str] = None
    service_location: Optional[str] = None


class TimeEntryDetailedOutput(TimeEntryOutput):
    """
    Lançamento com consultor, cliente, serviço e setor embutidos.
    """
    consultant: ConsultantOutput
    client: ClientOutput
    service: ServiceOutput
    service_type: Optional[ServiceTypeOutput] = None
    sector: Optional[SectorOutput] = None

    @classmethod
    def from_domain(cls, detailed: TimeEntryDetailed) -> "TimeEntryDetailedOutput":
        entry = TimeEntryOutput.model_validate(detailed.entry)
        return cls(
            **entry.model_dump(),
            consultant=ConsultantOutput.model_validate(detailed.consultant),
            client=ClientOutput.model_validate(detailed.client),
            service=ServiceOutput.model_validate(detailed.service),
            service_type=ServiceTypeOutput.model_validate(detailed.service_type) if detailed.service_type else None,
            sector=SectorOutput.model_validate(detailed.sector) if detailed.sector else None,
        )
