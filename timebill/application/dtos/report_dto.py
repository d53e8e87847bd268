# timebill/application/dtos/report_dto.py

"""
Schemas de saída dos relatórios, do dashboard e do faturamento.

Os totais são devolvidos como números JSON (float).
"""

from typing import List, Optional

from pydantic import Field

from timebill.application.dtos.base_dto import CustomBaseModel
from timebill.domain.models.report_domain_model import (
    BillingGroup,
    BillingSummary,
    ClientBreakdownItem,
    DashboardStats,
    ReportData,
)
from timebill.shared.utils.input_validation import IsoDate


class ClientBreakdownOutput(CustomBaseModel):
    client_id: int
    client_name: str
    hours: float
    value: float
    entries: int

    @classmethod
    def from_domain(cls, item: ClientBreakdownItem) -> "ClientBreakdownOutput":
        return cls(
            client_id=item.client_id,
            client_name=item.client_name,
            hours=float(item.hours),
            value=float(item.value),
            entries=item.entries,
        )


class ReportOutput(CustomBaseModel):
    """
    Relatório consolidado: totais gerais e quebra por cliente,
    ordenada do maior para o menor valor.
    """
    total_hours: float
    total_value: float
    total_entries: int
    total_clients: int
    client_breakdown: List[ClientBreakdownOutput]

    @classmethod
    def from_domain(cls, report: ReportData) -> "ReportOutput":
        return cls(
            total_hours=float(report.total_hours),
            total_value=float(report.total_value),
            total_entries=report.total_entries,
            total_clients=report.total_clients,
            client_breakdown=[ClientBreakdownOutput.from_domain(i) for i in report.client_breakdown],
        )


class DashboardStatsOutput(CustomBaseModel):
    """Indicadores do mês selecionado (ou do mês corrente)."""
    total_clients: int
    monthly_hours: float
    monthly_revenue: float
    active_consultants: int

    @classmethod
    def from_domain(cls, stats: DashboardStats) -> "DashboardStatsOutput":
        return cls(
            total_clients=stats.total_clients,
            monthly_hours=float(stats.monthly_hours),
            monthly_revenue=float(stats.monthly_revenue),
            active_consultants=stats.active_consultants,
        )


class BillingGroupOutput(CustomBaseModel):
    project: str
    sector: str
    service_type: str
    hours: float
    value: float
    entries: int

    @classmethod
    def from_domain(cls, group: BillingGroup) -> "BillingGroupOutput":
        return cls(
            project=group.project,
            sector=group.sector,
            service_type=group.service_type,
            hours=float(group.hours),
            value=float(group.value),
            entries=group.entries,
        )


class BillingSummaryInput(CustomBaseModel):
    """
    Seleção de lançamentos para faturamento.

    Sem ``entryIds`` todos os lançamentos do cliente no período entram.
    """
    client_id: int = Field(..., description="Cliente a ser faturado")
    start_date: IsoDate = Field(..., description="Início do período (YYYY-MM-DD)")
    end_date: IsoDate = Field(..., description="Fim do período (YYYY-MM-DD)")
    entry_ids: Optional[List[int]] = Field(None, description="Lançamentos selecionados")


class BillingSummaryOutput(CustomBaseModel):
    total_hours: float
    total_value: float
    total_entries: int
    groups: List[BillingGroupOutput]

    @classmethod
    def from_domain(cls, summary: BillingSummary) -> "BillingSummaryOutput":
        return cls(
            total_hours=float(summary.total_hours),
            total_value=float(summary.total_value),
            total_entries=summary.total_entries,
            groups=[BillingGroupOutput.from_domain(g) for g in summary.groups],
        )
