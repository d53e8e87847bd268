# timebill/adapters/inbound/api/v1/endpoints/report_endpoint.py (async version)

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from timebill.adapters.inbound.api.deps import get_report_service
from timebill.application.dtos.report_dto import (
    BillingSummaryInput,
    BillingSummaryOutput,
    DashboardStatsOutput,
    ReportOutput,
)
from timebill.application.use_cases import ReportService

logger = logging.getLogger(__name__)

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"

dashboard_router = APIRouter()
report_router = APIRouter()
billing_router = APIRouter()


@dashboard_router.get(
    "/stats",
    response_model=DashboardStatsOutput,
    summary="Dashboard Stats - Hours, revenue and active consultants of a month",
    description="Defaults to the current month. totalClients counts every client.",
)
async def dashboard_stats(
        month: Optional[int] = Query(None, ge=1, le=12, description="Month (1-12)"),
        year: Optional[int] = Query(None, ge=1, le=9999, description="Year"),
        service: ReportService = Depends(get_report_service),
):
    stats = await service.dashboard_stats(month=month, year=year)
    return DashboardStatsOutput.from_domain(stats)


@report_router.get(
    "",
    response_model=ReportOutput,
    summary="Report - Totals and per-client breakdown",
    description="The client breakdown is ordered by value, highest first.",
)
async def report(
        start_date: Optional[str] = Query(None, alias="startDate", pattern=DATE_PATTERN),
        end_date: Optional[str] = Query(None, alias="endDate", pattern=DATE_PATTERN),
        client_id: Optional[int] = Query(None, alias="clientId"),
        consultant_id: Optional[int] = Query(None, alias="consultantId"),
        service: ReportService = Depends(get_report_service),
):
    data = await service.report(
        start_date=start_date,
        end_date=end_date,
        client_id=client_id,
        consultant_id=consultant_id,
    )
    return ReportOutput.from_domain(data)


@billing_router.post(
    "/summary",
    response_model=BillingSummaryOutput,
    summary="Billing Summary - Totals grouped by project, sector and service type",
)
async def billing_summary(
        data: BillingSummaryInput,
        service: ReportService = Depends(get_report_service),
):
    summary = await service.billing_summary(
        client_id=data.client_id,
        start_date=data.start_date,
        end_date=data.end_date,
        entry_ids=data.entry_ids,
    )
    return BillingSummaryOutput.from_domain(summary)


@billing_router.post(
    "/generate-pdf",
    status_code=status.HTTP_501_NOT_IMPLEMENTED,
    summary="Generate Billing PDF - Not provided by this service",
)
async def generate_billing_pdf(data: BillingSummaryInput):
    logger.info(f"PDF requested for client {data.client_id}; document rendering is not available")
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content={"message": "Geração de PDF não disponível neste serviço", "code": "NOT_IMPLEMENTED"},
    )
