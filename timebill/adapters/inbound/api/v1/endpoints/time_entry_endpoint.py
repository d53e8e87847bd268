# timebill/adapters/inbound/api/v1/endpoints/time_entry_endpoint.py (async version)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from timebill.adapters.inbound.api.deps import get_report_service, get_time_entry_service
from timebill.application.dtos.time_entry_dto import (
    TimeEntryCreate,
    TimeEntryDetailedOutput,
    TimeEntryOutput,
    TimeEntryUpdate,
)
from timebill.application.use_cases import ReportService, TimeEntryService

logger = logging.getLogger(__name__)

router = APIRouter()

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


@router.get(
    "",
    response_model=List[TimeEntryDetailedOutput],
    summary="List Time Entries - Detailed entries, optionally for one month",
    description=(
        "With both month and year, returns entries dated from YYYY-MM-01 to YYYY-MM-31. "
        "Entries are ordered by date, most recent first."
    ),
)
async def list_time_entries(
        month: Optional[int] = Query(None, ge=1, le=12, description="Month (1-12)"),
        year: Optional[int] = Query(None, ge=1, le=9999, description="Year"),
        service: TimeEntryService = Depends(get_time_entry_service),
):
    entries = await service.list_entries(month=month, year=year)
    return [TimeEntryDetailedOutput.from_domain(e) for e in entries]


@router.get(
    "/filtered",
    response_model=List[TimeEntryDetailedOutput],
    summary="Filter Time Entries - Combine date range, client and consultant",
)
async def list_filtered_time_entries(
        start_date: Optional[str] = Query(None, alias="startDate", pattern=DATE_PATTERN),
        end_date: Optional[str] = Query(None, alias="endDate", pattern=DATE_PATTERN),
        client_id: Optional[int] = Query(None, alias="clientId"),
        consultant_id: Optional[int] = Query(None, alias="consultantId"),
        service: TimeEntryService = Depends(get_time_entry_service),
):
    entries = await service.list_filtered(
        start_date=start_date,
        end_date=end_date,
        client_id=client_id,
        consultant_id=consultant_id,
    )
    return [TimeEntryDetailedOutput.from_domain(e) for e in entries]


@router.get(
    "/billing",
    response_model=List[TimeEntryDetailedOutput],
    summary="Billing Entries - Entries of one client in a period",
)
async def list_billing_entries(
        client_id: int = Query(..., alias="clientId"),
        start_date: str = Query(..., alias="startDate", pattern=DATE_PATTERN),
        end_date: str = Query(..., alias="endDate", pattern=DATE_PATTERN),
        service: ReportService = Depends(get_report_service),
):
    entries = await service.billing_entries(client_id=client_id, start_date=start_date, end_date=end_date)
    return [TimeEntryDetailedOutput.from_domain(e) for e in entries]


@router.get(
    "/{entry_id}",
    response_model=TimeEntryOutput,
    summary="Get Time Entry - Get a time entry by ID",
)
async def get_time_entry(
        entry_id: int = Path(..., description="Time entry ID"),
        service: TimeEntryService = Depends(get_time_entry_service),
):
    return await service.get(entry_id)


@router.post(
    "",
    response_model=TimeEntryOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create Time Entry - Log worked hours",
    description="totalHours and totalValue are computed from the times and the service's hourly rate.",
)
async def create_time_entry(
        data: TimeEntryCreate,
        service: TimeEntryService = Depends(get_time_entry_service),
):
    return await service.create(data)


@router.put(
    "/{entry_id}",
    response_model=TimeEntryOutput,
    summary="Update Time Entry - Partially update a time entry",
    description=(
        "Totals are recomputed with the service's current rate whenever a time field "
        "or the service changes."
    ),
)
async def update_time_entry(
        data: TimeEntryUpdate,
        entry_id: int = Path(..., description="Time entry ID"),
        service: TimeEntryService = Depends(get_time_entry_service),
):
    return await service.update(entry_id, data)


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Time Entry - Remove a time entry",
)
async def delete_time_entry(
        entry_id: int = Path(..., description="Time entry ID"),
        service: TimeEntryService = Depends(get_time_entry_service),
):
    await service.delete(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
