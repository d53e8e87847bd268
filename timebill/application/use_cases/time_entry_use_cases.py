# timebill/application/use_cases/time_entry_use_cases.py (async version)

"""
Service for time entries.

Totals (``total_hours`` and ``total_value``) are never taken from the
caller: they are computed from the entry's times and its service rate right
before every write that touches a time field or the service.
"""

import dataclasses
import logging
from typing import Any, Dict, List, Optional

from timebill.application.dtos.time_entry_dto import TimeEntryCreate, TimeEntryUpdate
from timebill.application.ports.inbound import ITimeEntryUseCase
from timebill.application.ports.outbound import ITimesheetStorage
from timebill.application.use_cases.base_use_cases import require
from timebill.domain.exceptions import InvalidInputException, ResourceNotFoundException
from timebill.domain.models import (
    RECALCULATION_FIELDS,
    Service,
    TimeEntry,
    TimeEntryDetailed,
    TimeEntryFilter,
)
from timebill.domain.services.time_calculation import calculate_hours_and_value

logger = logging.getLogger(__name__)


class TimeEntryService(ITimeEntryUseCase):
    """
    Service for time entry management.
    """

    def __init__(self, storage: ITimesheetStorage):
        """
        Initialize the service with the storage of the current unit of work.

        Args:
            storage: Storage opened for the request
        """
        self.storage = storage

    async def _check_references(self, entry: TimeEntry, changed: Any) -> Service:
        """
        Validate the references of ``entry`` named in ``changed``.

        Returns:
            The entry's service

        Raises:
            ResourceNotFoundException: If a referenced record doesn't exist
            InvalidInputException: If the service belongs to another client
        """
        service = await require(self.storage.services, entry.service_id, "Serviço")

        if "consultant_id" in changed:
            await require(self.storage.consultants, entry.consultant_id, "Consultor")
        if "client_id" in changed:
            await require(self.storage.clients, entry.client_id, "Cliente")
        if "sector_id" in changed and entry.sector_id is not None:
            await require(self.storage.sectors, entry.sector_id, "Setor")

        if ("service_id" in changed or "client_id" in changed) and service.client_id != entry.client_id:
            logger.warning(
                f"Service {service.id} belongs to client {service.client_id}, not {entry.client_id}"
            )
            raise InvalidInputException(
                detail="O serviço não pertence ao cliente informado",
                fields={"serviceId": "Serviço de outro cliente"},
            )
        return service

    @staticmethod
    def _totals(entry: TimeEntry, service: Service) -> Dict[str, Any]:
        calculation = calculate_hours_and_value(
            entry.start_time,
            entry.end_time,
            service.hourly_rate,
            entry.break_start_time,
            entry.break_end_time,
        )
        return {"total_hours": calculation.hours, "total_value": calculation.value}

    async def list_entries(self, month: Optional[int] = None, year: Optional[int] = None) -> List[TimeEntryDetailed]:
        """
        List detailed time entries, optionally restricted to one month.

        Month filtering only applies when both month and year are given.
        """
        filters = TimeEntryFilter()
        if month is not None and year is not None:
            filters = TimeEntryFilter.for_month(year, month)
        return await self.storage.time_entries.list_detailed(filters)

    async def list_filtered(
            self,
            start_date: Optional[str] = None,
            end_date: Optional[str] = None,
            client_id: Optional[int] = None,
            consultant_id: Optional[int] = None,
    ) -> List[TimeEntryDetailed]:
        filters = TimeEntryFilter(
            start_date=start_date,
            end_date=end_date,
            client_id=client_id,
            consultant_id=consultant_id,
        )
        return await self.storage.time_entries.list_detailed(filters)

    async def get(self, entry_id: int) -> TimeEntry:
        return await require(self.storage.time_entries, entry_id, "Lançamento")

    async def create(self, data: TimeEntryCreate) -> TimeEntry:
        """
        Create a time entry with its totals computed from the service rate.

        Raises:
            ResourceNotFoundException: If the service, consultant, client or sector doesn't exist
            InvalidInputException: If the service belongs to another client
        """
        payload = data.model_dump()
        draft = TimeEntry(id=0, total_hours=None, total_value=None, **payload)

        service = await self._check_references(draft, payload.keys())
        payload.update(self._totals(draft, service))

        entry = await self.storage.time_entries.create(payload)
        logger.info(f"Time entry {entry.id} created: {entry.total_hours}h, {entry.total_value}")
        return entry

    async def update(self, entry_id: int, data: TimeEntryUpdate) -> TimeEntry:
        """
        Apply a partial update.

        When the patch touches a time field or the service, totals are
        recomputed from the merged record and the service's current rate.
        Otherwise the stored totals are kept as they are.

        Raises:
            ResourceNotFoundException: If the entry or a referenced record doesn't exist
            InvalidInputException: If the merged break pair is incomplete or the
                service belongs to another client
        """
        current = await self.get(entry_id)
        patch = data.to_patch(nullable=TimeEntryUpdate.NULLABLE_FIELDS)
        merged = dataclasses.replace(current, **patch)

        if (merged.break_start_time is None) != (merged.break_end_time is None):
            raise InvalidInputException(
                detail="Informe início e fim do intervalo, ou nenhum dos dois",
                fields={"breakStartTime": "Intervalo incompleto", "breakEndTime": "Intervalo incompleto"},
            )

        if RECALCULATION_FIELDS & patch.keys():
            service = await self._check_references(merged, patch.keys())
            patch.update(self._totals(merged, service))
            logger.debug(f"Recalculating totals of time entry {entry_id}")
        elif {"consultant_id", "client_id", "sector_id"} & patch.keys():
            await self._check_references(merged, patch.keys())

        entry = await self.storage.time_entries.update(entry_id, patch)
        if entry is None:
            raise ResourceNotFoundException(detail="Lançamento não encontrado", resource_id=entry_id)

        logger.info(f"Time entry {entry_id} updated")
        return entry

    async def delete(self, entry_id: int) -> None:
        if not await self.storage.time_entries.delete(entry_id):
            raise ResourceNotFoundException(detail="Lançamento não encontrado", resource_id=entry_id)
        logger.info(f"Time entry {entry_id} removed")
