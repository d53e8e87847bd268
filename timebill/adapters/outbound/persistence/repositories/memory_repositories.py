# timebill/adapters/outbound/persistence/repositories/memory_repositories.py

"""
In-memory repositories for the timesheet entities.

Rows live in plain dicts keyed by an auto-incrementing id. Used by the test
suite and for local development without a database.
"""

import dataclasses
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from timebill.application.ports.outbound import (
    IClientRepository,
    IConsultantRepository,
    ISectorRepository,
    IServiceRepository,
    IServiceTypeRepository,
    ITimeEntryRepository,
    ITimesheetStorage,
)
from timebill.domain.models import (
    Client,
    Consultant,
    Sector,
    Service,
    ServiceType,
    ServiceWithClient,
    TimeEntry,
    TimeEntryDetailed,
    TimeEntryFilter,
)

DomainType = TypeVar("DomainType")

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[DomainType]):
    """Dict-backed CRUD over one domain dataclass."""

    domain_model: Type[DomainType]

    def __init__(self):
        self._rows: Dict[int, DomainType] = {}
        self._next_id = 1
        self.logger = logging.getLogger(f"{__name__}.{self.domain_model.__name__}")

    async def get(self, id: int) -> Optional[DomainType]:
        return self._rows.get(id)

    async def get_by_field(self, field_name: str, value: Any) -> Optional[DomainType]:
        return next((row for row in self._rows.values() if getattr(row, field_name) == value), None)

    async def list(self, **filters) -> List[DomainType]:
        return [
            row for row in self._rows.values()
            if all(getattr(row, field) == value for field, value in filters.items())
        ]

    async def create(self, data: Dict[str, Any]) -> DomainType:
        entity = self.domain_model(id=self._next_id, **data)
        self._rows[self._next_id] = entity
        self._next_id += 1
        self.logger.info(f"{self.domain_model.__name__} created with ID: {entity.id}")
        return entity

    async def update(self, id: int, data: Dict[str, Any]) -> Optional[DomainType]:
        current = self._rows.get(id)
        if current is None:
            return None
        updated = dataclasses.replace(current, **data)
        self._rows[id] = updated
        self.logger.info(f"{self.domain_model.__name__} with ID {id} updated")
        return updated

    async def delete(self, id: int) -> bool:
        if self._rows.pop(id, None) is None:
            return False
        self.logger.info(f"{self.domain_model.__name__} with ID {id} removed")
        return True

    async def count(self) -> int:
        return len(self._rows)

    def rows(self) -> Dict[int, DomainType]:
        return self._rows

    def snapshot(self) -> Tuple[Dict[int, DomainType], int]:
        return dict(self._rows), self._next_id

    def restore(self, state: Tuple[Dict[int, DomainType], int]) -> None:
        self._rows, self._next_id = dict(state[0]), state[1]


class InMemoryClientRepository(InMemoryRepository[Client], IClientRepository):
    domain_model = Client


class InMemoryConsultantRepository(InMemoryRepository[Consultant], IConsultantRepository):
    domain_model = Consultant


class InMemoryServiceTypeRepository(InMemoryRepository[ServiceType], IServiceTypeRepository):
    domain_model = ServiceType


class InMemorySectorRepository(InMemoryRepository[Sector], ISectorRepository):
    domain_model = Sector


class InMemoryServiceRepository(InMemoryRepository[Service], IServiceRepository):
    domain_model = Service

    def __init__(self, clients: InMemoryClientRepository):
        super().__init__()
        self._clients = clients

    async def list_with_client(self) -> List[ServiceWithClient]:
        clients = self._clients.rows()
        return [
            ServiceWithClient(service=service, client=clients[service.client_id])
            for service in self._rows.values()
            if service.client_id in clients
        ]


class InMemoryTimeEntryRepository(InMemoryRepository[TimeEntry], ITimeEntryRepository):
    domain_model = TimeEntry

    def __init__(self, storage: "InMemoryStorage"):
        super().__init__()
        self._storage = storage

    async def list_entries(self, filters: TimeEntryFilter) -> List[TimeEntry]:
        return [entry for entry in self._rows.values() if filters.matches(entry)]

    def _join(self, entry: TimeEntry) -> Optional[TimeEntryDetailed]:
        consultant = self._storage.consultants.rows().get(entry.consultant_id)
        client = self._storage.clients.rows().get(entry.client_id)
        service = self._storage.services.rows().get(entry.service_id)
        if consultant is None or client is None or service is None:
            return None

        sector = None
        if entry.sector_id is not None:
            sector = self._storage.sectors.rows().get(entry.sector_id)
            if sector is None:
                return None

        service_type = None
        if service.service_type_id is not None:
            service_type = self._storage.service_types.rows().get(service.service_type_id)

        return TimeEntryDetailed(
            entry=entry,
            consultant=consultant,
            client=client,
            service=service,
            service_type=service_type,
            sector=sector,
        )

    async def list_detailed(self, filters: TimeEntryFilter) -> List[TimeEntryDetailed]:
        detailed = []
        for entry in self._rows.values():
            if not filters.matches(entry):
                continue
            joined = self._join(entry)
            if joined is None:
                logger.debug(f"Skipping time entry {entry.id}: dangling reference")
                continue
            detailed.append(joined)

        # Stable sort keeps id order among entries of the same day
        return sorted(detailed, key=lambda d: d.entry.date, reverse=True)


class InMemoryStorage(ITimesheetStorage):
    """Process-local storage; all repositories share this object's lifetime."""

    def __init__(self):
        self.clients = InMemoryClientRepository()
        self.consultants = InMemoryConsultantRepository()
        self.service_types = InMemoryServiceTypeRepository()
        self.sectors = InMemorySectorRepository()
        self.services = InMemoryServiceRepository(self.clients)
        self.time_entries = InMemoryTimeEntryRepository(self)

    def _repositories(self) -> List[InMemoryRepository]:
        return [self.clients, self.consultants, self.service_types, self.sectors, self.services, self.time_entries]

    def snapshot(self) -> list:
        """Capture every table; entities are immutable once stored so a shallow copy is enough."""
        return [repo.snapshot() for repo in self._repositories()]

    def restore(self, snapshot: list) -> None:
        for repo, state in zip(self._repositories(), snapshot):
            repo.restore(state)
