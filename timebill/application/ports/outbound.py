# timebill/application/ports/outbound.py

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Any, Dict, Generic, List, Optional, TypeVar

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

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Generic repository interface."""

    @abstractmethod
    async def get(self, id: int) -> Optional[T]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def get_by_field(self, field_name: str, value: Any) -> Optional[T]:
        """Get the first entity whose field equals value."""
        pass

    @abstractmethod
    async def list(self, **filters) -> List[T]:
        """List entities, optionally filtered by field equality."""
        pass

    @abstractmethod
    async def create(self, data: Dict[str, Any]) -> T:
        """Create a new entity and return it with its id."""
        pass

    @abstractmethod
    async def update(self, id: int, data: Dict[str, Any]) -> Optional[T]:
        """Apply a partial update. Returns None when the id is unknown."""
        pass

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Delete an entity by ID. Returns False when the id is unknown."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all entities."""
        pass


class IClientRepository(IRepository[Client], ABC):
    """Client repository interface."""


class IConsultantRepository(IRepository[Consultant], ABC):
    """Consultant repository interface."""


class IServiceTypeRepository(IRepository[ServiceType], ABC):
    """Service type repository interface."""


class ISectorRepository(IRepository[Sector], ABC):
    """Sector repository interface."""


class IServiceRepository(IRepository[Service], ABC):
    """Service repository interface."""

    @abstractmethod
    async def list_with_client(self) -> List[ServiceWithClient]:
        """List services joined with their client; services without a client are skipped."""
        pass


class ITimeEntryRepository(IRepository[TimeEntry], ABC):
    """Time entry repository interface."""

    @abstractmethod
    async def list_entries(self, filters: TimeEntryFilter) -> List[TimeEntry]:
        """List raw time entries matching the filter."""
        pass

    @abstractmethod
    async def list_detailed(self, filters: TimeEntryFilter) -> List[TimeEntryDetailed]:
        """
        List time entries joined with consultant, client, service (and sector).

        Entries with a dangling reference are left out. Results are ordered by
        date, most recent first.
        """
        pass


class ITimesheetStorage(ABC):
    """The data-access boundary shared by all use cases."""

    clients: IClientRepository
    consultants: IConsultantRepository
    services: IServiceRepository
    service_types: IServiceTypeRepository
    sectors: ISectorRepository
    time_entries: ITimeEntryRepository


class IStorageProvider(ABC):
    """Hands out a storage for the duration of one atomic unit of work."""

    @abstractmethod
    def unit_of_work(self) -> AbstractAsyncContextManager[ITimesheetStorage]:
        """
        Open a unit of work.

        Everything done with the yielded storage is committed together when the
        block exits normally and discarded when it raises.
        """
        pass

    async def startup(self) -> None:
        """Prepare the backend (create tables, open pools)."""

    async def shutdown(self) -> None:
        """Release backend resources."""
