# timebill/adapters/outbound/persistence/repositories/sql_repositories.py (async version)

"""
SQLAlchemy repositories for the timesheet entities.

Each repository is bound to the session of the unit of work that created it
(see ``SqlAlchemyStorage``) and returns domain dataclasses, never ORM objects.
"""

from typing import List
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from timebill.adapters.outbound.persistence.models import (
    ClientModel,
    ConsultantModel,
    SectorModel,
    ServiceModel,
    ServiceTypeModel,
    TimeEntryModel,
)
from timebill.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from timebill.application.ports.outbound import (
    IClientRepository,
    IConsultantRepository,
    ISectorRepository,
    IServiceRepository,
    IServiceTypeRepository,
    ITimeEntryRepository,
    ITimesheetStorage,
)
from timebill.domain.exceptions import DatabaseOperationException
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


class AsyncClientCRUD(AsyncCRUDBase[ClientModel, Client], IClientRepository):
    model = ClientModel
    domain_model = Client


class AsyncConsultantCRUD(AsyncCRUDBase[ConsultantModel, Consultant], IConsultantRepository):
    model = ConsultantModel
    domain_model = Consultant


class AsyncServiceTypeCRUD(AsyncCRUDBase[ServiceTypeModel, ServiceType], IServiceTypeRepository):
    model = ServiceTypeModel
    domain_model = ServiceType


class AsyncSectorCRUD(AsyncCRUDBase[SectorModel, Sector], ISectorRepository):
    model = SectorModel
    domain_model = Sector


class AsyncServiceCRUD(AsyncCRUDBase[ServiceModel, Service], IServiceRepository):
    model = ServiceModel
    domain_model = Service

    async def list_with_client(self) -> List[ServiceWithClient]:
        """
        List services joined with their owning client.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(ServiceModel, ClientModel)
                .join(ClientModel, ServiceModel.client_id == ClientModel.id)
                .order_by(ServiceModel.id)
            )
            result = await self.db.execute(query)
            clients = AsyncClientCRUD(self.db)
            return [
                ServiceWithClient(
                    service=self.to_domain(service),
                    client=clients.to_domain(client),
                )
                for service, client in result.all()
            ]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing services with clients: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing services",
                original_error=e
            )


class AsyncTimeEntryCRUD(AsyncCRUDBase[TimeEntryModel, TimeEntry], ITimeEntryRepository):
    model = TimeEntryModel
    domain_model = TimeEntry

    @staticmethod
    def _conditions(filters: TimeEntryFilter) -> list:
        conditions = []
        if filters.start_date is not None:
            conditions.append(TimeEntryModel.date >= filters.start_date)
        if filters.end_date is not None:
            conditions.append(TimeEntryModel.date <= filters.end_date)
        if filters.client_id is not None:
            conditions.append(TimeEntryModel.client_id == filters.client_id)
        if filters.consultant_id is not None:
            conditions.append(TimeEntryModel.consultant_id == filters.consultant_id)
        if filters.date_prefix is not None:
            conditions.append(TimeEntryModel.date.startswith(filters.date_prefix, autoescape=True))
        if filters.entry_ids is not None:
            conditions.append(TimeEntryModel.id.in_(list(filters.entry_ids)))
        return conditions

    async def list_entries(self, filters: TimeEntryFilter) -> List[TimeEntry]:
        """
        List raw time entries matching the filter, ordered by ID.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(TimeEntryModel).where(*self._conditions(filters))
            result = await self.db.execute(query.order_by(TimeEntryModel.id))
            return [self.to_domain(obj) for obj in result.scalars().all()]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing time entries: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing time entries",
                original_error=e
            )

    async def list_detailed(self, filters: TimeEntryFilter) -> List[TimeEntryDetailed]:
        """
        List time entries joined with consultant, client, service, service type
        and sector.

        Inner joins drop entries whose consultant, client or service is gone;
        an entry pointing at a missing sector is dropped as well.

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = (
                select(TimeEntryModel, ConsultantModel, ClientModel, ServiceModel, ServiceTypeModel, SectorModel)
                .join(ConsultantModel, TimeEntryModel.consultant_id == ConsultantModel.id)
                .join(ClientModel, TimeEntryModel.client_id == ClientModel.id)
                .join(ServiceModel, TimeEntryModel.service_id == ServiceModel.id)
                .outerjoin(ServiceTypeModel, ServiceModel.service_type_id == ServiceTypeModel.id)
                .outerjoin(SectorModel, TimeEntryModel.sector_id == SectorModel.id)
                .where(or_(TimeEntryModel.sector_id.is_(None), SectorModel.id.is_not(None)))
                .where(*self._conditions(filters))
                .order_by(TimeEntryModel.date.desc(), TimeEntryModel.id)
            )
            result = await self.db.execute(query)

            clients = AsyncClientCRUD(self.db)
            consultants = AsyncConsultantCRUD(self.db)
            services = AsyncServiceCRUD(self.db)
            service_types = AsyncServiceTypeCRUD(self.db)
            sectors = AsyncSectorCRUD(self.db)

            return [
                TimeEntryDetailed(
                    entry=self.to_domain(entry),
                    consultant=consultants.to_domain(consultant),
                    client=clients.to_domain(client),
                    service=services.to_domain(service),
                    service_type=service_types.to_domain(service_type) if service_type is not None else None,
                    sector=sectors.to_domain(sector) if sector is not None else None,
                )
                for entry, consultant, client, service, service_type, sector in result.all()
            ]
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing detailed time entries: {str(e)}")
            raise DatabaseOperationException(
                detail="Error listing time entries",
                original_error=e
            )


class SqlAlchemyStorage(ITimesheetStorage):
    """Storage whose repositories all share one session (one transaction)."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.clients = AsyncClientCRUD(db)
        self.consultants = AsyncConsultantCRUD(db)
        self.services = AsyncServiceCRUD(db)
        self.service_types = AsyncServiceTypeCRUD(db)
        self.sectors = AsyncSectorCRUD(db)
        self.time_entries = AsyncTimeEntryCRUD(db)
