"""
Contract tests for the storage backends.

Every test in ``TestStorageContract`` runs against the in-memory storage and
against SQLAlchemy on SQLite.
"""

from decimal import Decimal

import pytest

from timebill.adapters.outbound.persistence.storage_provider import MemoryStorageProvider
from timebill.domain.exceptions import ResourceInUseException
from timebill.domain.models import TimeEntryFilter

from conftest import entry_data, seed_catalog


class TestStorageContract:
    """Behaviour shared by all backends."""

    async def test_create_assigns_ids_and_get_returns_entity(self, provider):
        async with provider.unit_of_work() as storage:
            first = await storage.clients.create(
                {"code": "C1", "name": "Um", "cnpj": "1", "email": "um@example.com"}
            )
            second = await storage.clients.create(
                {"code": "C2", "name": "Dois", "cnpj": "2", "email": "dois@example.com"}
            )

        async with provider.unit_of_work() as storage:
            fetched = await storage.clients.get(second.id)

        assert first.id != second.id
        assert fetched == second

    async def test_get_unknown_returns_none(self, provider):
        async with provider.unit_of_work() as storage:
            assert await storage.clients.get(999) is None
            assert await storage.clients.get_by_field("code", "nope") is None

    async def test_get_by_field(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            found = await storage.consultants.get_by_field("code", "ANA")

        assert found == catalog["consultant"]

    async def test_update_is_partial(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            updated = await storage.services.update(catalog["service"].id, {"hourly_rate": Decimal("150.00")})

        assert updated.hourly_rate == Decimal("150.00")
        assert updated.description == "Projeto Portal"
        assert updated.client_id == catalog["client"].id

    async def test_update_unknown_returns_none(self, provider):
        async with provider.unit_of_work() as storage:
            assert await storage.sectors.update(42, {"description": "x"}) is None

    async def test_delete(self, provider):
        async with provider.unit_of_work() as storage:
            service_type = await storage.service_types.create({"code": "OPS", "description": "Operação"})

        async with provider.unit_of_work() as storage:
            assert await storage.service_types.delete(service_type.id) is True
            assert await storage.service_types.delete(service_type.id) is False
            assert await storage.service_types.get(service_type.id) is None

    async def test_list_with_equality_filter_and_count(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            await storage.sectors.create({"code": "RH", "description": "Recursos Humanos"})

            by_client = await storage.sectors.list(client_id=catalog["client"].id)
            everything = await storage.sectors.list()
            total = await storage.sectors.count()

        assert [s.code for s in by_client] == ["TI"]
        assert [s.code for s in everything] == ["TI", "RH"]
        assert total == 2

    async def test_list_with_client(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            items = await storage.services.list_with_client()

        assert len(items) == 1
        assert items[0].service == catalog["service"]
        assert items[0].client == catalog["client"]

    async def test_time_entry_roundtrip_keeps_totals(self, provider):
        async with provider.unit_of_work() as storage:
            await seed_catalog(storage)
            created = await storage.time_entries.create(entry_data())

        async with provider.unit_of_work() as storage:
            entry = await storage.time_entries.get(created.id)

        assert entry.total_hours == Decimal("7.00")
        assert entry.total_value == Decimal("700.00")
        assert entry.break_start_time == "12:00"
        assert entry.description == "Trabalho"

    async def test_list_detailed_is_ordered_by_date_descending(self, provider):
        async with provider.unit_of_work() as storage:
            await seed_catalog(storage)
            await storage.time_entries.create(entry_data(date="2024-03-01"))
            await storage.time_entries.create(entry_data(date="2024-03-15"))
            await storage.time_entries.create(entry_data(date="2024-02-20"))
            await storage.time_entries.create(entry_data(date="2024-03-15", description="Segundo"))

            detailed = await storage.time_entries.list_detailed(TimeEntryFilter())

        assert [d.entry.date for d in detailed] == ["2024-03-15", "2024-03-15", "2024-03-01", "2024-02-20"]
        # Same date: creation order
        assert [d.entry.description for d in detailed[:2]] == ["Trabalho", "Segundo"]

    async def test_list_detailed_joins_references(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            await storage.time_entries.create(entry_data(sector_id=catalog["sector"].id))
            await storage.time_entries.create(entry_data())

            detailed = await storage.time_entries.list_detailed(TimeEntryFilter())

        with_sector, without_sector = detailed
        assert with_sector.consultant == catalog["consultant"]
        assert with_sector.client == catalog["client"]
        assert with_sector.service == catalog["service"]
        assert with_sector.service_type == catalog["service_type"]
        assert with_sector.sector == catalog["sector"]
        assert without_sector.sector is None

    async def test_filters_are_conjunctive_and_inclusive(self, provider):
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            other = await storage.consultants.create({"code": "BRU", "name": "Bruno", "password": "x"})
            await storage.time_entries.create(entry_data(date="2024-03-01"))
            await storage.time_entries.create(entry_data(date="2024-03-31"))
            await storage.time_entries.create(entry_data(date="2024-04-01"))
            await storage.time_entries.create(entry_data(date="2024-03-10", consultant_id=other.id))

            in_range = await storage.time_entries.list_entries(
                TimeEntryFilter(start_date="2024-03-01", end_date="2024-03-31")
            )
            ana_only = await storage.time_entries.list_entries(
                TimeEntryFilter(
                    start_date="2024-03-01",
                    end_date="2024-03-31",
                    consultant_id=catalog["consultant"].id,
                    client_id=catalog["client"].id,
                )
            )

        assert sorted(e.date for e in in_range) == ["2024-03-01", "2024-03-10", "2024-03-31"]
        assert sorted(e.date for e in ana_only) == ["2024-03-01", "2024-03-31"]

    async def test_date_prefix_and_entry_ids(self, provider):
        async with provider.unit_of_work() as storage:
            await seed_catalog(storage)
            first = await storage.time_entries.create(entry_data(date="2024-03-01"))
            await storage.time_entries.create(entry_data(date="2024-03-20"))
            third = await storage.time_entries.create(entry_data(date="2024-04-02"))

            march = await storage.time_entries.list_entries(TimeEntryFilter(date_prefix="2024-03"))
            selected = await storage.time_entries.list_entries(TimeEntryFilter(entry_ids={first.id, third.id}))

        assert len(march) == 2
        assert sorted(e.id for e in selected) == [first.id, third.id]

    async def test_unit_of_work_discards_changes_on_error(self, provider):
        with pytest.raises(RuntimeError):
            async with provider.unit_of_work() as storage:
                await storage.service_types.create({"code": "OPS", "description": "Operação"})
                raise RuntimeError("boom")

        async with provider.unit_of_work() as storage:
            assert await storage.service_types.count() == 0


class TestSqlStorage:
    """Behaviour specific to the SQLAlchemy backend."""

    async def test_delete_referenced_client_is_refused(self, sql_provider):
        async with sql_provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)

        with pytest.raises(ResourceInUseException):
            async with sql_provider.unit_of_work() as storage:
                await storage.clients.delete(catalog["client"].id)

        async with sql_provider.unit_of_work() as storage:
            assert await storage.clients.get(catalog["client"].id) is not None


class TestMemoryStorage:
    """Behaviour specific to the in-memory backend."""

    async def test_detailed_drops_dangling_references(self):
        provider = MemoryStorageProvider()
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            kept = await storage.time_entries.create(entry_data())
            await storage.time_entries.create(entry_data(service_id=999))
            await storage.time_entries.create(entry_data(consultant_id=999))
            await storage.time_entries.create(entry_data(sector_id=999))

            detailed = await storage.time_entries.list_detailed(TimeEntryFilter())
            raw = await storage.time_entries.list_entries(TimeEntryFilter())

        assert [d.entry.id for d in detailed] == [kept.id]
        assert len(raw) == 4
        assert catalog["client"].id == kept.client_id

    async def test_services_of_missing_clients_are_skipped(self):
        provider = MemoryStorageProvider()
        async with provider.unit_of_work() as storage:
            catalog = await seed_catalog(storage)
            await storage.clients.delete(catalog["client"].id)

            items = await storage.services.list_with_client()

        assert items == []
