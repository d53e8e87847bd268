"""Shared fixtures for tests."""

import os

# Settings are read at import time: force the in-memory backend before
# anything from timebill is imported.
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["ENVIRONMENT"] = "testing"

from decimal import Decimal
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from timebill.adapters.configuration.config import Settings
from timebill.adapters.outbound.persistence.storage_provider import (
    MemoryStorageProvider,
    SqlStorageProvider,
)
from timebill.domain.services.time_calculation import calculate_hours_and_value
from timebill.main import create_app

SQLITE_URL = "sqlite+aiosqlite:///:memory:"


def sqlite_settings() -> Settings:
    return Settings(STORAGE_BACKEND="database", DATABASE_URL=SQLITE_URL, ENVIRONMENT="testing")


@pytest.fixture
def memory_provider() -> MemoryStorageProvider:
    return MemoryStorageProvider()


@pytest.fixture
async def sql_provider():
    provider = SqlStorageProvider(sqlite_settings())
    await provider.startup()
    yield provider
    await provider.shutdown()


@pytest.fixture(params=["memory", "sql"])
async def provider(request):
    """Each storage contract test runs once per backend."""
    if request.param == "memory":
        yield MemoryStorageProvider()
        return

    provider = SqlStorageProvider(sqlite_settings())
    await provider.startup()
    yield provider
    await provider.shutdown()


@pytest.fixture
def client(memory_provider):
    """API client backed by the in-memory storage."""
    app = create_app(storage_provider=memory_provider)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sql_client():
    """API client backed by SQLAlchemy on an in-memory SQLite database."""
    settings = sqlite_settings()
    app = create_app(settings=settings, storage_provider=SqlStorageProvider(settings))
    with TestClient(app) as test_client:
        yield test_client


########################################################################
# Seed helpers
########################################################################

def entry_data(**overrides) -> Dict[str, Any]:
    """Storage-level time entry payload with totals computed for rate 100."""
    data = {
        "date": "2024-03-10",
        "consultant_id": 1,
        "client_id": 1,
        "service_id": 1,
        "start_time": "09:00",
        "end_time": "17:00",
        "break_start_time": "12:00",
        "break_end_time": "13:00",
        "description": "Trabalho",
    }
    data.update(overrides)
    calculation = calculate_hours_and_value(
        data["start_time"],
        data["end_time"],
        overrides.get("rate", Decimal("100.00")),
        data.get("break_start_time"),
        data.get("break_end_time"),
    )
    data.pop("rate", None)
    data.setdefault("total_hours", calculation.hours)
    data.setdefault("total_value", calculation.value)
    return data


async def seed_catalog(storage, rate: Decimal = Decimal("100.00")) -> Dict[str, Any]:
    """Create one client, consultant, service type, service and sector."""
    client = await storage.clients.create(
        {"code": "C001", "name": "Acme", "cnpj": "11.111.111/0001-11", "email": "acme@example.com"}
    )
    consultant = await storage.consultants.create({"code": "ANA", "name": "Ana", "password": "x"})
    service_type = await storage.service_types.create({"code": "DEV", "description": "Desenvolvimento"})
    service = await storage.services.create({
        "code": "S001",
        "client_id": client.id,
        "description": "Projeto Portal",
        "hourly_rate": rate,
        "service_type_id": service_type.id,
    })
    sector = await storage.sectors.create({"code": "TI", "description": "Tecnologia", "client_id": client.id})
    return {
        "client": client,
        "consultant": consultant,
        "service_type": service_type,
        "service": service,
        "sector": sector,
    }


@pytest.fixture
def api_catalog(client) -> Dict[str, Any]:
    """Register a client, consultant and service (rate 100) through the API."""
    acme = client.post("/api/clients", json={
        "code": "C001", "name": "Acme", "cnpj": "11.111.111/0001-11", "email": "acme@example.com",
    }).json()
    ana = client.post("/api/consultants", json={"code": "ANA", "name": "Ana", "password": "segredo"}).json()
    service = client.post("/api/services", json={
        "code": "S001", "clientId": acme["id"], "description": "Projeto Portal", "hourlyRate": "100.00",
    }).json()
    return {"client": acme, "consultant": ana, "service": service}


@pytest.fixture
def time_entry_payload(api_catalog):
    def build(**overrides) -> Dict[str, Any]:
        payload = {
            "date": "2024-03-10",
            "consultantId": api_catalog["consultant"]["id"],
            "clientId": api_catalog["client"]["id"],
            "serviceId": api_catalog["service"]["id"],
            "startTime": "09:00",
            "endTime": "17:00",
            "breakStartTime": "12:00",
            "breakEndTime": "13:00",
            "description": "Reunião e desenvolvimento",
        }
        payload.update(overrides)
        return {k: v for k, v in payload.items() if v is not None}
    return build
