# timebill/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
from timebill.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    client_endpoint,
    consultant_endpoint,
    report_endpoint,
    sector_endpoint,
    service_endpoint,
    service_type_endpoint,
    time_entry_endpoint,
)

api_router = APIRouter(prefix="/api")

# Incluir os routers dos endpoints
api_router.include_router(auth_endpoint.router, tags=["Auth"])
api_router.include_router(client_endpoint.router, prefix="/clients", tags=["Clients"])
api_router.include_router(consultant_endpoint.router, prefix="/consultants", tags=["Consultants"])
api_router.include_router(service_endpoint.router, prefix="/services", tags=["Services"])
api_router.include_router(service_type_endpoint.router, prefix="/service-types", tags=["Service Types"])
api_router.include_router(sector_endpoint.router, prefix="/sectors", tags=["Sectors"])
api_router.include_router(time_entry_endpoint.router, prefix="/time-entries", tags=["Time Entries"])

# Relatórios e faturamento
api_router.include_router(report_endpoint.dashboard_router, prefix="/dashboard", tags=["Dashboard"])
api_router.include_router(report_endpoint.report_router, prefix="/reports", tags=["Reports"])
api_router.include_router(report_endpoint.billing_router, prefix="/billing", tags=["Billing"])
