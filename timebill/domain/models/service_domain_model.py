# timebill/domain/models/service_domain_model.py

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from timebill.domain.models.client_domain_model import Client


@dataclass
class ServiceType:
    """Domain model for a service category (used to group billing)."""
    id: int
    code: str
    description: str


@dataclass
class Service:
    """Domain model for a billable service offered to one client."""
    id: int
    code: str
    client_id: int
    description: str
    hourly_rate: Decimal
    service_type_id: Optional[int] = None


@dataclass
class ServiceWithClient:
    """A service joined with its owning client."""
    service: Service
    client: Client
