# timebill/domain/models/sector_domain_model.py

from dataclasses import dataclass
from typing import Optional


@dataclass
class Sector:
    """Domain model for a sector; it may exist without any client."""
    id: int
    code: str
    description: str
    client_id: Optional[int] = None
