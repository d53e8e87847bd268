# timebill/domain/models/client_domain_model.py

from dataclasses import dataclass


@dataclass
class Client:
    """Domain model for a billed client."""
    id: int
    code: str
    name: str
    cnpj: str  # Tax identifier, unique
    email: str
