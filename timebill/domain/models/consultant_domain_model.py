# timebill/domain/models/consultant_domain_model.py

from dataclasses import dataclass


@dataclass
class Consultant:
    """Domain model for a consultant who logs hours."""
    id: int
    code: str
    name: str
    password: str  # This is already hashed
