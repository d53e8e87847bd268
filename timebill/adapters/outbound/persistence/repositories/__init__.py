# timebill/adapters/outbound/persistence/repositories/__init__.py

from timebill.adapters.outbound.persistence.repositories.memory_repositories import InMemoryStorage
from timebill.adapters.outbound.persistence.repositories.sql_repositories import SqlAlchemyStorage

__all__ = ["InMemoryStorage", "SqlAlchemyStorage"]
