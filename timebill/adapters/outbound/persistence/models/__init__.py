# timebill/adapters/outbound/persistence/models/__init__.py

"""
Módulo de modelos de dados.

Este módulo exporta todos os modelos SQLAlchemy do sistema,
facilitando a importação e uso em outros módulos.
"""

# Importar Base
from timebill.adapters.outbound.persistence.models.base_model import Base

# Importar modelos
from timebill.adapters.outbound.persistence.models.client_model import ClientModel
from timebill.adapters.outbound.persistence.models.consultant_model import ConsultantModel
from timebill.adapters.outbound.persistence.models.service_model import ServiceModel, ServiceTypeModel
from timebill.adapters.outbound.persistence.models.sector_model import SectorModel
from timebill.adapters.outbound.persistence.models.time_entry_model import TimeEntryModel

# Exportar todos os modelos
__all__ = [
    # Base
    "Base",

    # Modelos
    "ClientModel",
    "ConsultantModel",
    "ServiceModel",
    "ServiceTypeModel",
    "SectorModel",
    "TimeEntryModel",
]
