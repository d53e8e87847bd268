# timebill/adapters/outbound/persistence/models/base_model.py

from sqlalchemy.orm import declarative_base

# ─── Definição do Base ─────────────────────────────────────────────────────────
# Cria a classe pai de todos os modelos ORM para controle de metadados
Base = declarative_base()
# ────────────────────────────────────────────────────────────────────────────────
