# timebill/adapters/outbound/__init__.py
