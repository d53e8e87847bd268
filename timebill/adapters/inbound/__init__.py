# timebill/adapters/inbound/__init__.py
