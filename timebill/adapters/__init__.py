# timebill/adapters/__init__.py
