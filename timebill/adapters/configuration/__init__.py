# timebill/adapters/configuration/__init__.py
