# timebill/shared/__init__.py
