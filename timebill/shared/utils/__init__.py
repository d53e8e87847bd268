# timebill/shared/utils/__init__.py
