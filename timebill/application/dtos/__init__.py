# timebill/application/dtos/__init__.py
