# timebill/application/__init__.py
