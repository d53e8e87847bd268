# timebill/application/ports/__init__.py
