# timebill/__init__.py

"""Consultancy time tracking and billing API."""

__version__ = "1.0.0"
