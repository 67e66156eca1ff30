"""Reconciliation of ORM-model and database column differences."""

__version__ = "0.1.0"
