"""Persistence adapters feeding the ledger services."""
