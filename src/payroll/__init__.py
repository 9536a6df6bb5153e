"""Payroll ledger: interactive console ledger for employee compensation."""

__version__ = "0.1.0"
